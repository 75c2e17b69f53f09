"""Entry point bundling the lxml engines behind one configured object.

A `Toolkit` builds its parser and serializer when it is created and is then
handed to whatever code needs to parse, query or serialize::

    >>> from xmliter import children, elements
    >>> toolkit = Toolkit()
    >>> tree = toolkit.parse_string('<root><a/><!-- note --><b/></root>')
    >>> [e.tag for e in elements(children(tree.getroot()))]
    ['a', 'b']
    >>> print(toolkit.to_string(tree), end='')
    <root>
      <a/>
      <!-- note -->
      <b/>
    </root>
"""

import logging

from lxml import etree

from xmliter.config import ToolkitConfig
from xmliter.errors import QueryCompileError, ToolkitConfigurationError
from xmliter.namespaces import namespace_mapping
from xmliter.query import Query
from xmliter.serializer import Serializer

__all__ = ['Toolkit']

logger = logging.getLogger(__name__)


class Toolkit(object):
    """Parser, streaming reader, query compiler and serializer.

    Pass either a `ToolkitConfig` or the same options as keywords.  The
    object holds no per-document state and can be shared.
    """
    def __init__(self, config=None, **options):
        if config is None:
            config = ToolkitConfig(**options)
        elif options:
            settings = config.as_dict()
            settings.update(options)
            config = ToolkitConfig(**settings)
        self.config = config
        try:
            self.parser = etree.XMLParser(**config.parser_options())
        except (TypeError, ValueError) as e:
            raise ToolkitConfigurationError(
                "cannot create XML parser: %s" % e) from e
        self.serializer = Serializer(**config.serializer_options())
        logger.debug("created toolkit with %r", config)

    # documents

    def parse(self, source, base_url=None):
        """Parse a file name, URL or file object into an ``_ElementTree``.

        lxml reports malformed input and I/O failures; those errors are
        not caught here.
        """
        tree = etree.parse(source, self.parser, base_url=base_url)
        if self.config.xinclude:
            tree.xinclude()
        return tree

    def parse_string(self, text, base_url=None):
        """Parse a document held in memory.

        Bytes are decoded as their XML declaration says.  A ``str`` is
        already decoded, so lxml rejects one that declares an encoding
        with a ``ValueError``.
        """
        root = etree.fromstring(text, self.parser, base_url=base_url)
        tree = root.getroottree()
        if self.config.xinclude:
            tree.xinclude()
        return tree

    def iterparse(self, source, events=('end',), tag=None):
        """Streaming reader yielding ``(event, node)`` pairs."""
        config = self.config
        return etree.iterparse(
            source, events=events, tag=tag,
            remove_blank_text=config.remove_blank_text,
            resolve_entities=config.resolve_entities,
            no_network=config.no_network,
            huge_tree=config.huge_tree)

    # queries

    def xpath(self, expression, namespaces=None, extensions=None):
        return Query(
            expression, namespaces, smart_strings=self.config.smart_strings,
            regexp=self.config.regexp, extensions=extensions)

    def css(self, selector, namespaces=None):
        """Compile a CSS selector into a `Query`.

        Requires the ``cssselect`` package.
        """
        try:
            from lxml.cssselect import (
                CSSSelector, SelectorSyntaxError, ExpressionError)
        except ImportError as e:
            raise ToolkitConfigurationError(
                "CSS selectors are unavailable: %s" % e) from e
        namespaces = namespace_mapping(namespaces)
        try:
            path = CSSSelector(
                selector, namespaces=namespaces.xpath_namespaces()).path
        except (SelectorSyntaxError, ExpressionError, etree.XPathError) as e:
            raise QueryCompileError(
                "invalid selector %r: %s" % (selector, e), selector) from e
        return Query(
            path, namespaces, smart_strings=self.config.smart_strings,
            regexp=self.config.regexp, source=selector)

    def nodes(self, query, context, **variables):
        if not isinstance(query, Query):
            query = self.xpath(query)
        return query.nodes(context, **variables)

    # output

    def to_string(self, node):
        return self.serializer.to_string(node)

    def transform(self, source, target):
        """Identity transformation: parse ``source`` and write it to
        ``target`` unindented and with an XML declaration.
        """
        tree = self.parse(source)
        self.serializer.replace(indent=False, omit_declaration=False).write(
            tree, target)
        return tree

    def __repr__(self):
        return '<%s %s with %r>' % (
            self.__class__.__name__, hex(abs(id(self)))[2:], self.config)
