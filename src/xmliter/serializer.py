"""Serialization of documents and elements without XSLT.
"""

import codecs
import copy

from lxml import etree

__all__ = ['Serializer']


class Serializer(object):
    """Renders a document or element as XML text.

    With ``indent`` enabled, nested elements are placed on their own lines
    and indented by ``indent_width`` spaces per level.  The node passed in
    is never modified; indentation is applied to a copy.

        >>> from lxml import etree
        >>> root = etree.XML('<root><child/></root>')
        >>> print(Serializer().to_string(root), end='')
        <root>
          <child/>
        </root>
        >>> Serializer(indent=False, omit_declaration=False).to_string(root)
        "<?xml version='1.0' encoding='UTF-8'?>\\n<root><child/></root>"
    """
    def __init__(self, indent=True, indent_width=2, omit_declaration=True,
                 encoding='UTF-8'):
        if indent_width < 0:
            raise ValueError("indent_width must not be negative")
        codecs.lookup(encoding)
        self.indent = indent
        self.indent_width = indent_width
        self.omit_declaration = omit_declaration
        self.encoding = encoding

    def replace(self, **options):
        settings = dict(
            indent=self.indent, indent_width=self.indent_width,
            omit_declaration=self.omit_declaration, encoding=self.encoding)
        settings.update(options)
        return self.__class__(**settings)

    def indenting(self, width=2):
        return self.replace(indent=True, indent_width=width)

    def _prepare(self, node):
        if not self.indent:
            return node
        node = copy.deepcopy(node)
        etree.indent(node, space=' ' * self.indent_width)
        return node

    def to_bytes(self, node):
        return etree.tostring(
            self._prepare(node), encoding=self.encoding,
            xml_declaration=not self.omit_declaration,
            pretty_print=self.indent)

    def to_string(self, node):
        if self.omit_declaration:
            return etree.tostring(
                self._prepare(node), encoding='unicode',
                pretty_print=self.indent)
        return self.to_bytes(node).decode(self.encoding)

    def write(self, node, target):
        """Write ``node`` to a file name or binary file object."""
        data = self.to_bytes(node)
        if hasattr(target, 'write'):
            target.write(data)
        else:
            with open(target, 'wb') as f:
                f.write(data)

    def __repr__(self):
        return '%s(indent=%r, indent_width=%r, omit_declaration=%r, encoding=%r)' % (
            self.__class__.__name__, self.indent, self.indent_width,
            self.omit_declaration, self.encoding)
