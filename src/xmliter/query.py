"""Compiled XPath queries with typed results.

A `Query` compiles its expression once and can be evaluated against any
number of documents or elements.  Node-set results come back as a
`NodeSequence`::

    >>> from lxml import etree
    >>> root = etree.XML('<a><b>1</b><b>2</b></a>')
    >>> q = Query('/a/b')
    >>> [b.text for b in q.nodes(root)]
    ['1', '2']
    >>> q.string(root)
    '1'
    >>> Query('count(//b)').number(root)
    2.0
"""

import logging

from lxml import etree

from xmliter.errors import QueryCompileError, QueryEvaluationFailed
from xmliter.namespaces import namespace_mapping
from xmliter.sequences import NodeSequence

__all__ = ['Query']

logger = logging.getLogger(__name__)

# XPath conversion functions; the engine applies the XPath 1.0 rules.
_CONVERSIONS = ('string', 'number', 'boolean')


class Query(object):
    """An XPath expression compiled against a namespace mapping.

    ``source`` is the text the expression was derived from, e.g. a CSS
    selector, and is only used for messages.
    """
    def __init__(self, expression, namespaces=None, smart_strings=True,
                 regexp=True, extensions=None, source=None):
        self.expression = expression
        self.source = source if source is not None else expression
        self.namespaces = namespace_mapping(namespaces)
        options = dict(
            namespaces=self.namespaces.xpath_namespaces(),
            extensions=extensions, regexp=regexp)
        self._evaluate = self._compile(
            expression, smart_strings=smart_strings, **options)
        self._converters = {}
        for function in _CONVERSIONS:
            self._converters[function] = self._compile(
                '%s(%s)' % (function, expression), **options)
        logger.debug("compiled query %r", self.source)

    def _compile(self, expression, **options):
        try:
            return etree.XPath(expression, **options)
        except etree.XPathError as e:
            raise QueryCompileError(
                "invalid query %r: %s" % (self.source, e),
                self.source) from e

    def _run(self, evaluator, context, variables):
        try:
            return evaluator(context, **variables)
        except etree.XPathError as e:
            raise QueryEvaluationFailed(
                "evaluation of %r failed: %s" % (self.source, e),
                self.source) from e

    def evaluate(self, context, **variables):
        """Raw lxml result: list, string, float or bool."""
        return self._run(self._evaluate, context, variables)

    def nodes(self, context, **variables):
        result = self._run(self._evaluate, context, variables)
        if not isinstance(result, list):
            raise QueryEvaluationFailed(
                "query %r did not return a node-set: %r" % (
                    self.source, result),
                self.source)
        return NodeSequence(result)

    def string(self, context, **variables):
        return str(self._run(self._converters['string'], context, variables))

    def number(self, context, **variables):
        return self._run(self._converters['number'], context, variables)

    def boolean(self, context, **variables):
        return self._run(self._converters['boolean'], context, variables)

    def __call__(self, context, **variables):
        return self.nodes(context, **variables)

    def __repr__(self):
        return '<%s %s for %r>' % (
            self.__class__.__name__,
            hex(abs(id(self)))[2:],
            self.source)
