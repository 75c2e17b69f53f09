"""Prefix to namespace URI mapping for namespace-aware queries.
"""

from collections.abc import Mapping
from types import MappingProxyType

__all__ = ['XML_NS_PREFIX', 'XML_NS_URI', 'XMLNS_ATTRIBUTE',
           'XMLNS_ATTRIBUTE_NS_URI', 'NULL_NS_URI',
           'NamespaceMapping', 'namespace_mapping']

XML_NS_PREFIX = 'xml'
XML_NS_URI = 'http://www.w3.org/XML/1998/namespace'
XMLNS_ATTRIBUTE = 'xmlns'
XMLNS_ATTRIBUTE_NS_URI = 'http://www.w3.org/2000/xmlns/'
NULL_NS_URI = ''

_RESERVED = {
    XML_NS_PREFIX: XML_NS_URI,
    XMLNS_ATTRIBUTE: XMLNS_ATTRIBUTE_NS_URI,
}


class NamespaceMapping(Mapping):
    """Immutable bidirectional prefix/URI lookup.

    Usage::

        >>> ns = NamespaceMapping({'s': 'http://example.com/ns/1.0'})
        >>> ns.namespace_uri('s')
        'http://example.com/ns/1.0'
        >>> ns.prefix('http://example.com/ns/1.0')
        's'
        >>> ns.namespace_uri('xml')
        'http://www.w3.org/XML/1998/namespace'
        >>> ns.namespace_uri('undeclared')
        ''
        >>> print(ns.prefix('http://example.com/undeclared'))
        None

    The ``xml`` and ``xmlns`` prefixes are always bound to their fixed URIs,
    whatever the input says.  When several prefixes share a URI, the reverse
    lookup returns the one that comes last in iteration order.

    As a ``Mapping`` the object behaves like the forward ``prefix -> URI``
    dict, including the two reserved prefixes.
    """
    def __init__(self, mappings=None):
        forward = dict(mappings) if mappings else {}
        forward.update(_RESERVED)
        reverse = {}
        for prefix, uri in forward.items():
            reverse[uri] = prefix
        self._forward = forward
        self._reverse = reverse

    @property
    def forward(self):
        return MappingProxyType(self._forward)

    @property
    def reverse(self):
        return MappingProxyType(self._reverse)

    def namespace_uri(self, prefix):
        return self._forward.get(prefix, NULL_NS_URI)

    def prefix(self, uri):
        return self._reverse.get(uri)

    def prefixes(self, uri):
        prefix = self._reverse.get(uri)
        if prefix is None:
            return iter(())
        return iter((prefix,))

    def xpath_namespaces(self):
        """Plain ``dict`` suitable for lxml's ``namespaces`` argument.

        Leaves out the reserved prefixes, which libxml2 handles itself, and
        the empty default prefix, which XPath 1.0 cannot use.
        """
        return dict(
            (prefix, uri) for prefix, uri in self._forward.items()
            if prefix and prefix not in _RESERVED)

    def __getitem__(self, prefix):
        return self._forward[prefix]

    def __iter__(self):
        return iter(self._forward)

    def __len__(self):
        return len(self._forward)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._forward)


def namespace_mapping(mappings):
    if isinstance(mappings, NamespaceMapping):
        return mappings
    return NamespaceMapping(mappings)
