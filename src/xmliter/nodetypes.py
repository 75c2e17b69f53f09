"""Node kinds and kind-narrowing views.

lxml has no common node base class, so the kind of a node is derived from
its Python type and, for elements, from its ``tag``:

* documents are ``_ElementTree`` objects,
* comments, processing instructions and entities are elements whose tag is
  the corresponding factory function,
* text and attribute values come out of XPath as "smart" strings,
* namespace nodes come out of the ``namespace::`` axis as tuples.
"""

from enum import Enum

from lxml import etree

from xmliter.sequences import FilteredSequence, NodeSequence

__all__ = ['NodeKind', 'node_kind', 'of_kind', 'elements', 'children',
           'elements_by_tag']


class NodeKind(Enum):
    DOCUMENT = 'document'
    ELEMENT = 'element'
    TEXT = 'text'
    ATTRIBUTE = 'attribute'
    COMMENT = 'comment'
    PROCESSING_INSTRUCTION = 'processing-instruction'
    ENTITY_REFERENCE = 'entity-reference'
    NAMESPACE = 'namespace'


_SPECIAL_TAGS = {
    etree.Comment: NodeKind.COMMENT,
    etree.ProcessingInstruction: NodeKind.PROCESSING_INSTRUCTION,
    etree.Entity: NodeKind.ENTITY_REFERENCE,
}


def node_kind(node):
    """Return the `NodeKind` of ``node``, or None if it is not a node.

    Strings are classified as text unless lxml marked them as attribute
    values.  Plain strings (``smart_strings=False``) cannot be told apart
    and count as text.
    """
    if isinstance(node, etree._ElementTree):
        return NodeKind.DOCUMENT
    if etree.iselement(node):
        return _SPECIAL_TAGS.get(node.tag, NodeKind.ELEMENT)
    if isinstance(node, str):
        if getattr(node, 'is_attribute', False):
            return NodeKind.ATTRIBUTE
        return NodeKind.TEXT
    if _is_namespace_node(node):
        return NodeKind.NAMESPACE
    return None


def _is_namespace_node(node):
    # (prefix, uri) as returned by the namespace:: axis, prefix None for
    # the default namespace
    if not isinstance(node, tuple) or len(node) != 2:
        return False
    prefix, uri = node
    return isinstance(uri, str) and (prefix is None or isinstance(prefix, str))


class KindView(FilteredSequence):
    """Nodes of one `NodeKind`; everything else is skipped."""
    def __init__(self, source, kind):
        FilteredSequence.__init__(
            self, source, lambda node: node_kind(node) is kind)
        self.kind = kind

    def __repr__(self):
        return '<%s %s of %s>' % (
            self.__class__.__name__, hex(abs(id(self)))[2:], self.kind.value)


def of_kind(sequence, kind):
    return KindView(sequence, NodeKind(kind))


def elements(sequence):
    return KindView(sequence, NodeKind.ELEMENT)


def children(node):
    """Child nodes of an element or a document.

    The children of a document are its top-level comments and processing
    instructions around the root element.  Other nodes have no children.
    """
    if isinstance(node, etree._ElementTree):
        root = node.getroot()
        if root is None:
            return NodeSequence(())
        top_level = list(root.itersiblings(preceding=True))
        top_level.reverse()
        top_level.append(root)
        top_level.extend(root.itersiblings())
        return NodeSequence(top_level)
    if etree.iselement(node) and node_kind(node) is NodeKind.ELEMENT:
        return NodeSequence(node)
    return NodeSequence(())


def elements_by_tag(parent, tag='*'):
    """Descendant elements of ``parent`` matching ``tag`` in document order.

    ``tag`` follows lxml's tag matching: ``"{uri}local"``, ``"local"`` or
    ``"*"``.  For a document the root element itself is included.

    Matching is by expanded name, not by the name as written in the
    document as with DOM's ``getElementsByTagName``.  A plain ``"para"``
    only finds ``para`` elements in no namespace; in a default namespace
    use ``"{uri}para"`` (or ``"{*}para"`` for any namespace).
    """
    if isinstance(parent, etree._ElementTree):
        found = list(parent.iter(tag))
    else:
        found = list(parent.iterdescendants(tag))
    return elements(NodeSequence(found))
