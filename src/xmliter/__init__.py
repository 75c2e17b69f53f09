# this is a package

"""Lazy, re-iterable views over lxml node collections.

The package wraps the lxml toolkit (parsing, streaming, serialization and
XPath) and adds composable ``map``/``filter`` views and a bidirectional
namespace mapping for namespace-aware queries.
"""

from importlib import metadata as _metadata

from xmliter.errors import (
    XmlIterError, InvalidSequenceState, ToolkitConfigurationError,
    QueryError, QueryCompileError, QueryEvaluationFailed)
from xmliter.sequences import (
    LazySequence, NodeSequence, MappedSequence, FilteredSequence,
    FilterCursor, nodes, mapped, filtered)
from xmliter.nodetypes import (
    NodeKind, node_kind, of_kind, elements, children, elements_by_tag)
from xmliter.namespaces import NamespaceMapping, namespace_mapping
from xmliter.query import Query
from xmliter.serializer import Serializer
from xmliter.config import ToolkitConfig
from xmliter.toolkit import Toolkit

try:
    __version__ = _metadata.version("xmliter")
except _metadata.PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = None

__all__ = [
    'XmlIterError', 'InvalidSequenceState', 'ToolkitConfigurationError',
    'QueryError', 'QueryCompileError', 'QueryEvaluationFailed',
    'LazySequence', 'NodeSequence', 'MappedSequence', 'FilteredSequence',
    'FilterCursor', 'nodes', 'mapped', 'filtered',
    'NodeKind', 'node_kind', 'of_kind', 'elements', 'children',
    'elements_by_tag',
    'NamespaceMapping', 'namespace_mapping',
    'Query', 'Serializer', 'ToolkitConfig', 'Toolkit',
]
