"""Schema document exports."""

from .document_model import SchemaDocument
from .schema_nodes import SchemaNode, merge_nodes, normalize_node

__all__ = [
    "SchemaDocument",
    "SchemaNode",
    "merge_nodes",
    "normalize_node",
]
