"""Reference resolution exports."""

from .reference_resolver import (
    REF_KEY,
    ReferenceDepthError,
    ReferenceResolutionError,
    ReferenceResolver,
    pointer_basename,
    pointer_fragments,
)

__all__ = [
    "REF_KEY",
    "ReferenceDepthError",
    "ReferenceResolutionError",
    "ReferenceResolver",
    "pointer_basename",
    "pointer_fragments",
]
