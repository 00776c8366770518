"""
Token dictionary - loading token sets and resolving aliases.

Produces the flat property list (with file provenance) that the
transforms and formatters work on.
"""

from chuk_mcp_tokens.dictionary.loader import TokenSetLoader, flatten_metadata
from chuk_mcp_tokens.dictionary.resolver import ReferenceResolver, build_dictionary

__all__ = [
    "ReferenceResolver",
    "TokenSetLoader",
    "build_dictionary",
    "flatten_metadata",
]
