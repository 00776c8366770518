"""
Nested JSON formatter - tokens as a document keyed by camelCased path.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.transforms.name import kebab_to_camel

logger = logging.getLogger(__name__)


def format_nested_json(tokens: Iterable[Token]) -> dict[str, Any]:
    """
    Build a nested document from a token list.

    Each path segment is camelCased and becomes a key; the last segment
    holds the value. An existing container is never replaced by a leaf,
    and a container replaces an earlier leaf, so the same set of paths
    always produces the same structure.

    Args:
        tokens: Transformed tokens; dropped tokens are skipped

    Returns:
        Nested dict in first-encounter key order
    """
    document: dict[str, Any] = {}
    for token in tokens:
        if token.value is None or not token.path:
            continue

        keys = [kebab_to_camel(segment) for segment in token.path]
        node = document
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                if key in node:
                    logger.debug(f"Replacing leaf '{key}' with a group for {token.dotted_path}")
                child = {}
                node[key] = child
            node = child

        leaf = keys[-1]
        if isinstance(node.get(leaf), dict):
            logger.debug(f"Keeping group '{leaf}', skipping leaf {token.dotted_path}")
            continue
        node[leaf] = token.value.to_json()

    return document


def render_nested_json(tokens: Iterable[Token]) -> str:
    """Nested document serialized with two-space indentation."""
    return json.dumps(format_nested_json(tokens), indent=2)
