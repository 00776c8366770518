"""
Token set loader - reads metadata and token set files.

Token sets live as JSON files under a tokens directory, one file per set:
'semantics/mutable' is read from '<tokens_dir>/semantics/mutable.json'.
Parsed files are cached for the lifetime of the loader and never mutated,
so one loader can serve every theme in a build.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from chuk_mcp_tokens.constants import METADATA_FILE, ErrorMessages
from chuk_mcp_tokens.errors import MetadataError, TokenSetLoadError
from chuk_mcp_tokens.models.token import TokenSet

logger = logging.getLogger(__name__)


def flatten_metadata(data: dict[str, Any]) -> list[str]:
    """
    Flatten a metadata document into an ordered list of token set names.

    Every group's list is appended in document order. Scalar group values
    are appended as-is.
    """
    names: list[str] = []
    for group in data.values():
        if isinstance(group, list):
            names.extend(str(item) for item in group)
        else:
            names.append(str(group))
    return names


class TokenSetLoader:
    """
    Loads token metadata and token sets from a directory.
    """

    def __init__(self, tokens_dir: Path, metadata_file: str = METADATA_FILE):
        """
        Initialize the loader.

        Args:
            tokens_dir: Directory holding the token set files
            metadata_file: Name of the metadata file inside tokens_dir
        """
        self.tokens_dir = tokens_dir
        self.metadata_file = metadata_file
        self._cache: dict[str, TokenSet] = {}

    @property
    def metadata_path(self) -> Path:
        return self.tokens_dir / self.metadata_file

    def load_metadata(self) -> list[str]:
        """
        Read the metadata file and return every token set name, in order.

        Raises:
            MetadataError: If the file is missing or not a JSON object
        """
        path = self.metadata_path
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise MetadataError(ErrorMessages.METADATA_NOT_FOUND.format(path=path)) from e
        except (OSError, json.JSONDecodeError) as e:
            raise MetadataError(ErrorMessages.METADATA_INVALID.format(path=path)) from e

        if not isinstance(data, dict):
            raise MetadataError(ErrorMessages.METADATA_INVALID.format(path=path))

        names = flatten_metadata(data)
        logger.debug(f"Loaded {len(names)} token sets from {path}")
        return names

    def path_for(self, name: str) -> Path:
        return self.tokens_dir / f"{name}.json"

    def provenance_for(self, name: str) -> str:
        """File path recorded on tokens, relative to the tokens directory's parent."""
        return f"{self.tokens_dir.name}/{name}.json"

    def get_token_set(self, name: str) -> TokenSet:
        """
        Get a token set by name, loading it on first use.

        Raises:
            TokenSetLoadError: If the file is missing or not valid JSON
        """
        if name in self._cache:
            return self._cache[name]

        path = self.path_for(name)
        try:
            with open(path, encoding="utf-8") as f:
                tree = json.load(f)
        except FileNotFoundError as e:
            raise TokenSetLoadError(
                ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=name, path=path), name
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise TokenSetLoadError(
                ErrorMessages.TOKEN_SET_INVALID.format(name=name, path=path), name
            ) from e

        if not isinstance(tree, dict):
            raise TokenSetLoadError(
                ErrorMessages.TOKEN_SET_INVALID.format(name=name, path=path), name
            )

        token_set = TokenSet(name=name, file_path=self.provenance_for(name), tree=tree)
        self._cache[name] = token_set
        return token_set

    def get_token_sets(self, names: list[str]) -> list[TokenSet]:
        """Load several token sets, keeping the given order."""
        return [self.get_token_set(name) for name in names]

    def clear_cache(self) -> None:
        """Clear the token set cache."""
        self._cache.clear()
