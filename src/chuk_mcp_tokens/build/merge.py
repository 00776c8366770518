"""
JSON merge - folds the per-theme JSON documents into one file.

Runs after every theme has been built. Each document is tagged with its
theme name, the tagged documents are keyed by that name in one combined
document, and the per-theme files are deleted. A failure here is logged
and returned; it never raises and never touches the CSS output.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from chuk_mcp_tokens.constants import COMBINED_FILE, FILE_TAG_KEY

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of a merge."""

    path: Path | None = None
    themes: list[str] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def _read_document(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def merge_theme_documents(
    json_dir: Path,
    theme_names: list[str],
    combined_file: str = COMBINED_FILE,
    keep_file_tag: bool = True,
) -> MergeResult:
    """
    Merge '<json_dir>/<theme>.json' files into '<json_dir>/<combined_file>'.

    Args:
        json_dir: Directory holding the per-theme documents
        theme_names: Themes to merge, in output order
        combined_file: Name of the combined document
        keep_file_tag: Keep the nameOfFile tag inside each theme document

    Returns:
        MergeResult; error is set and nothing is written or deleted when
        any document cannot be read
    """
    paths = [json_dir / f"{name}.json" for name in theme_names]

    try:
        merged: dict[str, Any] = {}
        for name, path in zip(theme_names, paths, strict=True):
            document = _read_document(path)
            document[FILE_TAG_KEY] = name
            merged[document[FILE_TAG_KEY]] = document

        if not keep_file_tag:
            for document in merged.values():
                document.pop(FILE_TAG_KEY, None)

        json_dir.mkdir(parents=True, exist_ok=True)
        output_path = json_dir / combined_file
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(merged, f, indent=2)

        for path in paths:
            path.unlink()
    except (OSError, ValueError) as e:
        logger.error(f"Error combining JSON files: {e}")
        return MergeResult(themes=list(theme_names), error=str(e))

    logger.info(f"Combined {len(theme_names)} theme documents into {output_path}")
    return MergeResult(path=output_path, themes=list(theme_names), removed=paths)
