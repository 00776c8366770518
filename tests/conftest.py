"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.models import BuildConfig, ThemeDefinition

CORE_TOKENS = {
    "color": {
        "base": {
            "white": {"value": "#ffffff", "type": "color"},
            "black": {"value": "#000000", "type": "color"},
            "brandPrimary": {"value": "#3366ff", "type": "color"},
        }
    },
    "spacing": {"sm": {"value": "2*8", "type": "spacing"}},
    "lineHeight": {
        "body": {"value": "150%", "type": "lineHeights", "description": "1.5"},
    },
}

LIGHT_TOKENS = {"color": {"background": {"value": "{color.base.white}", "type": "color"}}}
DARK_TOKENS = {"color": {"background": {"value": "{color.base.black}", "type": "color"}}}
SEMANTIC_COLOR_TOKENS = {"color": {"surface": {"value": "{color.background}", "type": "color"}}}
SHADOW_TOKENS = {
    "shadow": {
        "card": {
            "value": [
                {"x": "0", "y": "2", "blur": "4", "spread": "0", "color": "#0000001a"},
                {"x": "0", "y": "8", "blur": "16", "color": "#00000026"},
            ],
            "type": "boxShadow",
        }
    }
}


def write_json(path: Path, data: Any) -> Path:
    """Write a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def token_project(temp_dir: Path) -> Path:
    """A project with core, light, dark, semantic color and shadow token sets."""
    tokens = temp_dir / "tokens"
    write_json(
        tokens / "$metadata.json",
        {
            "tokenSetOrder": [
                "core",
                "light",
                "dark",
                "semantics/color",
                "semantics/shadow",
            ]
        },
    )
    write_json(tokens / "core.json", CORE_TOKENS)
    write_json(tokens / "light.json", LIGHT_TOKENS)
    write_json(tokens / "dark.json", DARK_TOKENS)
    write_json(tokens / "semantics" / "color.json", SEMANTIC_COLOR_TOKENS)
    write_json(tokens / "semantics" / "shadow.json", SHADOW_TOKENS)
    return temp_dir


@pytest.fixture
def project_config() -> BuildConfig:
    """Light, dark and a structural root theme."""
    return BuildConfig(
        themes=[
            ThemeDefinition(name="light", selector=":root, .light", excluded_sets=["dark"]),
            ThemeDefinition(name="dark", selector=".dark", excluded_sets=["light"]),
            ThemeDefinition(name="root", selector=":root", structural=True),
        ]
    )
