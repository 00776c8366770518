#!/usr/bin/env python3
"""
Example: Building themed CSS and JSON from design tokens.

Writes a small token project to a temporary directory, builds the light,
dark and root themes, and prints the generated files.

Usage:
    python examples/build_themes.py
"""

import json
import tempfile
from pathlib import Path

from chuk_mcp_tokens import BuildConfig, BuildOrchestrator, ThemeDefinition

TOKEN_SETS = {
    "core": {
        "color": {
            "base": {
                "white": {"value": "#ffffff", "type": "color"},
                "black": {"value": "#0b0b0f", "type": "color"},
            }
        },
        "spacing": {
            "base": {"value": "8", "type": "spacing"},
            "md": {"value": "{spacing.base}*2", "type": "spacing"},
        },
        "typography": {
            "body": {
                "value": {"fontFamily": "Inter", "fontSize": "16px", "lineHeight": "24px"},
                "type": "typography",
            }
        },
    },
    "light": {"color": {"background": {"value": "{color.base.white}", "type": "color"}}},
    "dark": {"color": {"background": {"value": "{color.base.black}", "type": "color"}}},
    "semantics/color": {
        "color": {"surface": {"value": "{color.background}", "type": "color"}},
    },
    "semantics/shadow": {
        "shadow": {
            "raised": {
                "value": [
                    {"x": 0, "y": 1, "blur": 2, "color": "#0000001a"},
                    {"x": 0, "y": 4, "blur": 8, "spread": "-2px", "color": "#00000026"},
                ],
                "type": "boxShadow",
            }
        }
    },
}


def write_project(root: Path) -> None:
    """Write token sets and metadata under root/tokens."""
    tokens = root / "tokens"
    for name, tree in TOKEN_SETS.items():
        path = tokens / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(tree, indent=2))
    (tokens / "$metadata.json").write_text(json.dumps({"tokenSetOrder": list(TOKEN_SETS)}))


def main() -> None:
    """Build the example project."""
    print("CHUK Tokens Build Demo")
    print("=" * 40)
    print()

    config = BuildConfig(
        themes=[
            ThemeDefinition(name="light", selector=":root, .light", excluded_sets=["dark"]),
            ThemeDefinition(name="dark", selector=".dark", excluded_sets=["light"]),
            ThemeDefinition(name="root", selector=":root", structural=True),
        ]
    )

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        write_project(root)

        report = BuildOrchestrator(config, root=root).build()

        for result in report.themes:
            print(f"{result.css_path.name} ({result.token_count} tokens)")
            print(result.css_path.read_text())

        if report.merge and report.merge.path:
            print("combined.json:")
            print(report.merge.path.read_text())

        for name, error in report.failed_themes.items():
            print(f"Theme {name} failed: {error}")


if __name__ == "__main__":
    main()
