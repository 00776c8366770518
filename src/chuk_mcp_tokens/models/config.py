"""
Build configuration model.

Every option the pipeline recognizes lives here, including the formatting
modes that differ between theme pipelines (inset shadows, formula rounding,
file tags in the combined JSON).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tokens.constants import (
    COMBINED_FILE,
    DEFAULT_FALLBACK_EXCLUDED_NAMESPACES,
    DEFAULT_PREFIX,
    DEFAULT_REFERENCEABLE_SETS,
    METADATA_FILE,
    NameCase,
    RoundingMode,
)
from chuk_mcp_tokens.models.theme import ThemeDefinition


def _default_themes() -> list[ThemeDefinition]:
    return [
        ThemeDefinition(
            name="light",
            selector=":root, .light",
            excluded_sets=["dark", "semantics/mutable", "semantics/color attendee"],
        ),
        ThemeDefinition(
            name="dark",
            selector=".dark",
            excluded_sets=["light", "semantics/color attendee", "semantics/mutable"],
        ),
        ThemeDefinition(
            name="attendee",
            selector=".attendee",
            excluded_sets=["semantics/mutable"],
        ),
        ThemeDefinition(
            name="mutable",
            selector=".dark",
            excluded_sets=["semantics/color attendee"],
        ),
        ThemeDefinition(
            name="root",
            selector=":root",
            excluded_sets=["semantics/attendee", "semantics/mutable"],
            structural=True,
        ),
    ]


class BuildConfig(BaseModel):
    """Configuration for one build invocation."""

    # Locations (relative paths resolve against the build root)
    tokens_dir: Path = Field(default=Path("tokens"))
    metadata_file: str = Field(default=METADATA_FILE)
    css_dir: Path = Field(default=Path("css"))
    json_dir: Path = Field(default=Path("doc"))
    combined_file: str = Field(default=COMBINED_FILE)

    # CSS output
    prefix: str = Field(default=DEFAULT_PREFIX, description="Custom property prefix")
    output_references: bool = Field(
        default=True,
        description="Emit var() references for aliased tokens",
    )
    referenceable_sets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REFERENCEABLE_SETS),
        description="File path fragments whose aliases stay as references",
    )
    namespace_filter: bool = Field(
        default=True,
        description="Only emit tokens from files under the theme's namespace",
    )
    fallback_excluded_namespaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FALLBACK_EXCLUDED_NAMESPACES),
    )
    name_case: NameCase = Field(
        default=NameCase.KEBAB,
        description="Custom property naming: kebab (--rolo-font-size) or camel (--roloFontSize)",
    )

    # Value formatting modes
    box_shadow_inset: bool = Field(default=False, description="Prefix shadows with 'inset '")
    rounding: RoundingMode = Field(default=RoundingMode.DIRECT)

    # JSON merge
    keep_file_tag: bool = Field(
        default=True,
        description="Keep the nameOfFile tag in combined.json",
    )

    themes: list[ThemeDefinition] = Field(default_factory=_default_themes)

    model_config = {"frozen": True}

    @field_validator("prefix")
    @classmethod
    def _strip_prefix_dashes(cls, value: str) -> str:
        return value.lstrip("-")

    def selector_for(self, theme_name: str) -> str | None:
        """Selector for a theme, or None for names that are not declared."""
        for theme in self.themes:
            if theme.name == theme_name:
                return theme.selector
        return None

    def get_theme(self, theme_name: str) -> ThemeDefinition | None:
        for theme in self.themes:
            if theme.name == theme_name:
                return theme
        return None

    @classmethod
    def product_preset(cls, **overrides: Any) -> BuildConfig:
        """
        The four-theme product pipeline.

        No var() references, no namespace filtering and two-step rounding.
        """
        data: dict[str, Any] = {
            "output_references": False,
            "namespace_filter": False,
            "rounding": RoundingMode.TWO_STEP,
            "themes": [
                ThemeDefinition(
                    name="product_dark",
                    selector=".dark",
                    excluded_sets=["dark", "semantics/mutable", "semantics/color attendee"],
                ),
                ThemeDefinition(
                    name="product_light",
                    selector=":root, .light",
                    excluded_sets=["dark", "semantics/mutable"],
                ),
                ThemeDefinition(
                    name="attendee_light",
                    selector=".attendee_light",
                    excluded_sets=["light", "semantics/color attendee"],
                ),
                ThemeDefinition(
                    name="attendee_dark",
                    selector=".attendee_dark",
                    excluded_sets=["light"],
                ),
            ],
        }
        data.update(overrides)
        return cls(**data)
