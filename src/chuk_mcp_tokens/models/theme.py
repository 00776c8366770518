"""
Theme models - theme definitions and their resolved form.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import DEFAULT_SELECTOR


class ThemeDefinition(BaseModel):
    """A theme as declared in configuration: a name plus exclusions."""

    name: str = Field(..., description="Theme name, e.g. 'dark'")
    selector: str | None = Field(default=None, description="CSS selector, e.g. '.dark'")
    excluded_sets: list[str] = Field(
        default_factory=list,
        description="Token sets left out of this theme (exact names)",
    )
    structural: bool = Field(
        default=False,
        description="Seeds CSS defaults only; no JSON output",
    )

    model_config = {"frozen": True}


class Theme(BaseModel):
    """A resolved theme, ready to build."""

    name: str
    token_sets: list[str] = Field(default_factory=list)
    selector: str | None = None
    structural: bool = False

    model_config = {"frozen": True}

    @property
    def css_selector(self) -> str:
        """Selector to render; unknown themes fall back to :root."""
        return self.selector or DEFAULT_SELECTOR

    @property
    def css_file(self) -> str:
        return f"{self.name}.css"

    @property
    def json_file(self) -> str | None:
        """Per-theme JSON file name, None for structural themes."""
        if self.structural:
            return None
        return f"{self.name}.json"
