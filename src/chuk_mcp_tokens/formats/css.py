"""
CSS formatter - renders tokens as custom properties in one selector block.

When references are enabled, an aliased token from a referenceable token
set is emitted as var(--<prefix>-<alias>) rather than its literal value.
Themes can then share property names while pointing at different
underlying aliases at runtime.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from chuk_mcp_tokens.constants import DEFAULT_REFERENCEABLE_SETS, DEFAULT_SELECTOR, NameCase
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.transforms.name import kebab_to_camel, to_kebab

_UPPER = re.compile(r"[A-Z]")
_ALIAS = re.compile(r"\{[^{}]+\}")


def make_variable(expression: str) -> str:
    """
    Turn an alias expression into a custom property name.

    Examples:
        >>> make_variable("{color.brandPrimary}")
        'color-brand-primary'
    """
    text = expression.replace("{", "", 1).replace("}", "", 1).replace(".", "-")
    return _UPPER.sub(lambda m: "-" + m.group(0).lower(), text)


class CssFormatter:
    """
    Renders a token list into '<selector> { --name: value; }'.
    """

    def __init__(
        self,
        selector: str | None = None,
        prefix: str | None = None,
        output_references: bool = False,
        referenceable_sets: Iterable[str] = DEFAULT_REFERENCEABLE_SETS,
        name_case: NameCase = NameCase.KEBAB,
    ):
        """
        Initialize the formatter.

        Args:
            selector: CSS selector; None renders as ':root'
            prefix: Custom property prefix used in var() references
            output_references: Emit var() references for aliased tokens
            referenceable_sets: File path fragments whose aliases are kept
            name_case: Naming convention of the custom properties
        """
        self.selector = selector or DEFAULT_SELECTOR
        self.prefix = (prefix or "").lstrip("-")
        self.output_references = output_references
        self.referenceable_sets = list(referenceable_sets)
        self.name_case = name_case

    def is_referenceable(self, token: Token) -> bool:
        return any(fragment in token.file_path for fragment in self.referenceable_sets)

    def uses_reference(self, token: Token) -> bool:
        """Whether the token renders as a var() reference."""
        original = token.original_value
        if not self.output_references or token.value is None:
            return False
        if not isinstance(original, str) or not _ALIAS.search(original):
            return False
        return original != token.value.render() and self.is_referenceable(token)

    def reference_for(self, token: Token) -> str:
        variable = make_variable(str(token.original_value))
        if self.prefix:
            variable = f"{self.prefix}-{variable}"
        if self.name_case == NameCase.CAMEL:
            variable = kebab_to_camel(variable)
        return f"var(--{variable})"

    def fallback_name(self, token: Token) -> str:
        name = to_kebab(token.path)
        return kebab_to_camel(name) if self.name_case == NameCase.CAMEL else name

    def render_declaration(self, token: Token) -> str:
        """One '  --name: value;' line, without the newline."""
        assert token.value is not None
        name = token.name or self.fallback_name(token)
        value = self.reference_for(token) if self.uses_reference(token) else token.value.render()
        return f"  --{name}: {value};"

    def format(self, tokens: Iterable[Token]) -> str:
        """Render tokens in order. Dropped tokens are skipped."""
        lines = [f"{self.selector} {{"]
        lines.extend(self.render_declaration(token) for token in tokens if token.value is not None)
        lines.append("}")
        return "\n".join(lines) + "\n"
