"""
Transform pipeline - an explicit, ordered list of rules.

Pipelines are built per platform and passed into the build step. Value
rules run first, in order, each seeing the output of the previous one.
The name rule runs last.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_mcp_tokens.constants import NameCase, RoundingMode
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.transforms.base import NameRule, ValueRule
from chuk_mcp_tokens.transforms.name import CamelNameRule, KebabNameRule
from chuk_mcp_tokens.transforms.value import default_value_rules

logger = logging.getLogger(__name__)


class TransformPipeline:
    """
    Applies value rules and a name rule to tokens.

    A value rule that returns None drops the token: later value rules are
    skipped and the token keeps value=None so formatters omit it.
    """

    def __init__(
        self,
        value_rules: Iterable[ValueRule] = (),
        name_rule: NameRule | None = None,
    ):
        self.value_rules: list[ValueRule] = list(value_rules)
        self.name_rule = name_rule

    def transform(self, token: Token) -> Token:
        """Run every matching rule over one token."""
        for rule in self.value_rules:
            if token.value is None:
                break
            if rule.matches(token):
                token = token.with_value(rule.apply(token))
                if token.value is None:
                    logger.debug(f"{rule.name} dropped token {token.dotted_path}")

        if self.name_rule is not None:
            token = token.with_name(self.name_rule.apply(token))
        return token

    def transform_all(self, tokens: Iterable[Token]) -> list[Token]:
        """Transform tokens, keeping their order."""
        return [self.transform(token) for token in tokens]

    @property
    def rule_names(self) -> list[str]:
        names = [rule.name for rule in self.value_rules]
        if self.name_rule is not None:
            names.append(self.name_rule.name)
        return names

    @classmethod
    def for_css(
        cls,
        prefix: str | None = None,
        inset: bool = False,
        rounding: RoundingMode = RoundingMode.DIRECT,
        name_case: NameCase = NameCase.KEBAB,
    ) -> TransformPipeline:
        """Value rules, color normalization and prefixed custom property names."""
        name_rule: NameRule
        if name_case == NameCase.CAMEL:
            name_rule = CamelNameRule(prefix)
        else:
            name_rule = KebabNameRule(prefix)
        rules = default_value_rules(inset=inset, rounding=rounding, css_colors=True)
        return cls(rules, name_rule)

    @classmethod
    def for_json(
        cls,
        inset: bool = False,
        rounding: RoundingMode = RoundingMode.DIRECT,
    ) -> TransformPipeline:
        """Value rules plus camelCase names, no prefix."""
        return cls(default_value_rules(inset=inset, rounding=rounding), CamelNameRule())
