"""
Theme membership resolver - which token sets belong to which theme.

A theme never lists its sets directly. Its membership is the global set
list minus the theme's exclusions, recomputed on every build, so adding a
token set to the metadata adds it to every theme that does not exclude it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import ThemeNotFoundError
from chuk_mcp_tokens.models.theme import Theme, ThemeDefinition

logger = logging.getLogger(__name__)


class ThemeMembershipResolver:
    """
    Resolves theme definitions against the discovered token sets.

    Order of the included sets follows metadata discovery order, which is
    also the load order that decides overrides for duplicate paths.
    """

    def __init__(self, all_sets: Iterable[str], definitions: Iterable[ThemeDefinition]):
        """
        Initialize the resolver.

        Args:
            all_sets: Every token set name, in discovery order
            definitions: Declared themes with their exclusions
        """
        self.all_sets = list(all_sets)
        self.definitions = {d.name: d for d in definitions}

    @property
    def theme_names(self) -> list[str]:
        return list(self.definitions)

    def get_definition(self, name: str) -> ThemeDefinition:
        definition = self.definitions.get(name)
        if definition is None:
            raise ThemeNotFoundError(ErrorMessages.THEME_NOT_FOUND.format(name=name))
        return definition

    def included_sets(self, name: str) -> list[str]:
        """
        Token sets for a theme: every set not excluded by exact name.

        Raises:
            ThemeNotFoundError: If the theme is not declared
        """
        excluded = set(self.get_definition(name).excluded_sets)

        unknown = excluded.difference(self.all_sets)
        if unknown:
            logger.debug(f"Theme '{name}' excludes unknown token sets: {sorted(unknown)}")

        return [token_set for token_set in self.all_sets if token_set not in excluded]

    def resolve_theme(self, name: str) -> Theme:
        definition = self.get_definition(name)
        return Theme(
            name=definition.name,
            token_sets=self.included_sets(name),
            selector=definition.selector,
            structural=definition.structural,
        )

    def resolve(self) -> list[Theme]:
        """Resolve every declared theme, in declaration order."""
        return [self.resolve_theme(name) for name in self.definitions]
