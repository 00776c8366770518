"""
Exceptions raised by the token pipeline.

Only MetadataError is fatal to a build. Everything else is caught at the
theme or merge level by the orchestrator.
"""


class TokenBuildError(Exception):
    """Base class for token pipeline errors."""


class MetadataError(TokenBuildError):
    """The token metadata could not be read. No theme can be resolved."""


class TokenSetLoadError(TokenBuildError):
    """A token set file is missing or malformed."""

    def __init__(self, message: str, token_set: str):
        super().__init__(message)
        self.token_set = token_set


class ThemeNotFoundError(TokenBuildError):
    """A theme name was not declared in the build configuration."""


class ConfigError(TokenBuildError):
    """The build configuration file is invalid."""
