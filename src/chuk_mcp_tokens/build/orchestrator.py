"""
Build orchestrator - builds every theme, then merges the JSON output.

The pipeline:
    $metadata.json → token set list
    → ThemeMembershipResolver (sets per theme)
    → TokenSetLoader + ReferenceResolver (flat token list)
    → TransformPipeline (CSS and JSON variants)
    → CssFormatter / nested JSON → files
    → merge per-theme JSON into combined.json

Themes build one after another. Only a metadata failure stops the run; a
failing theme is logged and the remaining themes still build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chuk_mcp_tokens.build.merge import MergeResult, merge_theme_documents
from chuk_mcp_tokens.dictionary import TokenSetLoader, build_dictionary
from chuk_mcp_tokens.formats import CssFormatter, render_nested_json
from chuk_mcp_tokens.models.config import BuildConfig
from chuk_mcp_tokens.models.theme import Theme
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.themes import ThemeMembershipResolver
from chuk_mcp_tokens.transforms import TransformPipeline

logger = logging.getLogger(__name__)


@dataclass
class ThemeBuildResult:
    """Files produced for one theme."""

    theme: str
    css_path: Path
    json_path: Path | None
    token_count: int


@dataclass
class BuildReport:
    """Result of a full build."""

    themes: list[ThemeBuildResult] = field(default_factory=list)
    failed_themes: dict[str, str] = field(default_factory=dict)
    merge: MergeResult | None = None

    @property
    def success(self) -> bool:
        merged = self.merge is None or self.merge.success
        return not self.failed_themes and merged

    @property
    def css_files(self) -> list[Path]:
        return [result.css_path for result in self.themes]


class BuildOrchestrator:
    """
    Runs the clean-build-merge cycle for every configured theme.
    """

    def __init__(
        self,
        config: BuildConfig | None = None,
        root: Path | None = None,
        loader: TokenSetLoader | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Build configuration (defaults if omitted)
            root: Directory that relative config paths resolve against
            loader: Token set loader; one is created from the config if omitted
        """
        self.config = config or BuildConfig()
        self.root = root or Path.cwd()
        self.tokens_dir = self.root / self.config.tokens_dir
        self.css_dir = self.root / self.config.css_dir
        self.json_dir = self.root / self.config.json_dir
        self.loader = loader or TokenSetLoader(self.tokens_dir, self.config.metadata_file)

        self.css_pipeline = TransformPipeline.for_css(
            prefix=self.config.prefix,
            inset=self.config.box_shadow_inset,
            rounding=self.config.rounding,
            name_case=self.config.name_case,
        )
        self.json_pipeline = TransformPipeline.for_json(
            inset=self.config.box_shadow_inset,
            rounding=self.config.rounding,
        )

    def load_metadata(self) -> list[str]:
        """All token set names. Raises MetadataError."""
        return self.loader.load_metadata()

    def resolve_themes(self, all_sets: list[str] | None = None) -> list[Theme]:
        """Resolve configured themes against the metadata."""
        if all_sets is None:
            all_sets = self.load_metadata()
        return ThemeMembershipResolver(all_sets, self.config.themes).resolve()

    def clean(self) -> list[Path]:
        """Delete previously generated CSS files. Returns the removed paths."""
        removed: list[Path] = []
        if not self.css_dir.exists():
            return removed
        for path in sorted(self.css_dir.iterdir()):
            if path.is_file():
                path.unlink()
                removed.append(path)
        if removed:
            logger.debug(f"Removed {len(removed)} files from {self.css_dir}")
        return removed

    def build_tokens(self, theme: Theme) -> list[Token]:
        """Load the theme's token sets and resolve aliases."""
        return build_dictionary(self.loader.get_token_sets(theme.token_sets))

    def in_namespace(self, theme: Theme, token: Token) -> bool:
        """
        CSS namespace filter.

        A token belongs to a theme when its file path mentions the theme.
        A structural theme takes everything outside the fallback namespaces.
        """
        if not self.config.namespace_filter:
            return True
        if theme.name in token.file_path:
            return True
        if theme.structural:
            return not any(
                namespace in token.file_path
                for namespace in self.config.fallback_excluded_namespaces
            )
        return False

    def css_formatter(self, theme: Theme) -> CssFormatter:
        return CssFormatter(
            selector=self.config.selector_for(theme.name),
            prefix=self.config.prefix,
            output_references=self.config.output_references,
            referenceable_sets=self.config.referenceable_sets,
            name_case=self.config.name_case,
        )

    def render_css(self, theme: Theme, tokens: list[Token]) -> str:
        transformed = self.css_pipeline.transform_all(
            token for token in tokens if self.in_namespace(theme, token)
        )
        return self.css_formatter(theme).format(transformed)

    def render_json(self, tokens: list[Token]) -> str:
        return render_nested_json(self.json_pipeline.transform_all(tokens))

    def build_theme(self, theme: Theme) -> ThemeBuildResult:
        """Build and write one theme's CSS and JSON files."""
        tokens = self.build_tokens(theme)

        self.css_dir.mkdir(parents=True, exist_ok=True)
        css_path = self.css_dir / theme.css_file
        css_path.write_text(self.render_css(theme, tokens), encoding="utf-8")

        json_path: Path | None = None
        if theme.json_file is not None:
            self.json_dir.mkdir(parents=True, exist_ok=True)
            json_path = self.json_dir / theme.json_file
            json_path.write_text(self.render_json(tokens), encoding="utf-8")

        logger.info(f"Built theme '{theme.name}' ({len(tokens)} tokens)")
        return ThemeBuildResult(
            theme=theme.name,
            css_path=css_path,
            json_path=json_path,
            token_count=len(tokens),
        )

    def merge(self, themes: list[Theme]) -> MergeResult:
        """Combine the JSON output of every non-structural theme."""
        return merge_theme_documents(
            self.json_dir,
            [theme.name for theme in themes if not theme.structural],
            combined_file=self.config.combined_file,
            keep_file_tag=self.config.keep_file_tag,
        )

    def build(self) -> BuildReport:
        """
        Run a full build.

        Returns:
            BuildReport with per-theme results, failures and the merge result

        Raises:
            MetadataError: If the metadata cannot be read
        """
        themes = self.resolve_themes()
        self.clean()
        logger.debug(f"CSS rules: {self.css_pipeline.rule_names}")
        logger.debug(f"JSON rules: {self.json_pipeline.rule_names}")

        report = BuildReport()
        for theme in themes:
            try:
                report.themes.append(self.build_theme(theme))
            except Exception as e:
                logger.exception(f"Failed to build theme '{theme.name}'")
                report.failed_themes[theme.name] = str(e)

        report.merge = self.merge(themes)
        return report


def build_themes(config: BuildConfig | None = None, root: Path | None = None) -> BuildReport:
    """Convenience wrapper around BuildOrchestrator.build()."""
    return BuildOrchestrator(config, root).build()
