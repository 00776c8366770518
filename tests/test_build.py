"""
Tests for the build pipeline.

Tests cover:
- BuildOrchestrator per-theme CSS and JSON output
- Namespace filtering and the structural root theme
- Cleaning, failure isolation and the JSON merge
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_tokens.build import BuildOrchestrator, build_themes, merge_theme_documents
from chuk_mcp_tokens.constants import NameCase
from chuk_mcp_tokens.errors import MetadataError
from chuk_mcp_tokens.models import BuildConfig, ThemeDefinition


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


class TestEndToEnd:
    """Small builds checked against exact output."""

    def test_formula_token_in_root_theme(self, temp_dir: Path):
        write_json(temp_dir / "tokens" / "$metadata.json", {"tokenSetOrder": ["root"]})
        write_json(temp_dir / "tokens" / "root.json", {"spacing": {"sm": {"value": "2*8"}}})
        config = BuildConfig(themes=[ThemeDefinition(name="root", structural=True)])

        report = BuildOrchestrator(config, root=temp_dir).build()

        assert report.success
        css = (temp_dir / "css" / "root.css").read_text()
        assert css == ":root {\n  --rolo-spacing-sm: 16px;\n}\n"

    def test_malformed_composite_keeps_other_tokens(self, temp_dir: Path):
        """A typography value with a list font family drops only that token."""
        write_json(temp_dir / "tokens" / "$metadata.json", {"tokenSetOrder": ["root"]})
        write_json(
            temp_dir / "tokens" / "root.json",
            {
                "spacing": {"sm": {"value": "2*8"}},
                "font": {
                    "body": {
                        "value": {
                            "fontFamily": ["Inter", "sans-serif"],
                            "fontSize": "16px",
                            "lineHeight": "24px",
                        },
                        "type": "typography",
                    }
                },
                "shadow": {
                    "card": {
                        "value": {"x": 0, "y": 1, "blur": 2, "color": 0},
                        "type": "boxShadow",
                    }
                },
            },
        )
        config = BuildConfig(themes=[ThemeDefinition(name="root", structural=True)])

        report = BuildOrchestrator(config, root=temp_dir).build()

        assert report.failed_themes == {}
        css = (temp_dir / "css" / "root.css").read_text()
        assert css == ":root {\n  --rolo-spacing-sm: 16px;\n}\n"

    def test_alpha_colors_become_rgba(self, temp_dir: Path):
        write_json(temp_dir / "tokens" / "$metadata.json", {"tokenSetOrder": ["root"]})
        write_json(
            temp_dir / "tokens" / "root.json",
            {"color": {"overlay": {"value": "#0000001a", "type": "color"}}},
        )
        config = BuildConfig(themes=[ThemeDefinition(name="root", structural=True)])

        BuildOrchestrator(config, root=temp_dir).build()

        css = (temp_dir / "css" / "root.css").read_text()
        assert css == ":root {\n  --rolo-color-overlay: rgba(0, 0, 0, 0.1);\n}\n"

    def test_camel_case_names(self, token_project: Path, project_config: BuildConfig):
        config = project_config.model_copy(update={"name_case": NameCase.CAMEL})
        BuildOrchestrator(config, root=token_project).build()
        css = (token_project / "css" / "root.css").read_text()
        assert "  --roloColorBaseBrandPrimary: #3366ff;\n" in css
        assert "  --roloColorSurface: var(--roloColorBackground);\n" in css

    def test_build_themes_wrapper(self, token_project: Path, project_config: BuildConfig):
        report = build_themes(project_config, root=token_project)
        assert [r.theme for r in report.themes] == ["light", "dark", "root"]


class TestBuildOrchestrator:
    """Tests for BuildOrchestrator."""

    @pytest.fixture
    def orchestrator(self, token_project: Path, project_config: BuildConfig) -> BuildOrchestrator:
        return BuildOrchestrator(project_config, root=token_project)

    def test_paths(self, orchestrator: BuildOrchestrator, token_project: Path):
        assert orchestrator.tokens_dir == token_project / "tokens"
        assert orchestrator.css_dir == token_project / "css"
        assert orchestrator.json_dir == token_project / "doc"

    def test_resolve_themes(self, orchestrator: BuildOrchestrator):
        themes = {t.name: t for t in orchestrator.resolve_themes()}
        assert "dark" not in themes["light"].token_sets
        assert "light" not in themes["dark"].token_sets
        assert themes["root"].token_sets == [
            "core",
            "light",
            "dark",
            "semantics/color",
            "semantics/shadow",
        ]

    def test_light_css_only_has_light_namespace(
        self, orchestrator: BuildOrchestrator, token_project: Path
    ):
        orchestrator.build()
        css = (token_project / "css" / "light.css").read_text()
        assert css == ":root, .light {\n  --rolo-color-background: #ffffff;\n}\n"

    def test_dark_css(self, orchestrator: BuildOrchestrator, token_project: Path):
        orchestrator.build()
        css = (token_project / "css" / "dark.css").read_text()
        assert css == ".dark {\n  --rolo-color-background: #000000;\n}\n"

    def test_root_css(self, orchestrator: BuildOrchestrator, token_project: Path):
        orchestrator.build()
        css = (token_project / "css" / "root.css").read_text()
        assert css == (
            ":root {\n"
            "  --rolo-color-base-white: #ffffff;\n"
            "  --rolo-color-base-black: #000000;\n"
            "  --rolo-color-base-brand-primary: #3366ff;\n"
            "  --rolo-spacing-sm: 16px;\n"
            "  --rolo-line-height-body: 1.5;\n"
            "  --rolo-color-surface: var(--rolo-color-background);\n"
            "  --rolo-shadow-card: 0px 2px 4px 0px #0000001a, 0px 8px 16px 0px #00000026;\n"
            "}\n"
        )

    def test_references_disabled(self, token_project: Path, project_config: BuildConfig):
        config = project_config.model_copy(update={"output_references": False})
        BuildOrchestrator(config, root=token_project).build()
        css = (token_project / "css" / "root.css").read_text()
        assert "--rolo-color-surface: #000000;" in css
        assert "var(" not in css

    def test_inset_shadows(self, token_project: Path, project_config: BuildConfig):
        config = project_config.model_copy(update={"box_shadow_inset": True})
        BuildOrchestrator(config, root=token_project).build()
        css = (token_project / "css" / "root.css").read_text()
        assert "--rolo-shadow-card: inset 0px 2px 4px 0px #0000001a, 0px 8px" in css

    def test_without_namespace_filter(self, token_project: Path, project_config: BuildConfig):
        config = project_config.model_copy(update={"namespace_filter": False})
        BuildOrchestrator(config, root=token_project).build()
        css = (token_project / "css" / "light.css").read_text()
        assert "--rolo-spacing-sm: 16px;" in css
        assert "--rolo-color-background: #ffffff;" in css

    def test_combined_json(self, orchestrator: BuildOrchestrator, token_project: Path):
        report = orchestrator.build()

        combined_path = token_project / "doc" / "combined.json"
        assert report.merge.path == combined_path
        combined = json.loads(combined_path.read_text())
        assert list(combined) == ["light", "dark"]
        light = combined["light"]
        assert light["nameOfFile"] == "light"
        assert light["color"]["background"] == "#ffffff"
        assert light["color"]["surface"] == "#ffffff"
        assert light["color"]["base"]["brandPrimary"] == "#3366ff"
        assert light["spacing"]["sm"] == "16px"
        assert light["lineHeight"]["body"] == "1.5"
        assert combined["dark"]["color"]["surface"] == "#000000"

    def test_per_theme_json_removed(self, orchestrator: BuildOrchestrator, token_project: Path):
        orchestrator.build()
        remaining = sorted(p.name for p in (token_project / "doc").iterdir())
        assert remaining == ["combined.json"]

    def test_structural_theme_has_no_json(self, orchestrator: BuildOrchestrator):
        report = orchestrator.build()
        root = next(r for r in report.themes if r.theme == "root")
        assert root.json_path is None

    def test_strip_file_tag(self, token_project: Path, project_config: BuildConfig):
        config = project_config.model_copy(update={"keep_file_tag": False})
        BuildOrchestrator(config, root=token_project).build()
        combined = json.loads((token_project / "doc" / "combined.json").read_text())
        assert "nameOfFile" not in combined["light"]
        assert "nameOfFile" not in combined["dark"]

    def test_clean_removes_stale_css(self, orchestrator: BuildOrchestrator, token_project: Path):
        stale = token_project / "css" / "sepia.css"
        stale.parent.mkdir(parents=True)
        stale.write_text(":root {}\n")

        orchestrator.build()

        assert not stale.exists()
        assert sorted(p.name for p in (token_project / "css").iterdir()) == [
            "dark.css",
            "light.css",
            "root.css",
        ]

    def test_clean_without_css_dir(self, orchestrator: BuildOrchestrator):
        assert orchestrator.clean() == []

    def test_missing_metadata_is_fatal(self, temp_dir: Path, project_config: BuildConfig):
        with pytest.raises(MetadataError):
            BuildOrchestrator(project_config, root=temp_dir).build()

    def test_failing_theme_does_not_stop_others(
        self, token_project: Path, project_config: BuildConfig
    ):
        (token_project / "tokens" / "dark.json").write_text("{broken")

        report = BuildOrchestrator(project_config, root=token_project).build()

        assert "dark" in report.failed_themes
        assert "root" in report.failed_themes
        assert [r.theme for r in report.themes] == ["light"]
        assert (token_project / "css" / "light.css").exists()
        assert report.merge is not None
        assert report.merge.success is False
        assert report.success is False

    def test_loader_shared_across_themes(self, orchestrator: BuildOrchestrator):
        orchestrator.build()
        assert orchestrator.loader.get_token_set("core") is orchestrator.loader.get_token_set(
            "core"
        )

    def test_product_preset_build(self, token_project: Path):
        config = BuildConfig.product_preset(
            themes=[
                ThemeDefinition(
                    name="product_light", selector=":root, .light", excluded_sets=["dark"]
                ),
                ThemeDefinition(
                    name="product_dark", selector=".dark", excluded_sets=["light"]
                ),
            ]
        )
        report = BuildOrchestrator(config, root=token_project).build()
        assert report.success
        css = (token_project / "css" / "product_dark.css").read_text()
        assert css.startswith(".dark {\n")
        assert "--rolo-color-surface: #000000;" in css
        assert "--rolo-spacing-sm: 16px;" in css


class TestMerge:
    """Tests for merge_theme_documents."""

    def test_merge_tags_documents(self, temp_dir: Path):
        write_json(temp_dir / "light.json", {"a": 1})
        write_json(temp_dir / "dark.json", {"a": 2})

        result = merge_theme_documents(temp_dir, ["light", "dark"])

        assert result.success
        combined = json.loads((temp_dir / "combined.json").read_text())
        assert combined == {
            "light": {"a": 1, "nameOfFile": "light"},
            "dark": {"a": 2, "nameOfFile": "dark"},
        }
        assert not (temp_dir / "light.json").exists()
        assert not (temp_dir / "dark.json").exists()

    def test_merge_without_tag(self, temp_dir: Path):
        write_json(temp_dir / "light.json", {"a": 1})
        write_json(temp_dir / "dark.json", {"a": 2})

        merge_theme_documents(temp_dir, ["light", "dark"], keep_file_tag=False)

        combined = json.loads((temp_dir / "combined.json").read_text())
        assert combined == {"light": {"a": 1}, "dark": {"a": 2}}

    def test_missing_file_reported(self, temp_dir: Path):
        write_json(temp_dir / "light.json", {"a": 1})

        result = merge_theme_documents(temp_dir, ["light", "dark"])

        assert result.success is False
        assert result.error
        assert not (temp_dir / "combined.json").exists()
        assert (temp_dir / "light.json").exists()

    def test_invalid_json_reported(self, temp_dir: Path):
        (temp_dir / "light.json").write_text("{nope")

        result = merge_theme_documents(temp_dir, ["light"])

        assert result.success is False

    def test_non_object_reported(self, temp_dir: Path):
        write_json(temp_dir / "light.json", [1, 2])

        result = merge_theme_documents(temp_dir, ["light"])

        assert result.success is False

    def test_custom_combined_name(self, temp_dir: Path):
        write_json(temp_dir / "light.json", {})
        result = merge_theme_documents(temp_dir, ["light"], combined_file="themes.json")
        assert result.path == temp_dir / "themes.json"
