"""Tests for the assets module."""

from pathlib import Path

from docpage.assets import DEFAULT_TEMPLATE_PATH, Assets


class TestAssets:
    """Tests for Assets."""

    def test__lists_non_template_files(self, template_dir: Path) -> None:
        """Template sources are excluded, everything else is listed recursively."""
        assets = Assets(str(template_dir))

        assert assets.files == ["img/logo.svg", "style.css"]

    def test__iterates_contents(self, template_dir: Path) -> None:
        """Iteration yields names with raw bytes."""
        assets = dict(Assets(str(template_dir)))

        assert assets["img/logo.svg"] == b"<svg></svg>\x00\xff"

    def test__custom_exclusions(self, template_dir: Path) -> None:
        """Exclusion patterns can be overridden."""
        assets = Assets(str(template_dir), exclude=("*.css",))

        assert "style.css" not in assets.files
        assert "index.html.j2" in assets.files

    def test__bundled_theme(self) -> None:
        """The bundled theme ships a stylesheet."""
        assert "style.css" in Assets(DEFAULT_TEMPLATE_PATH).files
