"""Tests for the typer CLI (requires the cli extra)."""

import pytest

pytest.importorskip("typer")
pytest.importorskip("rich")

from typer.testing import CliRunner  # noqa: E402

from termtint.cli.app import create_app  # noqa: E402
from termtint.control import capability  # noqa: E402
from termtint.control.capability import ColorTier, Override  # noqa: E402

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestGlobalOptions:
    """Tests for --color handling."""

    def test_color_never_sets_override(self, app) -> None:
        result = runner.invoke(app, ["--color", "never", "detect"])
        assert result.exit_code == 0
        assert capability.get_resolver().override is Override.NEVER

    def test_color_always_sets_override(self, app) -> None:
        result = runner.invoke(app, ["--color", "always", "detect"])
        assert result.exit_code == 0
        assert capability.get_resolver().override is Override.ALWAYS
        assert capability.current_tier() >= ColorTier.ANSI_16

    def test_invalid_color_value(self, app) -> None:
        result = runner.invoke(app, ["--color", "sometimes", "detect"])
        assert result.exit_code != 0


class TestDetect:
    """Tests for the detect command."""

    def test_reports_tiers_and_environment(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        result = runner.invoke(app, ["detect"])
        assert result.exit_code == 0
        assert "Resolved tier" in result.output
        assert "NONE" in result.output
        assert "NO_COLOR" in result.output


class TestShow:
    """Tests for the show command."""

    def test_lists_parameters_per_tier(self, app) -> None:
        result = runner.invoke(app, ["--color", "never", "show", "#ff0000"])
        assert result.exit_code == 0
        assert "38;2;255;0;0" in result.output
        assert "38;5;196" in result.output
        assert "91" in result.output
        assert "\x1b[" not in result.output

    def test_sample_uses_active_tier(self, app) -> None:
        result = runner.invoke(app, ["--color", "always", "show", "red"])
        assert result.exit_code == 0
        assert "\x1b[41m red \x1b[0m" in result.output


class TestPalette:
    """Tests for the palette command."""

    def test_forced_tier(self, app) -> None:
        result = runner.invoke(app, ["palette", "--tier", "16"])
        assert result.exit_code == 0
        assert "\x1b[40m  \x1b[0m" in result.output
        assert "48;5;" not in result.output

    def test_256_tier(self, app) -> None:
        result = runner.invoke(app, ["palette", "--tier", "256"])
        assert result.exit_code == 0
        assert "\x1b[48;5;231m  \x1b[0m" in result.output

    def test_invalid_tier(self, app) -> None:
        result = runner.invoke(app, ["palette", "--tier", "65536"])
        assert result.exit_code != 0


class TestImage:
    """Tests for the image command."""

    def test_missing_file(self, app, tmp_path) -> None:
        pytest.importorskip("PIL")
        result = runner.invoke(app, ["--color", "always", "image", str(tmp_path / "missing.png")])
        assert result.exit_code == 1
        assert "Cannot open" in result.output

    def test_width_must_be_positive(self, app, tmp_path) -> None:
        result = runner.invoke(app, ["image", str(tmp_path / "any.png"), "--width", "0"])
        assert result.exit_code == 2
        assert "Traceback" not in result.output
