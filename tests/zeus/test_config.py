"""Tests for TOML-based configuration."""

from pathlib import Path

import click
import pytest

from zeus.config import Config


class TestDefaults:
    """Tests for the default config."""

    def test_values(self) -> None:
        """Defaults to UTF-8 and error-level logging."""
        config = Config()
        assert config.encoding == "utf-8"
        assert config.verbosity == 0


class TestLoad:
    """Tests for Config.load class method."""

    def test_valid_file(self, tmp_path: Path) -> None:
        """Loads and parses a valid TOML file."""
        path = tmp_path / "zeus.toml"
        path.write_text('encoding = "latin-1"\nverbosity = 2\n')
        result = Config.load(path)
        assert result.is_ok()
        config = result.unwrap()
        assert config.encoding == "latin-1"
        assert config.verbosity == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        """Returns error for nonexistent file."""
        assert Config.load(tmp_path / "missing.toml").is_err()

    def test_invalid_toml_syntax(self, tmp_path: Path) -> None:
        """Returns error for malformed TOML."""
        path = tmp_path / "bad.toml"
        path.write_text("[broken\n")
        assert Config.load(path).is_err()

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Returns error for a file that is not valid UTF-8."""
        path = tmp_path / "latin1.toml"
        path.write_bytes(b'encoding = "\xff"\n')
        assert Config.load(path).is_err()

    def test_binary_codec_rejected(self, tmp_path: Path) -> None:
        """Returns validation_error for codecs that do not decode to text."""
        path = tmp_path / "zeus.toml"
        path.write_text('encoding = "base64"\n')
        result = Config.load(path)
        assert result.error == "validation_error"

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        """Returns validation_error for an encoding codecs does not know."""
        path = tmp_path / "zeus.toml"
        path.write_text('encoding = "no-such-codec"\n')
        result = Config.load(path)
        assert result.is_err()
        assert result.error == "validation_error"
        assert result.context
        assert result.context["errors"][0]["loc"] == ("encoding",)

    def test_extra_fields_forbidden(self, tmp_path: Path) -> None:
        """Returns validation_error for unexpected fields."""
        path = tmp_path / "zeus.toml"
        path.write_text("color = true\n")
        result = Config.load(path)
        assert result.error == "validation_error"

    def test_tilde_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Expands ~ in file path."""
        (tmp_path / "zeus.toml").write_text("verbosity = 1\n")
        monkeypatch.setenv("HOME", str(tmp_path))
        result = Config.load(Path("~/zeus.toml"))
        assert result.unwrap().verbosity == 1


class TestLoadOrExit:
    """Tests for Config.load_or_exit class method."""

    def test_valid_file(self, tmp_path: Path) -> None:
        """Returns config instance for valid file."""
        path = tmp_path / "zeus.toml"
        path.write_text("verbosity = 3\n")
        assert Config.load_or_exit(path).verbosity == 3

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Exits with code 1 and prints error for missing file."""
        with pytest.raises(click.exceptions.Exit) as exc_info:
            Config.load_or_exit(tmp_path / "missing.toml")
        assert exc_info.value.exit_code == 1
        assert "can't load config" in capsys.readouterr().err

    def test_invalid_utf8_exits_cleanly(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Undecodable config exits with code 1 instead of raising."""
        path = tmp_path / "latin1.toml"
        path.write_bytes(b'encoding = "\xff"\n')
        with pytest.raises(click.exceptions.Exit) as exc_info:
            Config.load_or_exit(path)
        assert exc_info.value.exit_code == 1
        assert "can't load config" in capsys.readouterr().err

    def test_validation_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Exits with code 1 and prints per-field validation errors."""
        path = tmp_path / "zeus.toml"
        path.write_text('verbosity = "loud"\n')
        with pytest.raises(click.exceptions.Exit) as exc_info:
            Config.load_or_exit(path)
        assert exc_info.value.exit_code == 1
        err = capsys.readouterr().err
        assert "config validation errors" in err
        assert "verbosity" in err
