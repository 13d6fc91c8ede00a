"""Tests for configuration loading."""

import pytest

from bsptile.config.settings import Settings, SettingsError, load_settings


class TestDefaults:
    """Behaviour without a configuration file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing file is not an error."""
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings == Settings()
        assert settings.retry_delay == 0.3
        assert settings.tile_hotkey == "alt+shift+t"
        assert settings.warn_offscreen is True

    def test_missing_file_not_created(self, tmp_path):
        """Loading never writes the file."""
        path = tmp_path / "config.yaml"
        load_settings(path)
        assert not path.exists()

    def test_empty_file(self, tmp_path):
        """An empty YAML document means defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_settings(path) == Settings()


class TestOverrides:
    """Values read from YAML."""

    def test_partial_override(self, tmp_path):
        """Only the given keys change; nested hotkeys merge with defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "retry_delay: 0.5\n"
            "log_level: debug\n"
            "hotkeys:\n"
            "  tile: ctrl+alt+t\n"
        )
        settings = load_settings(path)

        assert settings.retry_delay == 0.5
        assert settings.log_level == "DEBUG"
        assert settings.tile_hotkey == "ctrl+alt+t"
        assert settings.quit_hotkey == "alt+shift+q"

    def test_integer_delay(self, tmp_path):
        """An integer delay is accepted as seconds."""
        path = tmp_path / "config.yaml"
        path.write_text("retry_delay: 1\n")
        assert load_settings(path).retry_delay == 1.0

    def test_disable_warning(self, tmp_path):
        """The off-screen alert can be turned off."""
        path = tmp_path / "config.yaml"
        path.write_text("warn_offscreen: false\n")
        assert load_settings(path).warn_offscreen is False


class TestInvalid:
    """Malformed configuration is rejected."""

    @pytest.mark.parametrize(
        "content",
        [
            "retry_delay: -1\n",
            "retry_delay: soon\n",
            "retry_delay: true\n",
            "warn_offscreen: maybe\n",
            "log_level: LOUD\n",
            "hotkeys: alt+t\n",
            "hotkeys:\n  tile: 5\n",
            "- just\n- a list\n",
            "retry_delay: [unclosed\n",
        ],
    )
    def test_rejected(self, tmp_path, content):
        """Each malformed value raises SettingsError."""
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(SettingsError):
            load_settings(path)
