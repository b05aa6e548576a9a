import pytest

from iqnotifier.config import (
    Config,
    Configurable,
    application_name,
    application_version,
    config_dir,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    directory = tmp_path / "xdg" / "iq-notifier"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def share(tmp_path):
    return tmp_path / "share"


def write_config(home, text):
    (home / "config").write_text(text, encoding="utf-8")


def test_application_identity():
    assert application_name() == "iq-notifier"
    assert application_version() == "0.4.1"


def test_config_dir_follows_xdg(home):
    assert config_dir() == home


def test_missing_key_returns_default(home, share):
    write_config(home, "")
    config = Config("popup_notifications", share_dir=share)
    assert config.value("spacing", 12) == 12
    assert config.value("absent") is None


def test_category_selects_section(home, share):
    write_config(home, "[history]\nenabled=true\n[other]\nenabled=false\n")
    assert Config("history", share_dir=share).value("enabled", False) is True
    assert Config("other", share_dir=share).value("enabled", True) is False


def test_typed_conversions(home, share):
    write_config(
        home,
        "[popup_notifications]\nspacing=7\nscale=0.5\nname=hello\nflag=0\n",
    )
    config = Config("popup_notifications", share_dir=share)
    assert config.value("spacing", 0) == 7
    assert config.value("scale", 0.0) == 0.5
    assert config.value("name", "") == "hello"
    assert config.value("flag", True) is False


def test_bad_integer_raises(home, share):
    write_config(home, "[popup_notifications]\nwidth=abc\n")
    with pytest.raises(ValueError):
        Config("popup_notifications", share_dir=share).value("width", 0)


def test_comma_separated_value_is_list(home, share):
    write_config(home, "[popup_notifications]\nglobal_margins=1, 2, 3, 4\n")
    config = Config("popup_notifications", share_dir=share)
    assert config.value("global_margins") == ["1", "2", "3", "4"]


def test_key_without_category_uses_general(home, share):
    write_config(home, "[General]\ntheme_name=dark\n")
    assert Config("", share_dir=share).value("theme_name", "default") == "dark"


def test_set_value_round_trip(home, share):
    write_config(home, "")
    Config("popup_notifications", share_dir=share).set_value("flag", True)
    Config("popup_notifications", share_dir=share).set_value("text", "a, b")
    Config("popup_notifications", share_dir=share).set_value("items", ["x", "y"])
    again = Config("popup_notifications", share_dir=share)
    assert again.value("flag", False) is True
    assert again.value("text", "") == "a, b"
    assert again.value("items", []) == ["x", "y"]


def test_directory_in_place_of_file_raises(home, share):
    (home / "config").mkdir()
    with pytest.raises(RuntimeError):
        Config("history", share_dir=share)


def test_example_copied_when_missing(home, share):
    share.mkdir()
    (share / "config.example").write_text("[history]\nenabled=true\n")
    config = Config("history", share_dir=share)
    assert (home / "config").is_file()
    assert config.value("enabled", False) is True


def test_themes_copied_for_default_theme(home, share):
    theme_dir = share / "themes" / "default"
    theme_dir.mkdir(parents=True)
    (theme_dir / "theme").write_text("[popup_notifications]\nicon_position=left\n")
    config = Config("", "themes/default/theme", share_dir=share)
    assert (home / "themes" / "default" / "theme").is_file()
    assert config.value("popup_notifications/icon_position", "top") == "left"


def test_configurable_enabled(home, share):
    write_config(home, "[history]\nenabled=true\n")
    history = Configurable("history", share_dir=share)
    tray = Configurable("tray", share_dir=share)
    assert history.name == "history"
    assert history.is_enabled() is True
    assert tray.is_enabled() is False