"""Tests for Settings.from_env."""

from pocketcalc.config import DEFAULT_PROMPT, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.display_limit == 11
    assert settings.truncate_width == 10
    assert settings.prompt == DEFAULT_PROMPT


def test_overrides():
    settings = Settings.from_env({
        "POCKETCALC_DISPLAY_LIMIT": "8",
        "POCKETCALC_TRUNCATE_WIDTH": " 6 ",
        "POCKETCALC_PROMPT": "calc",
    })
    assert settings.display_limit == 8
    assert settings.truncate_width == 6
    assert settings.prompt == "calc"


def test_junk_values_fall_back_to_defaults():
    settings = Settings.from_env({
        "POCKETCALC_DISPLAY_LIMIT": "wide",
        "POCKETCALC_TRUNCATE_WIDTH": "-3",
        "POCKETCALC_PROMPT": "",
    })
    assert settings == Settings()


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("POCKETCALC_DISPLAY_LIMIT", "20")
    assert Settings.from_env().display_limit == 20
