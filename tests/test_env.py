import logging
import os

from assetroots.core import env


def test_settings_file_does_not_override_existing(tmp_path, monkeypatch):
    settings = tmp_path / "env"
    settings.write_text(
        "# comment\nASSETROOTS_LOG_LEVEL='debug'\nASSETROOTS_MANIFEST=kept-out.toml\nOTHER=1\n"
    )
    monkeypatch.setenv("ASSETROOTS_MANIFEST", "mine.toml")
    monkeypatch.setenv("ASSETROOTS_LOG_LEVEL", "")
    monkeypatch.delenv("ASSETROOTS_LOG_LEVEL")
    monkeypatch.setenv("OTHER", "")
    monkeypatch.delenv("OTHER")

    applied = env.load_user_env(settings)

    assert applied == {"ASSETROOTS_LOG_LEVEL": "debug"}
    assert env.default_manifest() == "mine.toml"
    assert env.log_level() == logging.DEBUG
    assert "OTHER" not in os.environ


def test_settings_file_from_env_var(tmp_path, monkeypatch):
    monkeypatch.setenv("ASSETROOTS_ENV_FILE", str(tmp_path / "custom"))
    assert env.settings_file() == tmp_path / "custom"
    assert env.load_user_env() == {}


def test_read_settings_skips_malformed_lines(tmp_path):
    settings = tmp_path / "env"
    settings.write_text("no separator\n=value\n  # A=1\nASSETROOTS_MANIFEST = \"x.toml\"\n")
    assert env.read_settings(settings) == {"ASSETROOTS_MANIFEST": "x.toml"}


def test_default_manifest_fallback(monkeypatch):
    monkeypatch.delenv("ASSETROOTS_MANIFEST", raising=False)
    assert env.default_manifest() == "assets.toml"


def test_log_level_resolution(monkeypatch):
    monkeypatch.setenv("ASSETROOTS_LOG_LEVEL", "bogus")
    assert env.log_level() == logging.WARNING
    monkeypatch.setenv("ASSETROOTS_LOG_LEVEL", "info")
    assert env.log_level() == logging.INFO
    assert env.log_level(verbose=True) == logging.DEBUG
