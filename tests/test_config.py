import json

from probe.config import CONFIG_ENV_VAR, DEFAULT_CONFIG, load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config == DEFAULT_CONFIG
    config["paths"]["marker_file"] = "/elsewhere"
    assert DEFAULT_CONFIG["paths"]["marker_file"] == "/tmp/container-id"


def test_sections_are_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"paths": {"marker_file": "/var/tmp/cid"}, "collectors": {"memory": True}}))
    config = load_config(str(path))
    assert config["paths"]["marker_file"] == "/var/tmp/cid"
    assert config["paths"]["stat"] == "/proc/stat"
    assert config["collectors"]["memory"] is True
    assert config["logging"]["level"] == "INFO"


def test_env_var_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config()["logging"]["level"] == "DEBUG"


def test_bad_config_falls_back_to_defaults(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert load_config(str(bad)) == DEFAULT_CONFIG

    not_object = tmp_path / "list.json"
    not_object.write_text("[1, 2]")
    assert load_config(str(not_object)) == DEFAULT_CONFIG

    assert load_config(str(tmp_path / "missing.json")) == DEFAULT_CONFIG
