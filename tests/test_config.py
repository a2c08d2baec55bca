"""Tests for configuration loading."""

from nlptools.config import DEFAULT_CONFIG, dump_config, load_config


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("NLPTOOLS_DEFAULT_LANGUAGE", raising=False)
    monkeypatch.delenv("NLPTOOLS_SEED", raising=False)
    cfg = load_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_file_overrides_merge_nested(tmp_path, monkeypatch):
    monkeypatch.delenv("NLPTOOLS_DEFAULT_LANGUAGE", raising=False)
    monkeypatch.delenv("NLPTOOLS_SEED", raising=False)
    path = tmp_path / "nlptools.yaml"
    path.write_text("default_language: fr\nkmeans:\n  seed: 3\n")
    cfg = load_config(path)
    assert cfg["default_language"] == "fr"
    assert cfg["kmeans"] == {"max_iterations": 100, "seed": 3}
    assert DEFAULT_CONFIG["kmeans"]["seed"] is None


def test_config_found_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "nlptools.yaml").write_text("similarity:\n  threshold: 0.4\n")
    assert load_config()["similarity"]["threshold"] == 0.4


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("NLPTOOLS_DEFAULT_LANGUAGE", "DE")
    monkeypatch.setenv("NLPTOOLS_SEED", "11")
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg["default_language"] == "de"
    assert cfg["kmeans"]["seed"] == 11


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path)["topics"] == DEFAULT_CONFIG["topics"]


def test_dump_config_round_trips(tmp_path):
    path = tmp_path / "out.yaml"
    path.write_text(dump_config(DEFAULT_CONFIG))
    assert load_config(path)["language_detection"] == DEFAULT_CONFIG["language_detection"]
