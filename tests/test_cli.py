"""Smoke tests for the command line interface."""

import pytest
import yaml
from click.testing import CliRunner

from nlptools.cli import cli
from nlptools.config import DEFAULT_CONFIG

TEXTS = ["the cat sleeps", "a dog plays", "cats and felines", "dogs are loyal"]


@pytest.fixture
def corpus(tmp_path):
    folder = tmp_path / "docs"
    folder.mkdir()
    for i, text in enumerate(TEXTS):
        (folder / f"doc{i}.txt").write_text(text)
    return folder


def _run(*args):
    return CliRunner().invoke(cli, list(args), catch_exceptions=False)


def test_init_writes_config(tmp_path):
    path = tmp_path / "cfg" / "nlptools.yaml"
    result = _run("init", "--path", str(path))
    assert result.exit_code == 0
    assert yaml.safe_load(path.read_text()) == DEFAULT_CONFIG

    again = _run("init", "--path", str(path))
    assert "already exists" in again.output


def test_detect(tmp_path):
    path = tmp_path / "de.txt"
    path.write_text("Der Hund und die Katze sind nicht mehr hier, aber wir warten noch auf sie")
    result = _run("detect", str(path))
    assert result.exit_code == 0
    assert "Language Detection" in result.output


def test_similarity(corpus):
    result = _run("similarity", str(corpus))
    assert result.exit_code == 0
    assert "1.000" in result.output


def test_cluster_threshold(corpus):
    result = _run("cluster", str(corpus), "--method", "threshold", "--threshold", "0.3", "-l", "en")
    assert result.exit_code == 0
    assert "Clusters (threshold)" in result.output


def test_cluster_kmeans(corpus):
    result = _run("cluster", str(corpus), "-k", "2", "--seed", "1")
    assert result.exit_code == 0
    assert "K-means" in result.output


def test_cluster_kmeans_too_many_clusters(corpus):
    result = _run("cluster", str(corpus), "-k", "9")
    assert result.exit_code == 0
    assert "Cannot form" in result.output


def test_cluster_hierarchical(corpus):
    result = _run("cluster", str(corpus), "--method", "hierarchical", "--threshold", "0.9")
    assert result.exit_code == 0
    assert "Clusters (hierarchical)" in result.output


def test_topics(corpus):
    result = _run("topics", str(corpus), "--topics", "2", "--seed", "3")
    assert result.exit_code == 0
    assert "topic_" in result.output


def test_keyphrases(tmp_path):
    path = tmp_path / "ml.txt"
    path.write_text("Machine learning models require training data. Machine learning models improve with more data.")
    result = _run("keyphrases", str(path), "-n", "2", "-l", "en")
    assert result.exit_code == 0
    assert "Key Phrases" in result.output


def test_no_supported_files(tmp_path):
    path = tmp_path / "data.xyz"
    path.write_text("nope")
    result = _run("similarity", str(path))
    assert "No supported files found" in result.output


def test_config_option(tmp_path, corpus):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text("similarity:\n  threshold: 0.3\n")
    result = _run("--config", str(cfg), "cluster", str(corpus), "--method", "threshold")
    assert result.exit_code == 0
