"""Configuration management for nlptools."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = {
    "default_language": "en",
    "language_detection": {
        "languages": ["fr", "en", "de", "es"],
        "min_length": 50,
        "confidence_threshold": 0.3,
    },
    "preprocessing": {"stem": True},
    "kmeans": {"max_iterations": 100, "seed": None},
    "hierarchical": {"distance_threshold": 0.5},
    "similarity": {"threshold": 0.7},
    "topics": {"num_topics": 5, "num_terms": 10},
    "keyphrases": {"num_phrases": 5},
    "cache": {"enabled": False, "max_entries": 256},
}


def _find_config_file() -> Path | None:
    """Look for nlptools.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "nlptools.yaml",
        Path.cwd() / "nlptools.yaml",
        Path.home() / ".nlptools" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path).expanduser() if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if language := os.environ.get("NLPTOOLS_DEFAULT_LANGUAGE"):
        cfg["default_language"] = language.strip().lower()
    if seed := os.environ.get("NLPTOOLS_SEED"):
        cfg["kmeans"]["seed"] = int(seed)

    return cfg


def dump_config(cfg: dict[str, Any]) -> str:
    """Render a config dict as YAML."""
    return yaml.safe_dump(cfg, default_flow_style=False, sort_keys=False)


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
