"""Configuration management for plagcluster."""

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = {
    "shingle_size": 3,
    "clustering": {"threshold": 35.0},
    "visualization": {"edge_threshold": 35.0, "radius": 5.0, "z_spacing": 2.0},
    "similarity": {
        "composite_gate": 0.15,
        "edit_sample_chars": 500,
        "composite_lcs_chars": 800,
        "standalone_lcs_chars": 1000,
        "excerpt_lcs_chars": 2000,
        "excerpt_min_metric": 5.0,
        "excerpt_min_chars": 50,
        "excerpt_max_chars": 200,
        "weights": {"jaccard": 0.5, "edit": 0.3, "lcs": 0.2},
    },
    "ingest": {"max_files": 10, "normalize": True},
    "severity": {"high": 80.0, "medium": 60.0},
}

ENV_OVERRIDES = {
    "PLAGCLUSTER_THRESHOLD": ("clustering", "threshold", float),
    "PLAGCLUSTER_EDGE_THRESHOLD": ("visualization", "edge_threshold", float),
    "PLAGCLUSTER_SHINGLE_SIZE": (None, "shingle_size", int),
}


@dataclass(frozen=True)
class Settings:
    """Flat, validated view of the tunables used by one analysis run."""
    shingle_size: int = 3
    cluster_threshold: float = 35.0
    edge_threshold: float = 35.0
    layout_radius: float = 5.0
    layout_z_spacing: float = 2.0
    composite_gate: float = 0.15
    edit_sample_chars: int = 500
    composite_lcs_chars: int = 800
    standalone_lcs_chars: int = 1000
    excerpt_lcs_chars: int = 2000
    excerpt_min_metric: float = 5.0
    excerpt_min_chars: int = 50
    excerpt_max_chars: int = 200
    jaccard_weight: float = 0.5
    edit_weight: float = 0.3
    lcs_weight: float = 0.2
    max_files: int = 10
    normalize: bool = True
    severity_high: float = 80.0
    severity_medium: float = 60.0

    def __post_init__(self):
        if self.shingle_size < 1:
            raise ValueError(f"shingle_size must be >= 1, got {self.shingle_size}")
        for name in ("edit_sample_chars", "composite_lcs_chars", "standalone_lcs_chars",
                     "excerpt_lcs_chars", "excerpt_max_chars"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.max_files < 1:
            raise ValueError(f"max_files must be >= 1, got {self.max_files}")
        if self.severity_medium > self.severity_high:
            raise ValueError("severity.medium must not exceed severity.high")


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".plagcluster" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        _deep_merge(cfg, file_cfg)
        _check_sections(cfg, path)

    # Env overrides
    for var, (section, key, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(var)
        if raw is None:
            continue
        try:
            value = cast(raw)
        except ValueError:
            raise ValueError(f"{var} must be a number, got {raw!r}") from None
        if section is None:
            cfg[key] = value
        else:
            cfg.setdefault(section, {})[key] = value

    return cfg


def settings_from_config(cfg: dict[str, Any] | None = None) -> Settings:
    """Build a Settings object from a (possibly partial) config dict."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    if cfg:
        _deep_merge(merged, cfg)
    _check_sections(merged)

    sim = merged["similarity"]
    weights = sim.get("weights", {})
    vis = merged["visualization"]
    try:
        return _build_settings(merged, sim, weights, vis)
    except TypeError as e:
        raise ValueError(f"Config values must be numbers: {e}") from None


def _build_settings(merged: dict, sim: dict, weights: dict, vis: dict) -> Settings:
    return Settings(
        shingle_size=int(merged["shingle_size"]),
        cluster_threshold=float(merged["clustering"]["threshold"]),
        edge_threshold=float(vis["edge_threshold"]),
        layout_radius=float(vis["radius"]),
        layout_z_spacing=float(vis["z_spacing"]),
        composite_gate=float(sim["composite_gate"]),
        edit_sample_chars=int(sim["edit_sample_chars"]),
        composite_lcs_chars=int(sim["composite_lcs_chars"]),
        standalone_lcs_chars=int(sim["standalone_lcs_chars"]),
        excerpt_lcs_chars=int(sim["excerpt_lcs_chars"]),
        excerpt_min_metric=float(sim["excerpt_min_metric"]),
        excerpt_min_chars=int(sim["excerpt_min_chars"]),
        excerpt_max_chars=int(sim["excerpt_max_chars"]),
        jaccard_weight=float(weights.get("jaccard", 0.5)),
        edit_weight=float(weights.get("edit", 0.3)),
        lcs_weight=float(weights.get("lcs", 0.2)),
        max_files=int(merged["ingest"]["max_files"]),
        normalize=bool(merged["ingest"]["normalize"]),
        severity_high=float(merged["severity"]["high"]),
        severity_medium=float(merged["severity"]["medium"]),
    )


def _check_sections(cfg: dict, source: Path | None = None) -> None:
    """Every nested default section must still be a mapping after merging."""
    where = f" in {source}" if source else ""
    for name, default in DEFAULT_CONFIG.items():
        if isinstance(default, dict) and not isinstance(cfg.get(name), dict):
            raise ValueError(f"Config section '{name}' must be a mapping{where}")
    if not isinstance(cfg["similarity"].get("weights", {}), dict):
        raise ValueError(f"Config section 'similarity.weights' must be a mapping{where}")


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
