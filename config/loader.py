from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib

REPO_ROOT = Path(__file__).resolve().parents[1]


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml from repo root by default.
    """
    if config_path is None:
        config_path = REPO_ROOT / "config.toml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def resolve_rules_path(cfg: Dict[str, Any]) -> Optional[str]:
    """Rules path from config, made absolute against the repo root."""
    raw = (cfg.get("rules") or {}).get("path")
    if not raw:
        return None
    p = Path(raw)
    if not p.is_absolute():
        p = REPO_ROOT / p
    return str(p)
