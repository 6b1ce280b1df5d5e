
from __future__ import annotations

import copy
import json
from typing import Any, Dict, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    "generation": {
        # Recognized second characters. 1 = male, 2 = female; add more for other ID classes.
        "gender_digits": ["1", "2"],
        "seed": None
    },
    "version": "0.1.0"
}

def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load config from a JSON/YAML file if provided; otherwise return a copy of DEFAULT_CONFIG.
    JSON is tried first, then YAML.
    """
    if not config_path:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = str(config_path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    try:
        cfg = json.loads(text)
    except json.JSONDecodeError:
        cfg = _load_yaml(text, path)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise RuntimeError(f"Config file '{path}' must contain a mapping, got {type(cfg).__name__}")
    return _merge(DEFAULT_CONFIG, cfg)

def _load_yaml(text: str, path: str) -> Any:
    import yaml
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RuntimeError(f"Failed to parse config file '{path}' as JSON or YAML. "
                           f"Original error: {e}")

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and k in out and isinstance(out[k], dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out

def snapshot_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return a deep copy suitable for embedding in results."""
    return copy.deepcopy(cfg)
