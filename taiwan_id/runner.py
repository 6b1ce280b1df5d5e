from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
from .config import load_config, snapshot_config
from .checksum import check_id
from .generator import IdGenerator

def run_validation(ids: Iterable[str], config_path: Optional[str]) -> Dict[str, Any]:
    cfg = load_config(config_path)
    results = []
    logs = []
    for id_no in ids:
        check = check_id(id_no)
        results.append({
            "id": id_no,
            "valid": check.valid,
            "reason": check.reason,
            "expected_check_digit": check.expected_check_digit,
        })
        logs.append(f"check: id={id_no} valid={check.valid} reason={check.reason}")
    n_valid = sum(1 for r in results if r["valid"])
    return {
        "results": results,
        "summary": {"total": len(results), "valid": n_valid, "invalid": len(results) - n_valid},
        "config_used": snapshot_config(cfg),
        "logs": logs,
    }

def run_generation(prefix: str, count: int, config_path: Optional[str],
                   seed: Optional[int] = None) -> Dict[str, Any]:
    cfg = load_config(config_path)
    if seed is not None:
        cfg["generation"]["seed"] = seed
    engine = IdGenerator(cfg)
    engine.logs.append(f"start: prefix={prefix!r} count={count} seed={cfg['generation']['seed']}")
    ids = engine.generate_many(count, prefix)
    return {
        "ids": ids,
        "prefix": prefix,
        "config_used": snapshot_config(cfg),
        "logs": engine.logs,
    }
