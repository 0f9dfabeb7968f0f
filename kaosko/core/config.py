from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
import yaml

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class FixtureConfig:
    seed_label: str = ""
    seed: Optional[int] = None  # when set, used verbatim instead of hashing seed_label

def load_config(path: Path) -> FixtureConfig:
    path = Path(path)
    logger.debug("loading fixture config from %s", path)
    cfg = yaml.safe_load(path.read_text(encoding="utf-8"))
    if cfg is None:
        return FixtureConfig()
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(cfg).__name__}")

    known = {f.name for f in fields(FixtureConfig)}
    unknown = sorted(str(k) for k in set(cfg) - known)
    if unknown:
        raise ValueError(f"{path}: unknown keys {unknown}")

    seed = cfg.get("seed")
    return FixtureConfig(
        seed_label=str(cfg.get("seed_label") or ""),
        seed=None if seed is None else int(seed),
    )
