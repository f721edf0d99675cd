from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class LifeConfig:
    file: Optional[str] = None      # pattern file; None -> built-in seed
    delta_x: int = 0                # (0, 0) -> auto-centre the loaded shape
    delta_y: int = 0
    rows: int = 22
    cols: int = 78
    turns: int = 0                  # 0 -> run until interrupted
    rate: int = 2                   # generations per second; 0 -> step on Enter
    age_color: bool = False
    age_shape: bool = False
    gif: Optional[str] = None
    random: int = 0                 # >0 -> random soup instead of the R-pentomino
    seed: int = 42
    log_file: str = "logs/life.log"

    @classmethod
    def from_dict(cls, d: dict) -> "LifeConfig":
        known = {f.name for f in fields(cls)}
        normalized = {str(k).replace("-", "_"): v for k, v in d.items()}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(f"unknown config key(s): {', '.join(unknown)}")
        return cls(**normalized)

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path) -> LifeConfig:
    """Read a YAML mapping of LifeConfig fields; a missing file is an error."""
    config_path = Path(path)
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        return LifeConfig()
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")
    return LifeConfig.from_dict(data)
