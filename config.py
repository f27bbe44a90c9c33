from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from loguru import logger


@dataclass(frozen=True)
class TimeSourceConfig:
    # None = ausente
    millis: Optional[int] = None
    seconds: Optional[int] = None


def _opt(d: Mapping[str, Any], path: str, default: Any) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, Mapping) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _to_opt_int(x: Any, path: str) -> Optional[int]:
    if x is None:
        return None
    # bool é subclasse de int; não aceitar "millis: true"
    if isinstance(x, bool):
        raise ValueError(f"Config inválida: '{path}' deve ser inteiro, recebido booleano: {x!r}")
    if isinstance(x, float) and not x.is_integer():
        raise ValueError(f"Config inválida: '{path}' deve ser inteiro, recebido: {x!r}")
    try:
        return int(x)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Config inválida: '{path}' deve ser inteiro, recebido: {x!r}") from e


def config_from_mapping(data: Mapping[str, Any]) -> TimeSourceConfig:
    """
    Espera:
      time_source:
        millis: 123456789   # opcional
        seconds: 123456     # opcional (ignorado se millis estiver presente)
    """
    ts_raw = _opt(data, "time_source", None)
    if ts_raw is None:
        return TimeSourceConfig()
    if not isinstance(ts_raw, Mapping):
        raise ValueError("Config inválida: 'time_source' deve ser um mapa (dict).")

    millis = _to_opt_int(_opt(ts_raw, "millis", None), "time_source.millis")
    seconds = _to_opt_int(_opt(ts_raw, "seconds", None), "time_source.seconds")

    return TimeSourceConfig(millis=millis, seconds=seconds)


def load_config(path: str = "config.yaml") -> TimeSourceConfig:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config inválida: '{path}' deve conter um mapa (dict) na raiz.")

    cfg = config_from_mapping(data)
    logger.debug(
        "[time_source] config={} millis={} seconds={}",
        p, cfg.millis, cfg.seconds,
    )
    return cfg
