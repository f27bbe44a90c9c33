from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from domain.ports import EpochTimeProvider

if TYPE_CHECKING:
    from config import TimeSourceConfig

MILLIS_PER_SECOND = 1000


@dataclass(frozen=True)
class StaticEpochTimeProvider(EpochTimeProvider):
    """
    Relógio fixo: sempre devolve o mesmo epoch (ms).
    Útil em testes e simulações reprodutíveis.
    """
    epoch_time_milliseconds: int = 0

    @classmethod
    def build(
        cls,
        *,
        millis: Optional[int] = None,
        seconds: Optional[int] = None,
    ) -> "StaticEpochTimeProvider":
        # millis sempre vence; seconds só é usado quando millis está ausente
        if millis is None and seconds is None:
            return cls(0)
        if millis is not None:
            return cls(millis)
        return cls(seconds * MILLIS_PER_SECOND)

    @classmethod
    def from_config(cls, cfg: "TimeSourceConfig") -> "StaticEpochTimeProvider":
        return cls.build(millis=cfg.millis, seconds=cfg.seconds)

    def current_epoch_millis(self) -> int:
        return self.epoch_time_milliseconds
