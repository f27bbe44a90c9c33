from __future__ import annotations

from typing import Protocol


# epoch em milissegundos (int)
class EpochTimeProvider(Protocol):
    def current_epoch_millis(self) -> int: ...
