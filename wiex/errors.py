from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WiexError(Exception):
    code: str
    message: str
    data: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    @property
    def outcome(self):
        return (self.data or {}).get("outcome")


class CommandNotFoundError(WiexError):
    pass


class AmbiguousTerminationError(WiexError):
    pass


class SpawnError(WiexError):
    pass


class RelayError(WiexError):
    pass


class ConfigError(WiexError):
    pass
