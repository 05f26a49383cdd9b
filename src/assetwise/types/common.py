"""Cross-module type aliases and protocols."""

from __future__ import annotations

from typing import Literal, Protocol, TypeAlias

EntityCategory: TypeAlias = Literal["schema", "object_type"]
Confidence: TypeAlias = Literal["low", "medium", "high"]
Priority: TypeAlias = Literal["critical", "important", "optional"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]


class LoggerLike(Protocol):
    """Logging capability passed explicitly into cache and validation components.

    ``logging.Logger`` satisfies this protocol.
    """

    def debug(self, msg: str, *args: object) -> None: ...

    def info(self, msg: str, *args: object) -> None: ...

    def warning(self, msg: str, *args: object) -> None: ...

    def error(self, msg: str, *args: object) -> None: ...

    def critical(self, msg: str, *args: object) -> None: ...
