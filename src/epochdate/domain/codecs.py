"""
Conversion capabilities — две узкие возможности сериализации

- SupportsText: каноническое текстовое представление (ISO дата)
- SupportsJSON: JSON скаляр (строка в кавычках, null = "без изменений")

Протоколы реализуются напрямую value-типом, без наследования.
"""

from typing import Optional, Protocol, TypeVar, Union, runtime_checkable


T = TypeVar("T")

JSONInput = Union[str, bytes, bytearray]


@runtime_checkable
class SupportsText(Protocol):
    """Может конвертироваться в/из канонического текста."""

    def to_text(self) -> str: ...

    @classmethod
    def from_text(cls: type[T], text: str) -> T: ...


@runtime_checkable
class SupportsJSON(Protocol):
    """Может конвертироваться в/из JSON скаляра."""

    def to_json(self) -> str: ...

    def merge_json(self: T, data: JSONInput) -> T: ...

    @classmethod
    def from_json(cls: type[T], data: JSONInput, default: Optional[T] = None) -> Optional[T]: ...
