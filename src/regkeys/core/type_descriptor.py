from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TypeDescriptor(Generic[T]):
    """Opaque runtime handle for a (possibly parameterized) value type.

    Wraps any type expression, including generics such as ``list[str]`` or
    ``dict[str, int]``. Keys store and expose it for introspection; nothing in
    the key machinery branches on it.

    Example:
        >>> TypeDescriptor(list[str]).args
        (<class 'str'>,)
    """

    type: Any

    @classmethod
    def of(cls, tp: Any) -> Optional["TypeDescriptor[Any]"]:
        if tp is None or isinstance(tp, TypeDescriptor):
            return tp
        return cls(tp)

    @property
    def origin(self) -> Any:
        return typing.get_origin(self.type) or self.type

    @property
    def args(self) -> Tuple[Any, ...]:
        return typing.get_args(self.type)

    @property
    def name(self) -> str:
        if isinstance(self.type, type) and not self.args:
            return self.type.__name__
        return repr(self.type).replace("typing.", "")

    def __str__(self) -> str:
        return self.name
