"""
Typed configuration keys.

A :class:`Key` names one value in a key/value registry and knows how to turn
text into that value and back. Keys are built once through a
:class:`KeyBuilder` and never change afterwards, so they can be shared freely.

Identity is the name, compared case-insensitively. Equality, hashing and
ordering all use the same folded form.

Example:
    >>> port = (
    ...     Key.builder(int)
    ...     .name("server.port")
    ...     .fallback(8080)
    ...     .description("Port the server listens on")
    ...     .to_stringer(str)
    ...     .build()
    ... )
    >>> port.parse("9090")
    9090
    >>> port == Key.define(int, "SERVER.PORT")
    True
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, Protocol, TypeVar

from regkeys.core.exceptions import ConfigurationError
from regkeys.core.type_descriptor import TypeDescriptor
from regkeys.keys.parsers import infer_parser

if TYPE_CHECKING:
    from regkeys.core.registry import Registry

T = TypeVar("T")


class Named(Protocol):
    @property
    def name(self) -> str:
        ...


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Key(Generic[T]):
    type_descriptor: TypeDescriptor[T]
    name: str
    fallback_value: Optional[T] = None
    user_immutable: bool = False
    sensitive: bool = False
    description: Optional[str] = None
    parser: Optional[Callable[[str], T]] = field(default=None, repr=False)
    to_stringer: Optional[Callable[[T], str]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        type_descriptor = TypeDescriptor.of(self.type_descriptor)
        if type_descriptor is None:
            raise ConfigurationError("Cannot build a key without a type descriptor")
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(f"Cannot build a key of type {type_descriptor} without a name")
        object.__setattr__(self, "type_descriptor", type_descriptor)
        if self.parser is None:
            object.__setattr__(self, "parser", infer_parser(self.fallback_value))

    @staticmethod
    def builder(type_descriptor: Any) -> "KeyBuilder[Any]":
        """Start a builder for a key whose values have the given type."""
        return KeyBuilder(TypeDescriptor.of(type_descriptor))

    @staticmethod
    def define(
        type_descriptor: Any,
        name: str,
        *,
        fallback: Any = None,
        user_immutable: bool = False,
        sensitive: bool = False,
        description: Optional[str] = None,
        parser: Optional[Callable[[str], Any]] = None,
        to_stringer: Optional[Callable[[Any], str]] = None,
    ) -> "Key[Any]":
        """Build a key in one call instead of chaining builder setters."""
        builder = Key.builder(type_descriptor).name(name).fallback(fallback)
        if user_immutable:
            builder.user_immutable()
        if sensitive:
            builder.sensitive()
        return builder.description(description).parser(parser).to_stringer(to_stringer).build()

    @property
    def _folded_name(self) -> str:
        return self.name.casefold()

    def parse(self, raw: str) -> Optional[T]:
        """Convert text to a value; ``None`` when the key has no parser.

        Raises:
            FormatError: If a derived parser rejects the text.
        """
        if self.parser is None:
            return None
        return self.parser(raw)

    def to_string(self, value: T) -> str:
        if self.to_stringer is None:
            return f"No toStringer set for {self.name}!"
        return self.to_stringer(value)

    def is_sensitive(
        self,
        registry: Optional["Registry"] = None,
        override_key: Optional["Key[bool]"] = None,
    ) -> bool:
        """Whether the value should be hidden from inspection tools.

        Without a registry this is the raw flag. With one, a sensitive key is
        only reported as sensitive while ``override_key`` (by default
        ``REGEDIT_ALLOW_SENSITIVE``) resolves to false in that registry.
        """
        if registry is None:
            return self.sensitive
        if override_key is None:
            from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE

            override_key = REGEDIT_ALLOW_SENSITIVE
        return self.sensitive and not registry.get_or_default(override_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._folded_name == other._folded_name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._folded_name < other._folded_name

    def __hash__(self) -> int:
        return hash(self._folded_name)

    def __str__(self) -> str:
        return self.name


class KeyBuilder(Generic[T]):
    """Mutable accumulator for a single :class:`Key`.

    Setters return the builder and may be called in any order; the last call
    wins. Not thread-safe, and not meant to be reused after :meth:`build`.
    """

    def __init__(self, type_descriptor: Optional[TypeDescriptor[T]]):
        self._type_descriptor = type_descriptor
        self._name: Optional[str] = None
        self._fallback_value: Optional[T] = None
        self._user_immutable = False
        self._sensitive = False
        self._description: Optional[str] = None
        self._parser: Optional[Callable[[str], T]] = None
        self._to_stringer: Optional[Callable[[T], str]] = None

    def name(self, name: str) -> "KeyBuilder[T]":
        self._name = name
        return self

    def fallback(self, fallback_value: Optional[T]) -> "KeyBuilder[T]":
        self._fallback_value = fallback_value
        return self

    def user_immutable(self) -> "KeyBuilder[T]":
        """Mark the key as not changeable by end users."""
        self._user_immutable = True
        return self

    def sensitive(self) -> "KeyBuilder[T]":
        """Mark the key as sensitive (e.g. connection details).

        Inspection tools hide sensitive values unless the registry enables
        ``REGEDIT_ALLOW_SENSITIVE``.
        """
        self._sensitive = True
        return self

    def description(self, description: Optional[str]) -> "KeyBuilder[T]":
        self._description = description
        return self

    def parser(self, parser: Optional[Callable[[str], T]]) -> "KeyBuilder[T]":
        self._parser = parser
        return self

    def to_stringer(self, to_stringer: Optional[Callable[[T], str]]) -> "KeyBuilder[T]":
        self._to_stringer = to_stringer
        return self

    def build(self) -> Key[T]:
        """Materialize the key.

        Raises:
            ConfigurationError: If the type descriptor or a non-empty name is missing.
        """
        return Key(
            type_descriptor=self._type_descriptor,
            name=self._name,
            fallback_value=self._fallback_value,
            user_immutable=self._user_immutable,
            sensitive=self._sensitive,
            description=self._description,
            parser=self._parser,
            to_stringer=self._to_stringer,
        )
