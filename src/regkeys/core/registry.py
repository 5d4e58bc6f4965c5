from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, TypeVar

from regkeys.core.exceptions import RegistryError
from regkeys.core.logger import get_logger

if TYPE_CHECKING:
    from regkeys.keys.key import Key

T = TypeVar("T")

logger = get_logger(__name__)


class Registry(Protocol):
    def get_or_default(self, key: "Key[T]") -> T:
        ...


class InMemoryRegistry:
    """Dictionary-backed registry keyed by :class:`Key` identity.

    Keys that differ only in name case address the same slot.
    """

    def __init__(self, initial: Optional[Dict["Key[Any]", Any]] = None):
        self._data: Dict["Key[Any]", Any] = dict(initial or {})

    def get(self, key: "Key[T]") -> Optional[T]:
        return self._data.get(key)

    def get_or_default(self, key: "Key[T]") -> T:
        if key in self._data:
            return self._data[key]
        return key.fallback_value

    def set(self, key: "Key[T]", value: T) -> None:
        self._data[key] = value

    def set_raw(self, key: "Key[T]", raw: str) -> T:
        """Parse ``raw`` with the key's parser and store the result.

        Raises:
            RegistryError: If the key has no parser.
            FormatError: If the parser rejects the text.
        """
        if key.parser is None:
            raise RegistryError(f"Key {key.name!r} has no parser; cannot set it from text")
        value = key.parse(raw)
        self.set(key, value)
        logger.debug(f"Set {key.name} from text")
        return value

    def set_by_user(self, key: "Key[T]", value: T) -> None:
        """Store a value on behalf of an end user, honouring user immutability."""
        if key.user_immutable:
            raise RegistryError(f"Key {key.name!r} cannot be changed by users")
        self.set(key, value)

    def unset(self, key: "Key[Any]") -> None:
        self._data.pop(key, None)

    def keys(self) -> List["Key[Any]"]:
        return sorted(self._data)
