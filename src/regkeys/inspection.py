"""
Read-only views of registry contents for inspection tools.

Values of sensitive keys are replaced with a placeholder unless the registry
enables the sensitivity override key.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from regkeys.core.registry import Registry
from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE
from regkeys.keys.key import Key

REDACTED = "<sensitive>"


@dataclass(frozen=True)
class KeyView:
    name: str
    type: str
    value: Optional[str]
    description: Optional[str] = None
    user_immutable: bool = False
    sensitive: bool = False
    redacted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def describe_key(
    registry: Registry,
    key: Key[Any],
    override_key: Key[bool] = REGEDIT_ALLOW_SENSITIVE,
) -> KeyView:
    redacted = key.is_sensitive(registry, override_key)
    if redacted:
        value: Optional[str] = REDACTED
    else:
        current = registry.get_or_default(key)
        value = None if current is None else key.to_string(current)

    return KeyView(
        name=key.name,
        type=str(key.type_descriptor),
        value=value,
        description=key.description,
        user_immutable=key.user_immutable,
        sensitive=key.sensitive,
        redacted=redacted,
    )


def describe_keys(
    registry: Registry,
    keys: Iterable[Key[Any]],
    override_key: Key[bool] = REGEDIT_ALLOW_SENSITIVE,
) -> List[KeyView]:
    return [describe_key(registry, key, override_key) for key in sorted(keys)]
