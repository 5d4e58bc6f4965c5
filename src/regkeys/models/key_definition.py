from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, field_validator, model_validator

from regkeys.core.exceptions import FormatError
from regkeys.core.logger import get_logger
from regkeys.core.registry import InMemoryRegistry
from regkeys.keys.key import Key
from regkeys.keys.parsers import format_value, parser_for_type
from regkeys.keys.types import Int8, Int16, Int32, Int64

logger = get_logger(__name__)

ValueType = Literal["str", "bool", "float", "int", "int8", "int16", "int32", "int64"]
ScalarValue = Union[StrictBool, StrictInt, StrictFloat, str]

_PYTHON_TYPES: Dict[str, type] = {
    "str": str,
    "bool": bool,
    "float": float,
    "int": int,
    "int8": Int8,
    "int16": Int16,
    "int32": Int32,
    "int64": Int64,
}


class KeyDefinition(BaseModel):
    """Declarative form of a :class:`Key`, as found in JSON/YAML key sets.

    ``fallback`` may be given natively (``8080``, ``true``) or as text, which
    is parsed with the declared type's parser.
    """

    name: str = Field(min_length=1)
    type: ValueType = "str"
    fallback: Optional[ScalarValue] = None
    user_immutable: bool = False
    sensitive: bool = False
    description: Optional[str] = None

    @model_validator(mode="after")
    def _validate_fallback(self) -> "KeyDefinition":
        # Surfaces as a pydantic ValidationError at load time.
        self.typed_fallback()
        return self

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self.type]

    def typed_fallback(self) -> Any:
        value = self.fallback
        if value is None:
            return None
        if self.type == "str":
            return format_value(value)
        if isinstance(value, str):
            return parser_for_type(self.python_type)(value)
        if self.type == "bool":
            if not isinstance(value, bool):
                raise FormatError(value, "bool")
            return value
        if isinstance(value, bool) or (isinstance(value, float) and self.type != "float"):
            raise FormatError(value, self.type)
        return self.python_type(value)

    def to_key(self) -> Key[Any]:
        return Key.define(
            self.python_type,
            self.name,
            fallback=self.typed_fallback(),
            user_immutable=self.user_immutable,
            sensitive=self.sensitive,
            description=self.description,
            parser=parser_for_type(self.python_type),
            to_stringer=format_value,
        )


class KeySetConfig(BaseModel):
    """A set of key definitions plus values to store for them.

    Values may be written natively or as text; they are kept as text and
    parsed by each key when the registry is built.
    """

    keys: List[KeyDefinition] = Field(default_factory=list)
    values: Dict[str, ScalarValue] = Field(default_factory=dict)

    @field_validator("values", mode="after")
    @classmethod
    def _values_as_text(cls, values: Dict[str, ScalarValue]) -> Dict[str, str]:
        # YAML yields native scalars for unquoted values; registries load text.
        return {name: format_value(value) for name, value in values.items()}

    @model_validator(mode="after")
    def _validate_names(self) -> "KeySetConfig":
        seen: Dict[str, str] = {}
        for definition in self.keys:
            folded = definition.name.casefold()
            if folded in seen:
                raise ValueError(
                    f"Duplicate key name {definition.name!r} (already defined as {seen[folded]!r})"
                )
            seen[folded] = definition.name

        unknown = [name for name in self.values if name.casefold() not in seen]
        if unknown:
            raise ValueError(f"Values given for undefined keys: {sorted(unknown)}")
        return self

    def build_keys(self) -> List[Key[Any]]:
        return sorted(definition.to_key() for definition in self.keys)

    def find_key(self, name: str) -> Optional[Key[Any]]:
        folded = name.casefold()
        for definition in self.keys:
            if definition.name.casefold() == folded:
                return definition.to_key()
        return None

    def to_registry(self) -> InMemoryRegistry:
        """Build an in-memory registry holding the parsed ``values``.

        Raises:
            FormatError: If a value does not parse as its key's type.
        """
        registry = InMemoryRegistry()
        keys = {key.name.casefold(): key for key in self.build_keys()}
        for name, raw in self.values.items():
            registry.set_raw(keys[name.casefold()], raw)
        logger.info(f"Loaded {len(self.values)} value(s) for {len(keys)} key(s)")
        return registry


def load_key_set(path: Union[str, Path]) -> KeySetConfig:
    """Read a key set from a ``.json``, ``.yaml`` or ``.yml`` file."""
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Key set file not found: {path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            data = json.load(f)
        elif config_file.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        else:
            raise ValueError(
                f"Unsupported key set format: {config_file.suffix}. Use .json or .yaml"
            )

    logger.info(f"Loaded key set from {path}")
    return KeySetConfig.model_validate(data)
