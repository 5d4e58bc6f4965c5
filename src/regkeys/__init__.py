"""regkeys.

Typed configuration keys for key/value registries.

A key names one configuration value, carries its fallback, knows how to parse
and render it as text, and declares whether users may change it and whether
it is sensitive.

Public API for clients defining and inspecting keys.
"""

from regkeys.core.exceptions import ConfigurationError, FormatError, RegistryError
from regkeys.core.registry import InMemoryRegistry, Registry
from regkeys.core.type_descriptor import TypeDescriptor
from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE
from regkeys.keys.key import Key, KeyBuilder, Named
from regkeys.keys.types import Int8, Int16, Int32, Int64

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FormatError",
    "InMemoryRegistry",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Key",
    "KeyBuilder",
    "Named",
    "REGEDIT_ALLOW_SENSITIVE",
    "Registry",
    "RegistryError",
    "TypeDescriptor",
]
