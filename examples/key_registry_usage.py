"""
Example: Defining keys in code and from a key set file.

This shows the two ways keys come into existence:
- Programmatic: built with Key.builder / Key.define next to the code using them
- Declarative: loaded from a JSON/YAML key set (see examples/keys.yaml)
"""

from regkeys import REGEDIT_ALLOW_SENSITIVE, InMemoryRegistry, Int32, Key, TypeDescriptor
from regkeys.inspection import describe_keys
from regkeys.keys.parsers import format_value
from regkeys.models.key_definition import load_key_set


# =============================================================================
# Example 1: Keys built in code
# =============================================================================
PORT = (
    Key.builder(Int32)
    .name("server.port")
    .fallback(Int32(8080))
    .description("Port the server listens on")
    .to_stringer(format_value)
    .build()
)

ALLOWED_HOSTS = Key.define(
    TypeDescriptor(list[str]),
    "server.allowed_hosts",
    fallback=["localhost"],
    parser=lambda raw: [h.strip() for h in raw.split(",") if h.strip()],
    to_stringer=",".join,
)

registry = InMemoryRegistry()
registry.set_raw(PORT, "9090")
registry.set_raw(ALLOWED_HOSTS, "example.com, api.example.com")

print(f"{PORT} = {registry.get_or_default(PORT)}")
print(f"{ALLOWED_HOSTS} = {ALLOWED_HOSTS.to_string(registry.get_or_default(ALLOWED_HOSTS))}")


# =============================================================================
# Example 2: Keys from a key set, inspected with sensitive values hidden
# =============================================================================
config = load_key_set("examples/keys.yaml")
registry = config.to_registry()

for view in describe_keys(registry, config.build_keys()):
    print(f"{view.name:<16} {view.value}")

registry.set(REGEDIT_ALLOW_SENSITIVE, True)
print("\nWith REGEDIT_ALLOW_SENSITIVE enabled:")
for view in describe_keys(registry, config.build_keys()):
    print(f"{view.name:<16} {view.value}")
