from regkeys.core.registry import InMemoryRegistry
from regkeys.inspection import REDACTED, describe_key, describe_keys
from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE
from regkeys.keys.key import Key


PASSWORD = Key.define(str, "db.password", fallback="changeme", sensitive=True, to_stringer=str)
PORT = Key.define(int, "server.port", fallback=8080, to_stringer=str, description="Port")


def test_sensitive_values_are_redacted_by_default():
    registry = InMemoryRegistry()
    registry.set(PASSWORD, "hunter2")

    view = describe_key(registry, PASSWORD)

    assert view.value == REDACTED
    assert view.redacted is True
    assert view.sensitive is True


def test_override_reveals_sensitive_values():
    registry = InMemoryRegistry()
    registry.set(PASSWORD, "hunter2")
    registry.set(REGEDIT_ALLOW_SENSITIVE, True)

    view = describe_key(registry, PASSWORD)

    assert view.value == "hunter2"
    assert view.redacted is False


def test_custom_override_key():
    override = Key.define(bool, "admin.mode", fallback=True)

    view = describe_key(InMemoryRegistry(), PASSWORD, override)

    assert view.value == "changeme"


def test_describe_keys_renders_values_in_key_order():
    registry = InMemoryRegistry()
    registry.set(PORT, 9090)
    plain = Key.define(str, "App.Name")

    views = describe_keys(registry, [PORT, PASSWORD, plain])

    assert [v.name for v in views] == ["App.Name", "db.password", "server.port"]
    assert views[0].value is None
    assert views[2].to_dict() == {
        "name": "server.port",
        "type": "int",
        "value": "9090",
        "description": "Port",
        "user_immutable": False,
        "sensitive": False,
        "redacted": False,
    }
