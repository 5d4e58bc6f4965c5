import pytest

from regkeys.core.registry import InMemoryRegistry
from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE
from regkeys.keys.key import Key


class FakeRegistry:
    def __init__(self, override: bool):
        self.override = override
        self.calls = []

    def get_or_default(self, key):
        self.calls.append(key)
        return self.override


OVERRIDE = Key.define(bool, "allow.sensitive", fallback=False)


def test_raw_flag():
    assert Key.define(str, "s", sensitive=True).is_sensitive() is True
    assert Key.define(str, "s").is_sensitive() is False


@pytest.mark.parametrize(
    "sensitive,override,expected",
    [
        (True, True, False),
        (True, False, True),
        (False, True, False),
        (False, False, False),
    ],
)
def test_gate_against_registry_override(sensitive, override, expected):
    key = Key.define(str, "db.password", sensitive=sensitive)
    registry = FakeRegistry(override)

    assert key.is_sensitive(registry, OVERRIDE) is expected


def test_gate_consults_only_the_override_key():
    key = Key.define(str, "db.password", sensitive=True)
    registry = FakeRegistry(False)

    key.is_sensitive(registry, OVERRIDE)

    assert registry.calls == [OVERRIDE]


def test_gate_defaults_to_regedit_allow_sensitive():
    key = Key.define(str, "db.password", sensitive=True)
    registry = InMemoryRegistry()

    assert key.is_sensitive(registry) is True

    registry.set(REGEDIT_ALLOW_SENSITIVE, True)
    assert key.is_sensitive(registry) is False


def test_regedit_allow_sensitive_key():
    assert REGEDIT_ALLOW_SENSITIVE.fallback_value is False
    assert REGEDIT_ALLOW_SENSITIVE.user_immutable is True
    assert REGEDIT_ALLOW_SENSITIVE.parse("TRUE") is True
    assert REGEDIT_ALLOW_SENSITIVE.to_string(True) == "true"
