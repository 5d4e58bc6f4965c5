"""Keys every registry understands."""

from regkeys.keys.key import Key
from regkeys.keys.parsers import format_value

REGEDIT_ALLOW_SENSITIVE: Key[bool] = (
    Key.builder(bool)
    .name("REGEDIT_ALLOW_SENSITIVE")
    .fallback(False)
    .user_immutable()
    .description("Show and edit the values of sensitive keys in inspection tools")
    .to_stringer(format_value)
    .build()
)
