"""Escaping of user-supplied literal values."""

import re

# . * + ? ^ $ { } ( ) | [ ] \
_METACHARACTERS = re.compile(r"[.*+?^${}()|[\]\\]")


def escape_literal(value: str) -> str:
    """Escape regex metacharacters so the value matches literally.

    Only the characters ``. * + ? ^ $ { } ( ) | [ ] \\`` are escaped,
    each with a preceding backslash. Everything else is left as typed.

    Args:
        value: Literal text entered by the user.

    Returns:
        The escaped text.

    Examples:
        >>> escape_literal("DTS-HD.MA")
        'DTS-HD\\\\.MA'
        >>> escape_literal("HDR10+")
        'HDR10\\\\+'
    """
    return _METACHARACTERS.sub(r"\\\g<0>", value)
