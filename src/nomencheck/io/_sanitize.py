"""Filename sanitization helpers for IO module."""

from __future__ import annotations

import re

_ILLEGAL_RE = re.compile(r'[/\\?<>:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_RESERVED_RE = re.compile(r"^\.+$")
_WHITESPACE_RE = re.compile(r"\s")
_TRAILING_RE = re.compile(r"[. ]+$")
_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]+$")


def sanitize_filename(value: str) -> str:
    """Strip characters that cannot appear in a filename.

    Removes, in order: illegal symbols (``/ \\ ? < > : * | "``), control
    characters, names made only of dots, whitespace, and finally any
    trailing dots or spaces.

    Args:
        value: Raw filename, extension included.

    Returns:
        The cleaned filename; empty if nothing legal was left.
    """
    result = _ILLEGAL_RE.sub("", value)
    result = _CONTROL_RE.sub("", result)
    result = _RESERVED_RE.sub("", result)
    result = _WHITESPACE_RE.sub("", result)
    result = _TRAILING_RE.sub("", result)
    return result


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` into ``(stem, extension)``.

    The extension is a trailing dot followed by alphanumerics, so
    ``"a_b.tiff"`` gives ``("a_b", ".tiff")`` and a name with no such
    suffix is returned whole with an empty extension.
    """
    m = _EXTENSION_RE.search(name)
    if m is None:
        return name, ""
    return name[: m.start()], m.group()
