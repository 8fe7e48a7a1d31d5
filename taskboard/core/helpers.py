import enum
import re
from collections.abc import Mapping
from typing import Any

from ..constants import CATEGORY_COLORS

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def task_field(task: Any, name: str, default: Any = None) -> Any:
    """Read a field from a task model, schema object or plain dict."""
    if isinstance(task, Mapping):
        return task.get(name, default)
    return getattr(task, name, default)


def enum_value(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def category_color(category: Any) -> str:
    """Pick a stable palette entry for a category name.

    Same name, same colour, on every call and every process: the choice is a
    32-bit rolling hash of the name, not a cached assignment.
    """
    name = str(enum_value(category) or "")
    hash_ = 0
    for char in name:
        hash_ = ord(char) + (_int32(_int32(hash_) << 5) - hash_)
    return CATEGORY_COLORS[abs(hash_) % len(CATEGORY_COLORS)]


def is_valid_email(email: Any) -> bool:
    return isinstance(email, str) and bool(EMAIL_RE.match(email))


def sanitize_string(value: Any) -> str:
    """Trim, drop angle brackets and collapse runs of whitespace."""
    if not isinstance(value, str):
        return ""
    return re.sub(r"\s+", " ", value.strip().replace("<", "").replace(">", ""))
