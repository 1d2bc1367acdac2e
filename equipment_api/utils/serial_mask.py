# equipment_api/utils/serial_mask.py
from __future__ import annotations

import re
from functools import lru_cache

__all__ = [
    "MASK_CHARACTER_CLASSES",
    "compile_mask",
    "matches_mask",
]

MASK_CHARACTER_CLASSES: dict[str, str] = {
    "N": r"[0-9]",
    "A": r"[A-Z]",
    "a": r"[a-z]",
    "X": r"[A-Z0-9]",
    "Z": r"[-_@]",
}


@lru_cache(maxsize=256)
def compile_mask(mask: str) -> re.Pattern[str]:
    """Translate an equipment type mask into an anchored regular expression.

    Every mask character maps to exactly one serial number character, so the
    serial number must have the same length as the mask. Unknown characters
    raise ValueError.
    """
    if not mask:
        raise ValueError("empty mask")
    try:
        pattern = "".join(MASK_CHARACTER_CLASSES[ch] for ch in mask)
    except KeyError as exc:
        raise ValueError(f"unsupported mask character: {exc.args[0]!r}") from exc
    return re.compile(pattern)


def matches_mask(mask: str, serial_number: str) -> bool:
    try:
        pattern = compile_mask(mask)
    except ValueError:
        # A broken mask accepts nothing
        return False
    return pattern.fullmatch(serial_number) is not None
