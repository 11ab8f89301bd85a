"""Input validation shared by the string algorithms."""

from __future__ import annotations

from typing import Sequence

_ACCEPTED_TYPES = (str, bytes, bytearray, list, tuple)


def ensure_sequence(value: object, label: str) -> Sequence:
    """Return *value* unchanged when it is a supported finite sequence.

    Strings, byte strings and lists or tuples of comparable elements are
    accepted.  Everything else raises ``TypeError`` so that misuse surfaces at
    the call site instead of deep inside an index loop.
    """

    if not isinstance(value, _ACCEPTED_TYPES):
        raise TypeError(
            f"{label} must be a str, bytes, list or tuple; "
            f"received {type(value).__name__}"
        )
    return value


__all__ = ["ensure_sequence"]
