"""
apps.stripe_demo.redaction
~~~~~~~~~~~~~~~~~~~~~~~~~~
Display form of a stored secret: ``sk_test_51Ab...wxyz``.
"""
from __future__ import annotations

HEAD_CHARS = 12
TAIL_CHARS = 4
FULL_MASK = "********"


def mask_secret(value: str | None, head: int = HEAD_CHARS, tail: int = TAIL_CHARS) -> str | None:
    """
    Return the first *head* and last *tail* characters of *value* joined by
    ``...``, or ``None`` when there is nothing to show.

    A value no longer than ``head + tail`` would be revealed in full (or
    overlap), so it is replaced by :data:`FULL_MASK` instead.
    """
    if not value:
        return None
    if len(value) <= head + tail:
        return FULL_MASK
    return f"{value[:head]}...{value[-tail:]}"
