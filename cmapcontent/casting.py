import re
from typing import Any

from cmapcontent.utils import MAX_INT, MIN_INT

NUMBER_TEXT = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\Z")


def safe_float(o: Any) -> float | None:
    try:
        return float(o)
    except (TypeError, ValueError, OverflowError):
        return None


def safe_int32(text: str) -> int | None:
    """Read ``text`` as a decimal number truncated towards zero.

    Returns None unless the text is a plain decimal literal whose integer
    part fits in a signed 32 bit int.
    """
    if not NUMBER_TEXT.match(text):
        return None
    f = safe_float(text)
    if f is None or not (MIN_INT - 1 < f < MAX_INT + 1):
        return None
    return int(f)
