"""Line-oriented console input with the program's validation rules."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

MAX_INT_LENGTH = 10
USHRT_MAX = 65535

_CANONICAL_INT = re.compile(r"0|[1-9][0-9]*")


class InputError(ValueError):
    """Raised when console input is rejected."""


def read_line(stream: Optional[TextIO] = None, buffer_size: int = MAX_INT_LENGTH) -> str:
    """Read one non-empty line that fits in ``buffer_size`` characters.

    The line including its newline must fit in ``buffer_size - 1``
    characters. On failure the rest of the line is consumed and
    InputError is raised.
    """
    stream = sys.stdin if stream is None else stream
    line = stream.readline(buffer_size - 1)
    if len(line) > 1 and line.endswith("\n"):
        return line[:-1]
    if line and not line.endswith("\n"):
        stream.readline()
    raise InputError("Entered value is too long or empty.")


def read_int(
    message: str,
    buffer_size: int = MAX_INT_LENGTH,
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt with ``message`` and read a non-negative integer below 65535.

    Only the plain decimal form is accepted: no sign, spaces or leading zeros.
    """
    out = sys.stdout if out is None else out
    out.write(message)
    out.flush()
    text = read_line(stream, buffer_size)
    if not _CANONICAL_INT.fullmatch(text) or int(text) >= USHRT_MAX:
        raise InputError("Entered value is incorrect.")
    return int(text)