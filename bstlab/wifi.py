"""Wi-Fi router records, their ordering and console input."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, TextIO

from bstlab.prompts import read_int, read_line

MAX_VENDOR_LENGTH = 20
MAX_INT_LENGTH = 8
MAX_MARK_LENGTH = 10
MAX_PORT_COUNT = 32


class FiveG(IntEnum):
    """Whether a router supports the 5 GHz band."""

    IS_5G = 0
    NOT_5G = 1
    UNDEFINED = 2


class RouterError(ValueError):
    """Raised when router data fails validation."""


class InvalidPortCount(RouterError):
    """The port count is out of range."""


class Invalid5GMark(RouterError):
    """The 5G mark was neither yes nor no."""


@dataclass(frozen=True)
class Router:
    """A router: vendor name, number of ethernet ports and 5G support."""

    vendor: str
    port_count: int
    has_5g: FiveG

    def __post_init__(self) -> None:
        object.__setattr__(self, "vendor", self.vendor[: MAX_VENDOR_LENGTH - 1])
        object.__setattr__(self, "has_5g", FiveG(self.has_5g))

    def check(self) -> None:
        """Raise a RouterError subclass if the data is invalid."""
        if self.port_count > MAX_PORT_COUNT:
            raise InvalidPortCount(
                "Entered port count information is incorrect. "
                "Port count cant be more than 32."
            )
        if self.has_5g is FiveG.UNDEFINED:
            raise Invalid5GMark("Entered 5G mark is incorrect.")

    def __str__(self) -> str:
        mark = "yes" if self.has_5g is FiveG.IS_5G else "no"
        return f"Brand name: {self.vendor} \nport_count: {self.port_count}\nhas 5g: {mark}"


def compare(router1: Router, router2: Router) -> bool:
    """Return True if ``router1`` is the greater of the two.

    Vendor is compared first, then port count, then the 5G mark.
    """
    if router1.vendor != router2.vendor:
        return router1.vendor > router2.vendor
    return compare_counts(router1, router2)


def compare_counts(router1: Router, router2: Router) -> bool:
    """Compare by port count, then by 5G mark; True if ``router1`` is greater."""
    if router1.port_count != router2.port_count:
        return router1.port_count > router2.port_count
    return router2.has_5g > router1.has_5g


def precedes(a: Router, b: Router) -> bool:
    """Tree ordering predicate: True when ``a`` sorts before ``b``."""
    return compare(b, a)


def parse_5g_mark(text: str) -> FiveG:
    """Map "yes" and "no" to a mark; anything else is UNDEFINED."""
    if text == "yes":
        return FiveG.IS_5G
    if text == "no":
        return FiveG.NOT_5G
    return FiveG.UNDEFINED


def read_5g_mark(
    message: str, stream: Optional[TextIO] = None, out: Optional[TextIO] = None
) -> FiveG:
    """Prompt with ``message`` and read a yes/no 5G mark."""
    out = sys.stdout if out is None else out
    out.write(message)
    out.flush()
    return parse_5g_mark(read_line(stream, MAX_MARK_LENGTH))


def read_router(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> Router:
    """Prompt for and read a validated router.

    Raises InputError for malformed input and RouterError for invalid data.
    """
    out = sys.stdout if out is None else out
    out.write("Enter brand name: ")
    out.flush()
    vendor = read_line(stream, MAX_VENDOR_LENGTH)
    port_count = read_int("\nEnter port count: ", MAX_INT_LENGTH, stream, out)
    has_5g = read_5g_mark("\nHas 5G? (yes/no): ", stream, out)
    router = Router(vendor, port_count, has_5g)
    try:
        router.check()
    except RouterError as exc:
        out.write(f"{exc}\n")
        out.write("Structure initialization failed.\n")
        raise
    out.write("Entered data is correct!\n")
    out.write("Structure initialized successfully.\n")
    return router