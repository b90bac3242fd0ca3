from __future__ import annotations


class HaltonError(Exception):
    """Base class for errors raised by the halton package."""


class InvalidBase(HaltonError, ValueError):
    """Base is below 2 or cannot be stored in the configured digit dtype."""

    def __init__(self, base, reason: str = "base must be an integer >= 2"):
        self.base = base
        super().__init__(f"{reason} (got {base!r})")


class RangeOverflow(HaltonError, OverflowError):
    """A position, offset or sequence length does not fit the index width."""


__all__ = ["HaltonError", "InvalidBase", "RangeOverflow"]
