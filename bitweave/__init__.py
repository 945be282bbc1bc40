"""Bit-level reading and writing of integers, flags, IP addresses, strings and containers."""

__version__ = "0.1.0"
__all__ = ["ctx", "errors", "primitives", "sequences", "sets", "maps"]