"""Byte-order helpers and string splitting."""

from __future__ import annotations

import sys

_UINT64_MAX = (1 << 64) - 1


def hton64(n: int) -> int:
    """Convert a 64-bit unsigned integer from host to network byte order."""
    if not 0 <= n <= _UINT64_MAX:
        raise ValueError(f"value out of range for a 64-bit unsigned integer: {n}")
    if sys.byteorder == "big":
        return n
    return int.from_bytes(n.to_bytes(8, "little"), "big")


def ntoh64(n: int) -> int:
    """Convert a 64-bit unsigned integer from network to host byte order."""
    return hton64(n)


def split_string(
    s: str, delimiter: str, accept_empty_string: bool = False
) -> list[str]:
    """Split ``s`` on every occurrence of ``delimiter``, scanning left to right.

    Empty pieces are dropped unless ``accept_empty_string`` is true.  An empty
    delimiter yields an empty list.
    """
    if not delimiter:
        return []
    pieces = s.split(delimiter)
    if accept_empty_string:
        return pieces
    return [piece for piece in pieces if piece]