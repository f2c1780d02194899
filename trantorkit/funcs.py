"""Byte-order helpers and string splitting."""

from __future__ import annotations

import sys

_UINT64_BYTES = 8


def hton64(n: int) -> int:
    """Convert an unsigned 64-bit integer from host to network byte order.

    On a big-endian host the value is returned unchanged; on a little-endian
    host its eight bytes are reversed. Raises OverflowError if ``n`` does not
    fit in an unsigned 64-bit integer.
    """
    raw = n.to_bytes(_UINT64_BYTES, sys.byteorder, signed=False)
    return int.from_bytes(raw, "big", signed=False)


def ntoh64(n: int) -> int:
    """Convert an unsigned 64-bit integer from network to host byte order."""
    return hton64(n)


def split_string(
    s: str, delimiter: str, accept_empty_string: bool = False
) -> list[str]:
    """Split ``s`` on every occurrence of ``delimiter``.

    Empty pieces are dropped unless ``accept_empty_string`` is true. An empty
    delimiter yields an empty list.
    """
    if not delimiter:
        return []
    pieces: list[str] = []
    last = 0
    while (found := s.find(delimiter, last)) != -1:
        if found > last or accept_empty_string:
            pieces.append(s[last:found])
        last = found + len(delimiter)
    if len(s) > last or accept_empty_string:
        pieces.append(s[last:])
    return pieces