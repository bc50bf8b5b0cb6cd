"""Scatter reads from a socket into a series of buffers."""

from __future__ import annotations

import socket
from collections.abc import Iterable
from typing import Any


def readv(sock: socket.socket | Any, buffers: Iterable[Any]) -> int:
    """Receive from ``sock`` into each writable buffer in turn.

    Each buffer is filled with a single receive; reading stops at the first
    buffer that is not filled completely.  Returns the total number of bytes
    received.  If the very first receive fails, the error propagates; a
    failure after some bytes have arrived ends the read and the count so far
    is returned.
    """
    total = 0
    for buffer in buffers:
        view = memoryview(buffer).cast("B")
        wanted = view.nbytes
        if wanted == 0:
            continue
        try:
            received = sock.recv_into(view, wanted)
        except OSError:
            if total == 0:
                raise
            break
        total += received
        if received != wanted:
            break
    return total