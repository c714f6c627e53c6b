"""Discarding stdin while the status line renders.

Claude Code pipes session JSON to the command. Nothing here needs it, but the
pipe is read through the event loop so a writer that never closes it cannot
stall the process.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536


@contextmanager
def ignore_stdin(
    loop: asyncio.AbstractEventLoop,
    stream: IO | None = None,
) -> Iterator[bool]:
    """Read and drop everything arriving on stream for the duration.

    Yields True when a reader was registered. Terminals, regular files and
    event loops without ``add_reader`` support are left alone.
    """
    stream = stream if stream is not None else sys.stdin
    fd = _pipe_fd(stream)
    if fd is None:
        yield False
        return

    def _drain() -> None:
        try:
            chunk = os.read(fd, CHUNK_SIZE)
        except BlockingIOError:
            return
        except OSError as e:
            logger.debug("Stopped draining stdin: %s", e)
            chunk = b""
        if not chunk:
            loop.remove_reader(fd)

    try:
        loop.add_reader(fd, _drain)
    except (NotImplementedError, OSError, ValueError) as e:
        logger.debug("Not draining stdin: %s", e)
        yield False
        return

    try:
        yield True
    finally:
        loop.remove_reader(fd)


def _pipe_fd(stream: IO | None) -> int | None:
    if stream is None or stream.closed:
        return None
    try:
        if stream.isatty():
            return None
        return stream.fileno()
    except (OSError, ValueError):
        return None
