#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/utils/chunking.py
"""Split-before chunking of line sequences.

FAQ and changelog blocks are lists of entries, each introduced by a marker
line (``= Question =`` or ``= 1.2.3 =``). :func:`iter_marker_chunks` walks the
lines once and starts a new chunk *at* every marker line, so each marker stays
with the lines that follow it rather than closing the previous entry.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator


def iter_marker_chunks(lines: Iterable[str], is_marker: Callable[[str], bool]) -> Iterator[list[str]]:
    """Yield consecutive runs of lines, starting a new run at each marker.

    Lines before the first marker form a leading chunk of their own. Empty
    chunks are never yielded.

    Parameters
    ----------
    lines : iterable of str
        Lines to split, without trailing newlines
    is_marker : callable
        Predicate identifying lines that begin a new chunk

    Yields
    ------
    list of str
        One chunk of lines; the first line is the marker, except possibly
        for the leading chunk

    Examples
    --------
        >>> list(iter_marker_chunks(["intro", "= A =", "a", "= B =", "b"], lambda s: s.startswith("=")))
        [['intro'], ['= A =', 'a'], ['= B =', 'b']]

    """
    chunk: list[str] = []
    for line in lines:
        if is_marker(line) and chunk:
            yield chunk
            chunk = []
        chunk.append(line)
    if chunk:
        yield chunk
