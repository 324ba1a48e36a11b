"""LRC decoder: one pass, one line of lookahead.

Each line's end time is the start time of the line after it, so a line is
held as pending until its successor arrives. The last line gets an unknown
end time.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from lrc_decoder.cleaner import clean_line
from lrc_decoder.config import ParserConfig
from lrc_decoder.models import UNKNOWN_MS, TimedInterval
from lrc_decoder.timestamps import is_anchored, parse_timestamp

logger = logging.getLogger(__name__)


class NotThisFormat(ValueError):
    """Raised when the input is not an LRC stream."""


@dataclass(frozen=True)
class _Empty:
    pass


@dataclass(frozen=True)
class _Pending:
    line: str


_EMPTY = _Empty()


def iter_intervals(
    lines: Iterable[str], config: ParserConfig | None = None
) -> Iterator[TimedInterval]:
    """Lazily decode *lines* into TimedIntervals.

    Raises NotThisFormat once more unanchored lines than
    ``first_line_search_timeout`` allows have been seen, or at the end if
    nothing was produced.
    """
    config = config or ParserConfig()
    budget = config.first_line_search_timeout
    state: _Empty | _Pending = _EMPTY
    emitted = 0
    dropped = 0

    for cur in lines:
        if not is_anchored(cur):
            budget -= 1
            if budget <= 0:
                raise NotThisFormat(
                    "Stream is not in a valid LRC format "
                    "(no timestamped line found within the search timeout)"
                )

        if isinstance(state, _Pending):
            start = parse_timestamp(state.line)
            end = parse_timestamp(cur)
            if start is not None and end is not None:
                emitted += 1
                yield TimedInterval(start, end, (clean_line(state.line),))
            else:
                dropped += 1
                logger.debug("Dropping untimed pair: %r -> %r", state.line, cur)

        state = _Pending(cur)

    if isinstance(state, _Pending):
        start = parse_timestamp(state.line)
        emitted += 1
        yield TimedInterval(
            UNKNOWN_MS if start is None else start,
            UNKNOWN_MS,
            (clean_line(state.line),),
        )

    if emitted == 0:
        raise NotThisFormat("Stream is not in a valid LRC format")

    logger.debug("Decoded %d interval(s), dropped %d pair(s)", emitted, dropped)


def decode_lines(
    lines: Iterable[str], config: ParserConfig | None = None
) -> list[TimedInterval]:
    """Decode *lines* into a non-empty list of TimedIntervals."""
    return list(iter_intervals(lines, config))
