"""LRC timestamp grammars: priority-ordered compiled regexes.

Match order:
  1. [M:SS.mmm]     short, milliseconds
  2. [M:SS.cc]      short, centiseconds
  3. [H:MM:SS.mmm]  long, milliseconds
  4. [H:MM:SS.cc]   long, centiseconds
"""

import re
from dataclasses import dataclass

# Largest offset the format has historically carried (signed 32-bit ms)
MAX_TIMESTAMP_MS = 2**31 - 1

# ---------------------------------------------------------------------------
# Compiled regex patterns
# ---------------------------------------------------------------------------

_SHORT_MILLI_RE = re.compile(r"^\s*\[(?P<M>\d+):(?P<S>\d{2})\.(?P<MS>\d{3})\]")
_SHORT_CENTI_RE = re.compile(r"^\s*\[(?P<M>\d+):(?P<S>\d{2})\.(?P<C>\d{2})\]")
_LONG_MILLI_RE = re.compile(
    r"^\s*\[(?P<H>\d+):(?P<M>\d+):(?P<S>\d{2})\.(?P<MS>\d{3})\]"
)
_LONG_CENTI_RE = re.compile(
    r"^\s*\[(?P<H>\d+):(?P<M>\d+):(?P<S>\d{2})\.(?P<C>\d{2})\]"
)

# (name, pattern, fraction is milliseconds)
GRAMMARS = (
    ("short_milli", _SHORT_MILLI_RE, True),
    ("short_centi", _SHORT_CENTI_RE, False),
    ("long_milli", _LONG_MILLI_RE, True),
    ("long_centi", _LONG_CENTI_RE, False),
)


@dataclass(frozen=True)
class TimestampMatch:
    grammar: str
    hours: int
    minutes: int
    seconds: int
    fraction_ms: int
    milliseconds_fraction: bool

    @property
    def total_ms(self) -> int:
        total = ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 1000 + self.fraction_ms
        if total > MAX_TIMESTAMP_MS:
            raise OverflowError(f"Timestamp out of range: {total} ms")
        return total


def _group_int(match: re.Match, name: str) -> int:
    """Named group as int, 0 when the grammar has no such group."""
    value = match.groupdict().get(name)
    return int(value) if value else 0


def match_timestamp(line: str) -> TimestampMatch | None:
    """Try each grammar in order; return the first match or None."""
    for name, pattern, is_milli in GRAMMARS:
        m = pattern.match(line)
        if not m:
            continue
        if is_milli:
            fraction_ms = _group_int(m, "MS")
        else:
            fraction_ms = _group_int(m, "C") * 10
        return TimestampMatch(
            grammar=name,
            hours=_group_int(m, "H"),
            minutes=_group_int(m, "M"),
            seconds=_group_int(m, "S"),
            fraction_ms=fraction_ms,
            milliseconds_fraction=is_milli,
        )
    return None


def parse_timestamp(line: str) -> int | None:
    """Leading timestamp of *line* in milliseconds, or None if absent."""
    match = match_timestamp(line)
    if match is None:
        return None
    return match.total_ms


def is_anchored(line: str) -> bool:
    """True if the line starts with any recognised timestamp."""
    return any(pattern.match(line) for _, pattern, _ in GRAMMARS)
