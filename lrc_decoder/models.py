"""Timed interval dataclass: the unit every decoded lyric line maps to."""

from dataclasses import asdict, dataclass
from typing import Any

# End (or start) time that could not be determined
UNKNOWN_MS = -1


@dataclass(frozen=True)
class TimedInterval:
    start_ms: int
    end_ms: int
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def format_ms(value: int) -> str:
    """Render milliseconds as H:MM:SS.mmm; the unknown sentinel renders as '?'."""
    if value == UNKNOWN_MS:
        return "?"
    seconds, millis = divmod(value, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def interval_to_dict(interval: TimedInterval) -> dict[str, Any]:
    """Convert a TimedInterval to a JSON-ready dict."""
    d = asdict(interval)
    d["lines"] = list(interval.lines)
    return d
