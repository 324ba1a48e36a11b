"""Output formatters: text and JSON (NDJSON)."""

import json
from typing import Callable

from lrc_decoder.models import TimedInterval, format_ms, interval_to_dict


def format_text(interval: TimedInterval) -> str:
    """Return 'start --> end: text', one lyric line per interval."""
    return f"{format_ms(interval.start_ms)} --> {format_ms(interval.end_ms)}: {interval.text}"


def format_json(interval: TimedInterval) -> str:
    """Return NDJSON, one JSON object per line, compatible with jq."""
    return json.dumps(interval_to_dict(interval), ensure_ascii=False)


def get_formatter(output_format: str = "text") -> Callable[[TimedInterval], str]:
    """Factory that returns the right formatter for the output format."""
    if output_format == "json":
        return format_json
    return format_text
