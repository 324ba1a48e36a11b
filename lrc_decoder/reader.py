"""Line reading, glob expansion, and file-level decoding."""

import glob
import io
import os
from typing import BinaryIO, Generator, TextIO

from lrc_decoder.config import Config
from lrc_decoder.models import TimedInterval
from lrc_decoder.parser import decode_lines


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def read_lines(filepath: str, encoding: str = "utf-8-sig") -> Generator[str, None, None]:
    """Yield each line of a file with its line ending removed."""
    with open(filepath, "r", encoding=encoding, newline="") as f:
        for line in f:
            yield _strip_eol(line)


def _candidates(pattern: str) -> list[str]:
    if glob.has_magic(pattern):
        return sorted(glob.glob(pattern))
    if not os.path.isfile(pattern):
        raise FileNotFoundError(f"File not found: {pattern}")
    return [pattern]


def expand_paths(raw_paths: list[str]) -> list[str]:
    """Turn CLI arguments into the ordered list of lyric files to decode.

    Patterns expand in sorted order and a file named twice is decoded once.
    A literal path that is missing, or arguments matching nothing at all,
    raise FileNotFoundError.
    """
    # dict keys keep first-seen order
    files = dict.fromkeys(p for raw in raw_paths for p in _candidates(raw))
    if not files:
        raise FileNotFoundError("No lyric files found matching the given paths")
    return list(files)


def decode_file(filepath: str, config: Config | None = None) -> list[TimedInterval]:
    """Read and decode one LRC file."""
    config = config or Config()
    return decode_lines(read_lines(filepath, config.encoding), config.parser)


def decode_stream(stream: TextIO | BinaryIO, config: Config | None = None) -> list[TimedInterval]:
    """Decode an open stream; binary streams are decoded with config.encoding."""
    config = config or Config()
    if not isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return decode_lines((_strip_eol(line) for line in stream), config.parser)

    wrapper = io.TextIOWrapper(stream, encoding=config.encoding, newline="")
    try:
        return decode_lines((_strip_eol(line) for line in wrapper), config.parser)
    finally:
        # leave the caller's stream open
        wrapper.detach()
