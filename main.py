"""lrc-decoder: decode LRC lyric files into timed intervals."""

import logging
import os
import signal
import sys
import time
from argparse import ArgumentParser

from lrc_decoder.config import Config, ConfigError, load_config, load_yaml_config
from lrc_decoder.formatter import get_formatter
from lrc_decoder.parser import NotThisFormat
from lrc_decoder.reader import decode_file, expand_paths

logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, frame):
    global _running
    logger.info("Shutdown signal received, stopping...")
    _running = False


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="lrc-decode",
        description="Decode LRC lyric files into timed intervals.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="LRC file path(s) or glob pattern(s)",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--search-timeout",
        type=int,
        default=None,
        help="Unanchored lines tolerated before rejecting a file (default: 20)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the input files (default: utf-8-sig)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING, INFO in watch mode)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch an input directory and write decoded JSON files",
    )
    parser.add_argument(
        "--input-dir",
        default=None,
        help="Directory to watch (default: ./lyrics)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for decoded JSON output (default: ./decoded)",
    )
    return parser


def run_decode(files: list[str], config: Config) -> int:
    """Decode each file and print its intervals. Returns the exit code."""
    formatter = get_formatter(config.output_format)
    paths = expand_paths(files)
    show_header = len(paths) > 1 and config.output_format == "text"

    for i, path in enumerate(paths):
        intervals = decode_file(path, config)
        if show_header:
            if i:
                print()
            print(f"==> {path} <==")
        for interval in intervals:
            print(formatter(interval))
    return 0


def run_watch(config: Config) -> int:
    """Decode existing files, then keep decoding new ones until signalled."""
    from watchdog.observers import Observer

    from lrc_decoder.watcher import LyricsWatcher

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    os.makedirs(config.input_dir, exist_ok=True)
    os.makedirs(config.output_dir, exist_ok=True)

    watcher = LyricsWatcher(config)
    watcher.process_existing_files(config.input_dir)

    observer = Observer()
    observer.schedule(watcher, config.input_dir, recursive=False)
    observer.start()
    logger.info("LRC decoder running. Watching: %s", config.input_dir)

    try:
        while _running:
            time.sleep(1)
    finally:
        observer.stop()
        observer.join(timeout=5)
        logger.info("Stopped: %d decoded, %d failed",
                    watcher.decoded_count, watcher.failed_count)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args, load_yaml_config(args.config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [LRC] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.watch:
        return run_watch(config)

    if not args.files:
        parser.error("at least one file is required unless --watch is given")

    try:
        return run_decode(args.files, config)
    except (NotThisFormat, OverflowError, FileNotFoundError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
