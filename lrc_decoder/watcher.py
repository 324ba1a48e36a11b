"""Watch mode: decode .lrc files dropped into a directory into JSON files."""

import json
import logging
import os
import tempfile
import time

from watchdog.events import FileSystemEventHandler

from lrc_decoder.config import Config
from lrc_decoder.models import interval_to_dict
from lrc_decoder.parser import NotThisFormat
from lrc_decoder.reader import decode_file

logger = logging.getLogger(__name__)

# minimum gap between two decodes of the same path
DEBOUNCE_SECONDS = 0.5
LRC_SUFFIX = ".lrc"


def _is_lrc(path: str) -> bool:
    return path.lower().endswith(LRC_SUFFIX)


def _output_name(lrc_path: str) -> str:
    stem = os.path.splitext(os.path.basename(lrc_path))[0]
    return f"decoded_{stem}.json"


class LyricsWatcher(FileSystemEventHandler):
    """Decodes each lyric file that appears or changes under the input directory."""

    def __init__(self, config: Config):
        super().__init__()
        self._config = config
        self._seen_at: dict[str, float] = {}
        self.decoded_count = 0
        self.failed_count = 0

    def on_created(self, event):
        self._on_lrc_event(event)

    def on_modified(self, event):
        self._on_lrc_event(event)

    def _on_lrc_event(self, event):
        if event.is_directory or not _is_lrc(event.src_path):
            return
        path = event.src_path
        now = time.monotonic()
        if path in self._seen_at and now - self._seen_at[path] < DEBOUNCE_SECONDS:
            return
        self._seen_at[path] = now
        self.process_file(path)

    def process_file(self, filepath: str) -> str | None:
        """Decode *filepath* into the output directory.

        Returns the JSON path written, or None when the file was rejected or
        unreadable. Failures are logged and counted, never raised.
        """
        logger.info("Decoding lyrics: %s", filepath)
        try:
            intervals = decode_file(filepath, self._config)
        except (NotThisFormat, OverflowError) as e:
            self.failed_count += 1
            logger.error("Rejected %s: %s", filepath, e)
            return None
        except (OSError, UnicodeDecodeError) as e:
            self.failed_count += 1
            logger.error("Could not read %s: %s", filepath, e)
            return None

        output_dir = self._config.output_dir
        os.makedirs(output_dir, exist_ok=True)
        target = os.path.join(output_dir, _output_name(filepath))
        payload = [interval_to_dict(i) for i in intervals]

        tmp_fd, tmp_path = tempfile.mkstemp(dir=output_dir, suffix=".tmp")
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, target)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

        self.decoded_count += 1
        logger.info("Wrote %d interval(s) to %s", len(intervals), target)
        return target

    def process_existing_files(self, input_dir: str):
        """Decode lyric files already sitting in *input_dir* before watching starts."""
        if not os.path.isdir(input_dir):
            logger.warning("Input directory %s does not exist yet", input_dir)
            return
        for name in sorted(os.listdir(input_dir)):
            if _is_lrc(name):
                self.process_file(os.path.join(input_dir, name))
