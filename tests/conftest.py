import os

import pytest

from lrc_decoder.config import Config

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "samples")

SAMPLE_LRC = """\
[ti: Test song]
[ar: Test artist]

[00:12.00] First line
[00:17.20] Second <00:18.00>line
[00:21.100] Third line
"""


@pytest.fixture
def sample_lrc_path():
    return os.path.join(SAMPLES_DIR, "sample.lrc")


@pytest.fixture
def lyrics_dirs(tmp_path):
    input_dir = tmp_path / "lyrics"
    output_dir = tmp_path / "decoded"
    input_dir.mkdir()
    return input_dir, output_dir


@pytest.fixture
def watch_config(lyrics_dirs):
    input_dir, output_dir = lyrics_dirs
    return Config(input_dir=str(input_dir), output_dir=str(output_dir))


@pytest.fixture
def sample_lrc():
    return SAMPLE_LRC
