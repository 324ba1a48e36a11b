"""Strip timestamps and enhanced-LRC word tags from a lyric line."""

import re

# <mm:ss.cc> or <mm:ss.mmm> word timing tags (Enhanced LRC / A2 extension)
ENHANCED_TAG_RE = re.compile(r"<\d{2}:\d{2}\.\d{2,3}>")


def clean_line(line: str) -> str:
    """Return the display text of an anchored line.

    Everything up to and including the first ']' is dropped, then inline
    word tags are removed and the result trimmed.
    """
    content = line[line.find("]") + 1:].strip()
    return ENHANCED_TAG_RE.sub("", content).strip()
