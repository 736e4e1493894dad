"""Result-style wrappers for UI shells that expect (value, error) pairs.

Each call either returns ``(value, None)`` or ``(None, message)``; the
message is the single human-readable string of the underlying ChapterError.
"""

import logging
from typing import List, Optional, Tuple

from chapterlib.chapters import extract_chapters
from chapterlib.errors import ChapterError
from chapterlib.ffprobe import check_ffmpeg

logger = logging.getLogger(__name__)


def extract_chapters_result(file_path: str) -> Tuple[Optional[List[dict]], Optional[str]]:
    """Extract chapters as plain dicts, or return the error message."""
    try:
        chapters = extract_chapters(file_path)
    except ChapterError as e:
        logger.error("Chapter extraction failed for %s [%s]: %s", file_path, e.kind, e)
        return None, str(e)
    return [c.model_dump() for c in chapters], None


def check_ffmpeg_result() -> Tuple[Optional[str], Optional[str]]:
    """Return the ffprobe version line, or the error message."""
    try:
        return check_ffmpeg(), None
    except ChapterError as e:
        logger.error("FFmpeg check failed [%s]: %s", e.kind, e)
        return None, str(e)
