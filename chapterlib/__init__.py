"""Chapter Scanner core -- ffprobe chapter extraction and version check."""

from chapterlib.chapters import Chapter, extract_chapters, parse_chapters
from chapterlib.errors import (
    ChapterError,
    EncodingError,
    ParseError,
    ProbeTimeoutError,
    ProcessError,
    SpawnError,
)
from chapterlib.ffprobe import check_ffmpeg

__version__ = "0.1.0"

__all__ = [
    "Chapter",
    "ChapterError",
    "EncodingError",
    "ParseError",
    "ProbeTimeoutError",
    "ProcessError",
    "SpawnError",
    "check_ffmpeg",
    "extract_chapters",
    "parse_chapters",
]
