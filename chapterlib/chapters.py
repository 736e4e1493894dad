"""Chapter model and ffprobe chapter-report mapping."""

import json
import logging
import math
import re
from typing import Any, List, Optional

from pydantic import BaseModel

from chapterlib.errors import EncodingError, ParseError
from chapterlib.ffprobe import extract_chapters_raw

logger = logging.getLogger(__name__)

# Plain decimal or exponent notation, no whitespace or digit separators
_SECONDS_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Chapter(BaseModel):
    id: str
    title: str
    start: float = 0.0
    end: Optional[float] = None


def _get_obj(value: Any, key: str) -> Optional[dict]:
    """Return value[key] if value is an object and the field is an object."""
    if not isinstance(value, dict):
        return None
    field = value.get(key)
    return field if isinstance(field, dict) else None


def _get_str(value: Any, key: str) -> Optional[str]:
    """Return value[key] if value is an object and the field is a string."""
    if not isinstance(value, dict):
        return None
    field = value.get(key)
    return field if isinstance(field, str) else None


def _parse_seconds(raw: Optional[str]) -> Optional[float]:
    """Parse an ffprobe time string. None for absent, unparsable or non-finite."""
    if raw is None or not _SECONDS_RE.fullmatch(raw):
        return None
    seconds = float(raw)
    return seconds if math.isfinite(seconds) else None


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def map_chapter(index: int, entry: Any) -> Chapter:
    """Map one element of the ffprobe ``chapters`` array.

    Fields that are missing or of the wrong type fall back individually:
    start -> 0.0, end -> None, title -> "Chapter <index + 1>".
    """
    start = _parse_seconds(_get_str(entry, "start_time"))
    end = _parse_seconds(_get_str(entry, "end_time"))
    title = _get_str(_get_obj(entry, "tags"), "title")

    return Chapter(
        id=f"chapter-{index}",
        title=title or f"Chapter {index + 1}",
        start=start if start is not None else 0.0,
        end=end,
    )


def parse_chapters(raw: bytes) -> List[Chapter]:
    """Convert raw ``ffprobe -show_chapters`` JSON output into Chapter records.

    A report without a ``chapters`` array is a valid empty result.

    Raises EncodingError for invalid UTF-8 and ParseError for invalid JSON.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"Invalid UTF-8 output from ffprobe: {e}") from e

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Failed to parse JSON from ffprobe: {e}") from e

    entries = data.get("chapters") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        return []

    return [map_chapter(i, entry) for i, entry in enumerate(entries)]


def extract_chapters(file_path: str, timeout: Optional[float] = None) -> List[Chapter]:
    """Probe a media file and return its chapters in probe order."""
    chapters = parse_chapters(extract_chapters_raw(file_path, timeout=timeout))
    logger.info("Found %d chapters", len(chapters))
    return chapters
