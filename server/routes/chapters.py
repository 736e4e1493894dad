"""Chapter endpoints -- extract chapter markers and check the FFmpeg install."""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from chapterlib.chapters import Chapter, extract_chapters
from chapterlib.errors import ChapterError
from chapterlib.ffprobe import check_ffmpeg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chapters"])

# Error kind -> HTTP status. The probe is an upstream dependency, so its
# failures are gateway errors rather than 500s.
ERROR_STATUS = {
    "spawn": 503,
    "timeout": 504,
    "process": 502,
    "encoding": 502,
    "parse": 502,
}


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class ExtractChaptersRequest(BaseModel):
    file_path: str = Field(..., min_length=1)


class FfmpegStatus(BaseModel):
    available: bool
    version: Optional[str] = None
    error: Optional[str] = None


def _http_error(err: ChapterError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS.get(err.kind, 500),
        detail=str(err),
        headers={"X-Error-Kind": err.kind},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

# Plain def: FastAPI runs these in its threadpool while ffprobe blocks.
@router.post("/chapters", response_model=List[Chapter])
def extract_chapters_endpoint(req: ExtractChaptersRequest) -> List[Chapter]:
    """Scan a media file for embedded chapter markers."""
    logger.info("POST /api/chapters path=%s", req.file_path)
    try:
        return extract_chapters(req.file_path)
    except ChapterError as e:
        logger.error("Chapter extraction failed for %s: %s", req.file_path, e)
        raise _http_error(e) from e


@router.get("/ffmpeg", response_model=FfmpegStatus)
def check_ffmpeg_endpoint() -> FfmpegStatus:
    """Report whether ffprobe can be run, for the UI's startup check."""
    logger.info("GET /api/ffmpeg")
    try:
        version = check_ffmpeg()
    except ChapterError as e:
        logger.warning("FFmpeg check failed: %s", e)
        return FfmpegStatus(available=False, error=str(e))
    return FfmpegStatus(available=True, version=version)
