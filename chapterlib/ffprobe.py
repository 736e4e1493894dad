"""FFprobe wrapper -- single source of truth for chapter and version probing."""

import logging
import subprocess
from typing import List, NamedTuple, Optional

from chapterlib.errors import ProbeTimeoutError, ProcessError, SpawnError
from chapterlib.settings import get_ffprobe_bin, get_probe_timeout

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "Unknown version"


class ProbeResult(NamedTuple):
    returncode: int
    stdout: bytes
    stderr: bytes


def build_chapters_cmd(file_path: str, binary: Optional[str] = None) -> List[str]:
    """Build the ffprobe command that reports chapters only, as JSON."""
    return [
        binary or get_ffprobe_bin(), "-v", "quiet",
        "-print_format", "json",
        "-show_chapters",
        str(file_path),
    ]


def build_version_cmd(binary: Optional[str] = None) -> List[str]:
    return [binary or get_ffprobe_bin(), "-version"]


def _decode_stderr(stderr: bytes) -> str:
    return stderr.decode("utf-8", errors="replace").strip()


def run_probe(cmd: List[str], spawn_message: str, timeout: Optional[float] = None) -> ProbeResult:
    """Run a probe command to completion, capturing stdout and stderr as bytes.

    A non-zero exit status is returned, not raised; callers decide how to
    report it. subprocess.run drains both pipes and reaps the child on every
    path, including the timeout kill.

    Raises:
        SpawnError: the executable could not be launched. ``spawn_message``
            is formatted with ``binary`` and ``error``.
        ProbeTimeoutError: the process outlived ``timeout`` seconds.
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise ProbeTimeoutError(
            f"{cmd[0]} did not finish within {timeout:g}s and was terminated.",
            timeout=timeout,
        ) from e
    except OSError as e:
        raise SpawnError(spawn_message.format(binary=cmd[0], error=e)) from e
    return ProbeResult(result.returncode, result.stdout or b"", result.stderr or b"")


def extract_chapters_raw(file_path: str, timeout: Optional[float] = None) -> bytes:
    """Run ffprobe against a media file and return its raw chapter JSON bytes.

    The file is not checked for existence; ffprobe reports that itself.

    Raises SpawnError if ffprobe can't be launched, ProcessError if it exits
    non-zero, ProbeTimeoutError if it hangs past the configured timeout.
    """
    if timeout is None:
        timeout = get_probe_timeout()
    logger.info("Extracting chapters from: %s", file_path)

    result = run_probe(
        build_chapters_cmd(file_path),
        "Failed to launch {binary}: {error}. Make sure FFmpeg is installed.",
        timeout=timeout,
    )
    if result.returncode != 0:
        stderr = _decode_stderr(result.stderr)
        raise ProcessError(
            f"FFprobe failed with exit status {result.returncode}: {stderr}",
            returncode=result.returncode,
            stderr=stderr,
        )
    return result.stdout


def check_ffmpeg(timeout: Optional[float] = None) -> str:
    """Return the first line of ``ffprobe -version``.

    Empty output yields UNKNOWN_VERSION rather than an error; a blank first
    line is returned as-is.
    """
    if timeout is None:
        timeout = get_probe_timeout()

    result = run_probe(
        build_version_cmd(),
        "{binary} command not found ({error}). "
        "Make sure FFmpeg is installed and in your system's PATH.",
        timeout=timeout,
    )
    if result.returncode != 0:
        stderr = _decode_stderr(result.stderr)
        raise ProcessError(
            f"FFprobe execution failed with exit status {result.returncode}: {stderr}",
            returncode=result.returncode,
            stderr=stderr,
        )

    lines = result.stdout.decode("utf-8", errors="replace").splitlines()
    return lines[0] if lines else UNKNOWN_VERSION
