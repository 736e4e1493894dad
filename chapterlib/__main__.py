"""CLI entry point: python -m chapterlib /path/to/video.mp4"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from chapterlib.boundary import check_ffmpeg_result, extract_chapters_result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="chapterscan",
        description="Chapter Scanner: list the chapter markers embedded in a media file",
    )
    parser.add_argument(
        "file_path",
        nargs="?",
        help="Media file to scan (mp4, mkv, mov, webm, ...)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the ffprobe version line and verify FFmpeg is installed",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    if not args.file_path and not args.check:
        parser.error("file_path is required unless --check is given")

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.check:
        version, error = check_ffmpeg_result()
        if error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        print(version)
        if not args.file_path:
            return 0

    chapters, error = extract_chapters_result(args.file_path)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(json.dumps(chapters, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
