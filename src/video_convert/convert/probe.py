"""ffprobe wrapper for reading a media file's duration."""

from __future__ import annotations

import asyncio
import logging
import math
from pathlib import Path

from video_convert.core import ProbeError
from video_convert.core.tools import FFPROBE

logger = logging.getLogger(__name__)


def build_ffprobe_command(ffprobe: str, input_path: Path) -> list[str]:
    """Build the ffprobe command printing only the container duration."""
    return [
        ffprobe,
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=noprint_wrappers=1:nokey=1",
        str(input_path),
    ]


def parse_duration(output: str) -> float:
    """Parse ffprobe's duration output.

    Raises:
        ValueError: If the output is not a finite, non-negative number.
    """
    duration = float(output.strip())
    if not math.isfinite(duration) or duration < 0:
        raise ValueError(f"invalid duration: {output.strip()!r}")
    return duration


async def probe_duration(input_path: Path, ffprobe: str = FFPROBE) -> float:
    """Get the duration of a media file in seconds via ffprobe.

    Args:
        input_path: Path to the media file.
        ffprobe: ffprobe executable to run.

    Returns:
        Duration in seconds.

    Raises:
        ProbeError: If ffprobe cannot be started, exits non-zero or prints
            something that is not a duration.
    """
    cmd = build_ffprobe_command(ffprobe, input_path)
    logger.debug("Running: %s", cmd)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        raise ProbeError(str(input_path), f"cannot run ffprobe: {e}") from e

    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        process.kill()
        await process.wait()
        raise

    if process.returncode != 0:
        message = stderr.decode(errors="replace").strip() if stderr else ""
        raise ProbeError(
            str(input_path),
            message or f"ffprobe exited with code {process.returncode}",
        )

    text = stdout.decode(errors="replace") if stdout else ""
    try:
        duration = parse_duration(text)
    except ValueError as e:
        raise ProbeError(str(input_path), f"unexpected ffprobe output: {text.strip()!r}") from e

    logger.debug("Duration of %s: %.3fs", input_path, duration)
    return duration
