"""Lookup of the ffmpeg and ffprobe executables."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"


@dataclass(frozen=True)
class ToolPaths:
    """Ready-to-execute locations of the external tools.

    Attributes:
        ffmpeg: Path or command name of the transcode tool.
        ffprobe: Path or command name of the inspection tool.
    """

    ffmpeg: str = FFMPEG
    ffprobe: str = FFPROBE


def check_ffmpeg(tools: ToolPaths | None = None) -> bool:
    """Check if both FFmpeg and ffprobe can be executed.

    Args:
        tools: Locations to check. Defaults to the bare names on PATH.

    Returns:
        True if both executables are available, False otherwise.
    """
    tools = tools or ToolPaths()
    return shutil.which(tools.ffmpeg) is not None and shutil.which(tools.ffprobe) is not None


def _resolve(override: str | None, name: str) -> str:
    if override:
        return override
    found = shutil.which(name)
    if found is None:
        # Left as the bare name so the spawn fails and is reported there
        logger.debug("%s not found on PATH", name)
        return name
    return found


def find_tools(ffmpeg: str | None = None, ffprobe: str | None = None) -> ToolPaths:
    """Resolve executable paths for ffmpeg and ffprobe.

    Explicit paths win; otherwise each tool is looked up on PATH.

    Args:
        ffmpeg: Optional explicit ffmpeg path.
        ffprobe: Optional explicit ffprobe path.

    Returns:
        ToolPaths with the resolved locations.
    """
    return ToolPaths(
        ffmpeg=_resolve(ffmpeg, FFMPEG),
        ffprobe=_resolve(ffprobe, FFPROBE),
    )
