"""Core utilities - errors, value types and tool lookup."""

from video_convert.core.errors import (
    ConversionError,
    FFmpegNotFoundError,
    ProbeError,
    SpawnError,
    TranscodeFailure,
    format_error,
)
from video_convert.core.models import (
    ConversionRequest,
    ConversionResult,
    ConversionState,
    ProgressEvent,
)
from video_convert.core.tools import ToolPaths, check_ffmpeg, find_tools

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "ConversionState",
    "FFmpegNotFoundError",
    "ProbeError",
    "ProgressEvent",
    "SpawnError",
    "ToolPaths",
    "TranscodeFailure",
    "check_ffmpeg",
    "find_tools",
    "format_error",
]
