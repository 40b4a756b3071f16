"""Convert local video files with FFmpeg and report progress while it runs."""

from video_convert.core import (
    ConversionError,
    ConversionRequest,
    ConversionResult,
    FFmpegNotFoundError,
    ProbeError,
    ProgressEvent,
    SpawnError,
    TranscodeFailure,
)

__version__ = "0.1.0"
__metadata__ = {
    "name": "video-convert",
    "version": __version__,
    "license": "MIT",
    "python": ">=3.12",
}
__all__ = [
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "FFmpegNotFoundError",
    "ProbeError",
    "ProgressEvent",
    "SpawnError",
    "TranscodeFailure",
    "__metadata__",
    "__version__",
]
