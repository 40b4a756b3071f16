"""Custom exceptions and error formatting for video-convert."""

from __future__ import annotations


class ConversionError(Exception):
    """Raised when a video conversion fails."""

    def __init__(self, input_path: str, message: str) -> None:
        """Initialize ConversionError.

        Args:
            input_path: Path to the input file that failed to convert.
            message: Description of the error.
        """
        self.input_path = input_path
        self.message = message
        super().__init__(f"Failed to convert {input_path}: {message}")


class ProbeError(ConversionError):
    """Raised when ffprobe cannot report the duration of a file."""


class SpawnError(ConversionError):
    """Raised when the ffmpeg process cannot be started."""


class TranscodeFailure(ConversionError):
    """Raised when ffmpeg exits with a non-zero status."""

    def __init__(self, input_path: str, message: str, returncode: int) -> None:
        """Initialize TranscodeFailure.

        Args:
            input_path: Path to the input file that failed to convert.
            message: Tail of ffmpeg's diagnostic output, or a fallback.
            returncode: The ffmpeg exit status.
        """
        self.returncode = returncode
        super().__init__(input_path, message)


class FFmpegNotFoundError(Exception):
    """Raised when FFmpeg or ffprobe is not installed."""

    def __init__(self) -> None:
        """Initialize FFmpegNotFoundError."""
        super().__init__(
            "FFmpeg not found. Install FFmpeg (ffmpeg and ffprobe): "
            "https://ffmpeg.org/download.html"
        )


def format_error(error: Exception) -> str:
    """Format error for user display with actionable suggestion.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error message with suggestion.
    """
    if isinstance(error, ConversionError):
        return f"Conversion failed: {error.message}"

    if isinstance(error, FFmpegNotFoundError):
        return str(error)

    if isinstance(error, FileNotFoundError):
        return f"File not found: {error}. Check that the path exists."

    if isinstance(error, PermissionError):
        return f"Permission denied: {error}. Check file permissions."

    if isinstance(error, OSError):
        if "No space left" in str(error):
            return "Insufficient disk space. Free up space and retry."
        return f"System error: {error}"

    return f"Unexpected error: {error}"
