"""Convert feature - handles ffprobe/FFmpeg interaction for video conversion."""

from video_convert.convert.probe import probe_duration
from video_convert.convert.progress import StatusLineBuffer, parse_progress_time
from video_convert.convert.transcoder import Conversion, build_ffmpeg_command, convert

__all__ = [
    "Conversion",
    "StatusLineBuffer",
    "build_ffmpeg_command",
    "convert",
    "parse_progress_time",
    "probe_duration",
]
