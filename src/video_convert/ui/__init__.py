"""UI feature - Rich progress display and console output."""

from video_convert.ui.progress import (
    TimeProgressColumn,
    console,
    create_conversion_progress,
    format_time,
    print_error,
    print_success,
    update_conversion,
)

__all__ = [
    "TimeProgressColumn",
    "console",
    "create_conversion_progress",
    "format_time",
    "print_error",
    "print_success",
    "update_conversion",
]
