"""Rich progress display for video-convert."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    Task,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)
from rich.text import Text

if TYPE_CHECKING:
    from video_convert.core import ProgressEvent

# Global console instance for consistent output
console = Console()


class TimeProgressColumn(ProgressColumn):
    """Display time progress as processed / total (e.g., '0:45 / 3:20').

    When total is None or 0, shows only the processed time.
    """

    def render(self, task: Task) -> Text:
        """Render the time progress column.

        Args:
            task: The Rich Task to render progress for.

        Returns:
            Text object with formatted time progress.
        """
        elapsed = task.completed or 0

        if task.total is None or task.total == 0:
            return Text(format_time(elapsed), style="progress.elapsed")

        return Text(
            f"{format_time(elapsed)} / {format_time(task.total)}",
            style="progress.elapsed",
        )


def format_time(seconds: float) -> str:
    """Format seconds as M:SS or H:MM:SS."""
    total_secs = int(seconds)
    minutes, secs = divmod(total_secs, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def create_conversion_progress() -> Progress:
    """Create Rich progress display for a conversion (time-based).

    Displays: spinner, description, progress bar, processed/total time,
    and percentage complete.

    Returns:
        Configured Progress instance for conversion operations.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TimeProgressColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    )


def update_conversion(progress: Progress, task_id: TaskID, event: ProgressEvent) -> None:
    """Apply a ProgressEvent to a conversion task.

    A zero total leaves the task indeterminate.
    """
    total = event.total_duration or None
    progress.update(task_id, completed=event.current_time, total=total)


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Plain text; square brackets are printed literally.
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: Plain text, e.g. FFmpeg output with ``[mp4 @ 0x...]`` prefixes.
    """
    console.print(f"[red]✗[/red] {escape(message)}", style="red")
