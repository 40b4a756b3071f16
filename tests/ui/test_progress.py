"""Unit tests for progress display module."""

from __future__ import annotations

from unittest.mock import MagicMock

from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from video_convert.core import ProgressEvent
from video_convert.ui.progress import (
    TimeProgressColumn,
    console,
    create_conversion_progress,
    format_time,
    print_error,
    print_success,
    update_conversion,
)


class TestCreateConversionProgress:
    """Tests for create_conversion_progress() factory function."""

    def test_returns_progress_instance(self) -> None:
        """Test that factory returns a Progress instance."""
        assert isinstance(create_conversion_progress(), Progress)

    def test_has_required_columns(self) -> None:
        """Test that conversion progress has all required columns."""
        progress = create_conversion_progress()
        column_types = [type(col) for col in progress.columns]

        assert SpinnerColumn in column_types
        assert TextColumn in column_types
        assert BarColumn in column_types
        assert TimeProgressColumn in column_types
        assert TaskProgressColumn in column_types

    def test_uses_console(self) -> None:
        """Test that progress uses the shared console instance."""
        assert create_conversion_progress().console is console


class TestTimeProgressColumn:
    """Tests for TimeProgressColumn rendering."""

    def test_with_total(self) -> None:
        """Test processed and total time are both shown."""
        task = MagicMock()
        task.completed = 45
        task.total = 200
        assert TimeProgressColumn().render(task).plain == "0:45 / 3:20"

    def test_without_total(self) -> None:
        """Test only processed time is shown when total is unknown."""
        task = MagicMock()
        task.completed = 75
        task.total = None
        assert TimeProgressColumn().render(task).plain == "1:15"


class TestFormatTime:
    """Tests for format_time()."""

    def test_minutes(self) -> None:
        """Test M:SS under an hour."""
        assert format_time(59.9) == "0:59"

    def test_hours(self) -> None:
        """Test H:MM:SS from an hour up."""
        assert format_time(3723.5) == "1:02:03"


class TestUpdateConversion:
    """Tests for update_conversion()."""

    def test_applies_event(self) -> None:
        """Test event values are written to the task."""
        progress = MagicMock()
        update_conversion(progress, 7, ProgressEvent(30.0, 120.0))
        progress.update.assert_called_once_with(7, completed=30.0, total=120.0)

    def test_zero_total_is_indeterminate(self) -> None:
        """Test an unknown duration leaves the total unset."""
        progress = MagicMock()
        update_conversion(progress, 7, ProgressEvent(30.0, 0.0))
        progress.update.assert_called_once_with(7, completed=30.0, total=None)


class TestPrintHelpers:
    """Tests for print_error() and print_success()."""

    def test_error_keeps_brackets(self) -> None:
        """Test FFmpeg's [muxer @ addr] prefixes are printed literally."""
        with console.capture() as capture:
            print_error("[mp4 @ 0x55d1] Could not find tag")
        assert "[mp4 @ 0x55d1] Could not find tag" in capture.get()

    def test_error_with_closing_tag_text(self) -> None:
        """Test text that looks like a closing tag does not break printing."""
        with console.capture() as capture:
            print_error("[/tmp/out.mp4] oops")
        assert "[/tmp/out.mp4] oops" in capture.get()

    def test_success_keeps_brackets(self) -> None:
        """Test paths with brackets are printed literally."""
        with console.capture() as capture:
            print_success("Saved: [draft] clip.mp4")
        assert "Saved: [draft] clip.mp4" in capture.get()
