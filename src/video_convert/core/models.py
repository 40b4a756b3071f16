"""Value types shared by the prober, the orchestrator and the UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ConversionState(Enum):
    """Lifecycle of a single conversion."""

    IDLE = "idle"
    PROBING = "probing"
    PROBE_FAILED = "probe_failed"
    TRANSCODING = "transcoding"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition can leave this state."""
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        ConversionState.PROBE_FAILED,
        ConversionState.SUCCEEDED,
        ConversionState.FAILED,
    }
)

# Allowed forward transitions; nothing is ever re-entered
TRANSITIONS: dict[ConversionState, frozenset[ConversionState]] = {
    ConversionState.IDLE: frozenset({ConversionState.PROBING}),
    ConversionState.PROBING: frozenset(
        {ConversionState.PROBE_FAILED, ConversionState.TRANSCODING}
    ),
    ConversionState.TRANSCODING: frozenset(
        {ConversionState.SUCCEEDED, ConversionState.FAILED}
    ),
    ConversionState.PROBE_FAILED: frozenset(),
    ConversionState.SUCCEEDED: frozenset(),
    ConversionState.FAILED: frozenset(),
}


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion job.

    Attributes:
        input_path: Existing video file to read.
        output_path: Destination file, overwritten if present.
        output_format: Container/format token passed to ffmpeg's ``-f``.
    """

    input_path: Path
    output_path: Path
    output_format: str

    def __post_init__(self) -> None:
        """Normalize paths and validate the format token."""
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))
        if not self.output_format or not self.output_format.strip():
            raise ValueError("output_format must not be empty")


@dataclass(frozen=True)
class ConversionResult:
    """Terminal outcome of a conversion, produced exactly once.

    Attributes:
        success: Whether ffmpeg finished with exit status 0.
        message: Human-readable failure reason (None on success).
    """

    success: bool
    message: str | None = field(default=None)

    @classmethod
    def ok(cls) -> ConversionResult:
        return cls(success=True)

    @classmethod
    def failed(cls, message: str) -> ConversionResult:
        return cls(success=False, message=message)


@dataclass(frozen=True)
class ProgressEvent:
    """Point-in-time progress report.

    Attributes:
        current_time: Seconds of input processed so far.
        total_duration: Probed input duration in seconds.
    """

    current_time: float
    total_duration: float

    @property
    def percent(self) -> float | None:
        """Completion percentage clamped to 0-100, None if the total is unknown."""
        if self.total_duration <= 0:
            return None
        return max(0.0, min(100.0, self.current_time / self.total_duration * 100))
