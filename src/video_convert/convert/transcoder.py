"""FFmpeg wrapper for video conversion with progress reporting."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING

from video_convert.convert.probe import probe_duration
from video_convert.convert.progress import StatusLineBuffer, parse_progress_time
from video_convert.core import (
    ConversionError,
    ConversionRequest,
    ConversionResult,
    ConversionState,
    ProbeError,
    ProgressEvent,
    SpawnError,
    ToolPaths,
    TranscodeFailure,
    find_tools,
)
from video_convert.core.models import TRANSITIONS

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

VIDEO_ENCODER = "libx264"

PROBE_FAILED_MESSAGE = "Unable to get video duration"

# Lines of ffmpeg stderr kept for the failure message
STDERR_TAIL_LINES = 20

_READ_CHUNK_SIZE = 4096


def build_ffmpeg_command(
    ffmpeg: str,
    input_path: Path,
    output_path: Path,
    output_format: str,
) -> list[str]:
    """Build the ffmpeg command: re-encode video, copy audio, force the format."""
    return [
        ffmpeg,
        "-i",
        str(input_path),
        "-y",
        "-c:v",
        VIDEO_ENCODER,
        "-strict",
        "-2",
        "-c:a",
        "copy",
        "-f",
        output_format,
        str(output_path),
    ]


class Conversion:
    """One conversion run, owning its listener, its processes and its state.

    A Conversion can be run once. Progress is only ever delivered to the
    listener given here, so concurrent conversions never share events.
    """

    def __init__(
        self,
        request: ConversionRequest,
        on_progress: Callable[[ProgressEvent], None] | None = None,
        tools: ToolPaths | None = None,
    ) -> None:
        self.request = request
        self.on_progress = on_progress
        self.tools = tools if tools is not None else find_tools()
        self.state = ConversionState.IDLE
        self.total_duration = 0.0
        self.result: ConversionResult | None = None

    def _transition(self, state: ConversionState) -> None:
        if state not in TRANSITIONS[self.state]:
            raise RuntimeError(
                f"Invalid conversion transition: {self.state.value} -> {state.value}"
            )
        logger.debug("%s: %s -> %s", self.request.input_path, self.state.value, state.value)
        self.state = state

    def _finish(self, state: ConversionState, result: ConversionResult) -> ConversionResult:
        self._transition(state)
        self.result = result
        return result

    async def run(self) -> ConversionResult:
        """Probe, transcode and report the outcome.

        Returns:
            ConversionResult; failures are reported here, never raised.

        Raises:
            RuntimeError: If this conversion has already been started.
        """
        self._transition(ConversionState.PROBING)
        try:
            self.total_duration = await probe_duration(
                self.request.input_path, self.tools.ffprobe
            )
        except ProbeError as e:
            logger.warning("Duration probe failed: %s", e)
            return self._finish(
                ConversionState.PROBE_FAILED, ConversionResult.failed(PROBE_FAILED_MESSAGE)
            )

        self._transition(ConversionState.TRANSCODING)
        try:
            await self._transcode()
        except ConversionError as e:
            logger.warning("%s", e)
            return self._finish(ConversionState.FAILED, ConversionResult.failed(e.message))
        except Exception as e:
            logger.exception("Unexpected error while converting %s", self.request.input_path)
            return self._finish(ConversionState.FAILED, ConversionResult.failed(str(e)))

        return self._finish(ConversionState.SUCCEEDED, ConversionResult.ok())

    async def _transcode(self) -> None:
        request = self.request
        cmd = build_ffmpeg_command(
            self.tools.ffmpeg,
            request.input_path,
            request.output_path,
            request.output_format,
        )
        logger.debug("Running: %s", cmd)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            raise SpawnError(str(request.input_path), str(e)) from e

        tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)
        try:
            # Drain stderr before waiting so no trailing output is lost
            await self._consume_stderr(process, tail)
            returncode = await process.wait()
        finally:
            if process.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

        if returncode != 0:
            message = "\n".join(tail) or f"ffmpeg exited with code {returncode}"
            raise TranscodeFailure(str(request.input_path), message, returncode)

    async def _consume_stderr(
        self,
        process: asyncio.subprocess.Process,
        tail: deque[str],
    ) -> None:
        if process.stderr is None:
            return

        buffer = StatusLineBuffer()
        while True:
            chunk = await process.stderr.read(_READ_CHUNK_SIZE)
            if not chunk:
                break
            self._handle_lines(buffer.feed(chunk), tail)
        self._handle_lines(buffer.flush(), tail)

    def _handle_lines(self, lines: list[str], tail: deque[str]) -> None:
        for line in lines:
            text = line.strip()
            if text:
                tail.append(text)
            seconds = parse_progress_time(line)
            if seconds is None or not math.isfinite(seconds):
                continue
            self._emit(ProgressEvent(current_time=seconds, total_duration=self.total_duration))

    def _emit(self, event: ProgressEvent) -> None:
        if self.on_progress is None:
            return
        try:
            self.on_progress(event)
        except Exception:
            logger.warning("Progress listener raised; ignoring", exc_info=True)


async def convert(
    request: ConversionRequest,
    on_progress: Callable[[ProgressEvent], None] | None = None,
    *,
    tools: ToolPaths | None = None,
) -> ConversionResult:
    """Convert a video file via FFmpeg.

    The input's duration is probed first; if that fails FFmpeg is never
    started. While FFmpeg runs, every status line carrying a ``time=``
    value is reported to ``on_progress`` in arrival order.

    Args:
        request: Input path, output path and output format.
        on_progress: Optional callback receiving ProgressEvent updates.
        tools: Executable locations. Looked up on PATH when omitted.

    Returns:
        ConversionResult with success=True when FFmpeg exits 0, otherwise
        success=False and a human-readable message.
    """
    return await Conversion(request, on_progress, tools).run()
