"""Shared pytest fixtures for video-convert tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from video_convert.core import ConversionRequest, ToolPaths

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable


class FakeStream:
    """Async byte stream handing out pre-recorded chunks."""

    def __init__(self, chunks: Iterable[bytes] = (), error: BaseException | None = None) -> None:
        self._chunks = list(chunks)
        self._error = error

    async def read(self, n: int = -1) -> bytes:  # noqa: ARG002
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        return b""


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    def __init__(
        self,
        exit_code: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
        stderr_chunks: Iterable[bytes] = (),
        stderr_error: BaseException | None = None,
    ) -> None:
        self.returncode: int | None = None
        self.killed = False
        self._exit_code = exit_code
        self._stdout = stdout
        self._stderr = stderr
        self.stderr = FakeStream(stderr_chunks, stderr_error)

    async def communicate(self) -> tuple[bytes, bytes]:
        self.returncode = self._exit_code
        return self._stdout, self._stderr

    async def wait(self) -> int:
        self.returncode = -9 if self.killed else self._exit_code
        return self.returncode

    def kill(self) -> None:
        self.killed = True


class FakeExec:
    """Replacement for asyncio.create_subprocess_exec keyed by program name."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.responses: dict[str, FakeProcess | BaseException] = {}

    def respond(self, program: str, response: FakeProcess | BaseException) -> None:
        self.responses[program] = response

    def count(self, program: str) -> int:
        return sum(1 for cmd in self.calls if cmd[0] == program)

    def command(self, program: str) -> list[str]:
        return next(cmd for cmd in self.calls if cmd[0] == program)

    async def __call__(self, *cmd: str, **kwargs: object) -> FakeProcess:  # noqa: ARG002
        self.calls.append(list(cmd))
        response = self.responses[cmd[0]]
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_exec() -> Generator[FakeExec, None, None]:
    """Patch process creation with a scripted FakeExec."""
    fake = FakeExec()
    with patch("asyncio.create_subprocess_exec", new=fake):
        yield fake


@pytest.fixture
def make_process() -> type[FakeProcess]:
    """Factory for fake processes."""
    return FakeProcess


@pytest.fixture
def tools() -> ToolPaths:
    """Bare tool names, so FakeExec can key on them."""
    return ToolPaths(ffmpeg="ffmpeg", ffprobe="ffprobe")


@pytest.fixture
def request_mp4(temp_dir: Path) -> ConversionRequest:
    """A conversion of video.rmvb to video.mp4."""
    input_path = temp_dir / "video.rmvb"
    input_path.touch()
    return ConversionRequest(
        input_path=input_path,
        output_path=temp_dir / "video.mp4",
        output_format="mp4",
    )
