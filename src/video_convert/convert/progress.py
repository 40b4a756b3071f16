"""Parsing of ffmpeg's free-text status output."""

from __future__ import annotations

import codecs
import re

# e.g. "frame=  123 fps= 30 q=28.0 size=    1024kB time=00:00:04.00 bitrate=2097.2kbits/s"
_TIME_PATTERN = re.compile(r"time=\s*(\d+):(\d+):(\d+\.\d+)")

# ffmpeg ends status lines with \r and log lines with \n
_LINE_BREAK = re.compile(r"[\r\n]")


def parse_progress_time(line: str) -> float | None:
    """Extract the elapsed time from an ffmpeg status line.

    Args:
        line: A line of ffmpeg diagnostic output.

    Returns:
        Elapsed seconds (hours*3600 + minutes*60 + seconds), or None when
        the line carries no ``time=HH:MM:SS.ff`` token.
    """
    match = _TIME_PATTERN.search(line)
    if match is None:
        return None
    hours, minutes, seconds = match.groups()
    return int(hours) * 3600 + int(minutes) * 60 + float(seconds)


class StatusLineBuffer:
    """Reassemble lines from arbitrarily chunked diagnostic output.

    Incomplete trailing text (including a partial UTF-8 sequence) is held
    until the next chunk arrives or the stream is flushed.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending = ""

    def feed(self, chunk: bytes) -> list[str]:
        """Add a chunk and return the lines it completed."""
        self._pending += self._decoder.decode(chunk)
        return self._split()

    def flush(self) -> list[str]:
        """Return whatever is left once the stream has ended."""
        self._pending += self._decoder.decode(b"", final=True)
        lines = self._split()
        if self._pending:
            lines.append(self._pending)
            self._pending = ""
        return lines

    def _split(self) -> list[str]:
        *lines, self._pending = _LINE_BREAK.split(self._pending)
        return [line for line in lines if line]
