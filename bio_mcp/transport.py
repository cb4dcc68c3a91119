"""Line reader over a binary input stream."""

from __future__ import annotations

from typing import BinaryIO, Protocol


class LineSource(Protocol):
    """Anything with a text ``readline()`` returning "" at end of input."""

    def readline(self) -> str:
        ...


class Utf8LineReader:
    """
    Reads one ``\\n``-terminated line at a time and decodes it on its own.

    Lines are split on ``\\n`` only; a lone ``\\r`` stays inside the line.
    A line that is not valid UTF-8 raises ``UnicodeDecodeError`` without
    affecting lines already returned.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8") -> None:
        self._stream = stream
        self.encoding = encoding

    def readline(self) -> str:
        raw = self._stream.readline()
        return raw.decode(self.encoding, errors="strict")
