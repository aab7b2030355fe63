"""File access relative to the game's data directory."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


class GameFile:
    """A file inside the game directory that is opened by relative name."""

    def __init__(self, root: str | Path = "game") -> None:
        self.root = Path(root)
        self._stream: BinaryIO | None = None

    def __enter__(self) -> GameFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def _file(self) -> BinaryIO:
        if self._stream is None:
            raise ValueError("file is not open")
        return self._stream

    def open(self, name: str, mode: str) -> bool:
        """Open an existing file for writing ("w") or reading; False if missing."""
        self.close()
        path = self.root / name
        if not path.exists():
            return False
        self._stream = open(path, "wb" if mode == "w" else "rb")
        return True

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes."""
        return self._file.read(size)

    def read_uint16(self) -> int:
        """Read a little-endian unsigned 16-bit integer."""
        chunk = self._file.read(2)
        if len(chunk) != 2:
            raise EOFError("not enough data for a 16-bit value")
        return int.from_bytes(chunk, "little")

    def read_uint8(self) -> int:
        """Read one unsigned byte."""
        chunk = self._file.read(1)
        if not chunk:
            raise EOFError("not enough data for an 8-bit value")
        return chunk[0]

    def read_line(self) -> str:
        """Read one line, decoded as UTF-8, with surrounding whitespace removed."""
        return self._file.readline().decode("utf-8", errors="replace").strip()

    def write(self, text: str) -> None:
        """Write text encoded as UTF-8."""
        self._file.write(text.encode("utf-8"))

    def at_end(self) -> bool:
        """Tell whether all data has been read."""
        stream = self._file
        current = stream.tell()
        if stream.read(1):
            stream.seek(current)
            return False
        return True

    def close(self) -> None:
        """Close the file if it is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None