# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextRegion:
    """
    A read-only window [start, end) into the patch buffer.

    Commit and diff bodies are passed around as regions so the buffer is
    never copied; only single lines are materialised while iterating.
    """

    buffer: str
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise ValueError(
                f"Invalid region [{self.start}, {self.end}) for buffer of length {len(self.buffer)}"
            )

    @classmethod
    def whole(cls, buffer: str) -> "TextRegion":
        return cls(buffer, 0, len(buffer))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.buffer[self.start : self.end]

    def is_empty(self) -> bool:
        return self.start == self.end

    def lines(self) -> Iterator[str]:
        """Yield the lines of the region without their line endings."""
        pos = self.start
        while pos < self.end:
            newline = self.buffer.find("\n", pos, self.end)
            if newline == -1:
                newline = self.end
            line = self.buffer[pos:newline]
            if line.endswith("\r"):
                line = line[:-1]
            yield line
            pos = newline + 1
