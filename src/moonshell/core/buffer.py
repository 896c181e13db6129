"""Line accumulation for one interactive submission."""

from __future__ import annotations


class SessionBuffer:
    """Ordered lines of the statement currently being typed.

    Lines are joined with ``\\n`` exactly as typed so that line-sensitive
    constructs (long strings, ``--`` comments) survive the join.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, line: str) -> None:
        self._lines.append(line)

    def contents(self) -> str:
        return "\n".join(self._lines)

    def reset(self) -> None:
        self._lines.clear()

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"SessionBuffer(lines={len(self._lines)})"
