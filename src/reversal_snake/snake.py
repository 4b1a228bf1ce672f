"""Snake body representation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from reversal_snake.board import Board, Coordinate


@dataclass(frozen=True)
class SnakeSegment:
    """One occupied cell of the snake."""

    coord: Coordinate
    cell: int

    def to_dict(self) -> dict:
        return {"row": self.coord.row, "col": self.coord.col, "cell": self.cell}


class SnakeBody:
    """Ordered snake segments backed by a deque and an orientation flag.

    When ``_flipped`` is false the head is ``_segments[0]`` and the tail is
    ``_segments[-1]``; when true the ends swap roles. Reversal toggles the flag
    instead of relinking segments, so it is O(1) and its own inverse.

    The occupancy set mirrors the deque and is updated by every mutation.
    """

    def __init__(self, start: SnakeSegment) -> None:
        self._segments: deque[SnakeSegment] = deque()
        self._occupied: set[int] = set()
        self._flipped = False
        self.initialize(start)

    def initialize(self, start: SnakeSegment) -> None:
        """Reset to a single segment; head and tail are the same segment."""
        self._segments.clear()
        self._occupied.clear()
        self._flipped = False
        self._segments.append(start)
        self._occupied.add(start.cell)

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def head(self) -> SnakeSegment:
        return self._segments[-1] if self._flipped else self._segments[0]

    @property
    def tail(self) -> SnakeSegment:
        return self._segments[0] if self._flipped else self._segments[-1]

    @property
    def tail_neighbor(self) -> SnakeSegment | None:
        """The segment right in front of the tail, if any."""
        if len(self._segments) < 2:
            return None
        return self._segments[1] if self._flipped else self._segments[-2]

    @property
    def cells(self) -> frozenset[int]:
        """Read-only view of the occupied cell ids."""
        return frozenset(self._occupied)

    def occupies(self, cell: int) -> bool:
        return cell in self._occupied

    def segments(self) -> Iterator[SnakeSegment]:
        """Iterate segments from head to tail."""
        if self._flipped:
            return reversed(self._segments)
        return iter(self._segments)

    def advance_head(self, segment: SnakeSegment) -> None:
        """Insert *segment* in front of the current head."""
        Board.direction_between(self.head.coord, segment.coord)
        self._claim(segment)
        if self._flipped:
            self._segments.append(segment)
        else:
            self._segments.appendleft(segment)

    def remove_tail(self) -> SnakeSegment:
        """Drop and return the tail; the body never becomes empty."""
        if len(self._segments) == 1:
            raise ValueError("Cannot remove the only remaining segment.")
        if self._flipped:
            segment = self._segments.popleft()
        else:
            segment = self._segments.pop()
        self._occupied.discard(segment.cell)
        return segment

    def grow_at_tail(self, segment: SnakeSegment) -> None:
        """Insert *segment* beyond the current tail."""
        Board.direction_between(self.tail.coord, segment.coord)
        self._claim(segment)
        if self._flipped:
            self._segments.appendleft(segment)
        else:
            self._segments.append(segment)

    def reverse(self) -> None:
        """Swap head and tail; walking from the new head visits the old order
        backwards."""
        self._flipped = not self._flipped

    def _claim(self, segment: SnakeSegment) -> None:
        if segment.cell in self._occupied:
            raise ValueError(f"Cell {segment.cell} is already occupied.")
        self._occupied.add(segment.cell)
