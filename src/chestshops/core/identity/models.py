"""Identity models: entity handles and block coordinates.

Usage:
    entity = EntityId(index=42, generation=1)
    pos = BlockPos(10, 64, -3)
    for neighbor in pos.neighbors():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_HORIZONTAL_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True, slots=True)
class EntityId:
    """Entity handle with a generation counter for safe index reuse."""

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))


@dataclass(frozen=True, slots=True)
class BlockPos:
    """Integer block coordinates inside one world."""

    x: int
    y: int
    z: int

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> BlockPos:
        """Return the position shifted by the given deltas."""
        return BlockPos(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> Iterator[BlockPos]:
        """Iterate the 26 cells at Chebyshev distance 1 (centre excluded).

        Yields:
            Every surrounding BlockPos, ordered by dx, dy, dz.
        """
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for dz in (-1, 0, 1):
                    if dx == 0 and dy == 0 and dz == 0:
                        continue
                    yield BlockPos(self.x + dx, self.y + dy, self.z + dz)

    def horizontal_neighbors(self) -> Iterator[BlockPos]:
        """Iterate the 4 cells sharing a vertical face with this one."""
        for dx, dz in _HORIZONTAL_OFFSETS:
            yield BlockPos(self.x + dx, self.y, self.z + dz)

    def center(self) -> tuple[float, float, float]:
        """World coordinates of the block's horizontal centre at its base."""
        return (self.x + 0.5, float(self.y), self.z + 0.5)
