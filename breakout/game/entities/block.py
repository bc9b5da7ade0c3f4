"""Block entity and the grid that owns the blocks."""

from dataclasses import dataclass, field
from typing import Iterator, List

from .box import Box


@dataclass
class Block(Box):
    """A destructible block. Only the destroyed flag changes after creation."""

    destroyed: bool = False

    @property
    def is_active(self) -> bool:
        """Check if block is still in play."""
        return not self.destroyed


@dataclass
class BlockGrid:
    """Ordered blocks of one wave plus the count still standing.

    Attributes:
        blocks: Blocks in layout order (column-major)
        rows: Number of rows the grid was built with
        columns: Number of columns the grid was built with
        live_count: Blocks not yet destroyed
    """

    blocks: List[Block] = field(default_factory=list)
    rows: int = 0
    columns: int = 0
    live_count: int = 0

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def active_blocks(self) -> List[Block]:
        """Blocks still in play, in layout order."""
        return [block for block in self.blocks if block.is_active]

    @property
    def is_cleared(self) -> bool:
        """Check if every block of the wave has been destroyed."""
        return self.live_count == 0

    def destroy(self, block: Block) -> None:
        """Mark a block destroyed and update the live count."""
        if block.destroyed:
            return
        block.destroyed = True
        self.live_count -= 1
