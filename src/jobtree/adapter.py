# adapter.py
from __future__ import annotations

from typing import Sequence, Tuple


class BlockList:
    """Raw block sizes as handed over by a storage layer. Not a component."""

    def __init__(self, blocks: Sequence[int]):
        self.blocks: Tuple[int, ...] = tuple(blocks)

    def show(self) -> str:
        return f"BlockList [{', '.join(str(b) for b in self.blocks)}]"


class BlockListAdapter:
    """Presents a BlockList as a filesystem leaf whose size is the block total."""

    def __init__(self, name: str, blocks: BlockList):
        self._name = name
        self._blocks = blocks

    def name(self) -> str:
        return self._name

    def calculate_size(self) -> int:
        return sum(self._blocks.blocks)

    def show(self) -> str:
        return self._blocks.show()
