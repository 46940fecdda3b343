"""内存级存储实现。"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional


class InMemoryStore:
    """简单内存存储：条目表与反向索引两套结构。

    entries 按标识符顺序存放字符串，index 记录字符串到标识符的映射。
    """

    def __init__(self, capacity: int = 0) -> None:
        # 预分配的空槽位用 None 占位，size 之后的槽位不算条目。
        self.entries: List[Optional[str]] = [None] * capacity
        self.index: Dict[str, int] = {}
        self.size = 0

    @property
    def capacity(self) -> int:
        return len(self.entries)

    def find(self, text: str) -> int | None:
        return self.index.get(text)

    def append(self, text: str) -> int:
        """写入新条目，返回其位置。调用方保证 text 尚未登记。"""

        position = self.size
        if position < len(self.entries):
            self.entries[position] = text
        else:
            self.entries.append(text)
        self.index[text] = position
        self.size += 1
        return position

    def entry(self, position: int) -> str:
        return self.entries[position]

    def __iter__(self) -> Iterator[str]:
        for position in range(self.size):
            yield self.entries[position]
