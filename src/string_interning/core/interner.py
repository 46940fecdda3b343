"""字符串驻留表。"""

from __future__ import annotations

import operator
import warnings
from typing import Callable, Iterable, Iterator, List

from ..config import InternerConfig
from ..storage import InMemoryStore, create_store
from .segmentation import TextSegmenter

InternId = int


class InvalidIdentifierError(IndexError):
    """标识符不是本驻留表签发的。"""


class InternerFullError(OverflowError):
    """标识符空间已用尽。"""


def _owned(text: str) -> str:
    """返回精确的 str 副本：str 子类的属性与自定义 __eq__/__hash__ 不进入驻留表。"""

    if not isinstance(text, str):
        raise TypeError(f"只能驻留 str，收到 {type(text).__name__}")
    return str.__str__(text)


class Interner:
    """字符串 ↔ 整数标识符的双向映射。

    - 标识符从 0 开始，按首次驻留顺序连续分配；
    - 同一内容永远得到同一标识符，不存在删除，因此标识符永不失效；
    - 正反两个方向都是均摊 O(1)。
    """

    def __init__(self, config: InternerConfig | None = None, capacity: int | None = None) -> None:
        self.config = config or InternerConfig()
        self.store: InMemoryStore = create_store(self.config, capacity)
        self._segmenter: TextSegmenter | None = None

    @classmethod
    def with_capacity(cls, capacity: int, config: InternerConfig | None = None) -> "Interner":
        """创建预分配至少 capacity 个槽位的空驻留表。

        容量只是性能提示：之后的任何操作序列与 Interner() 上的结果完全一致。
        """

        if capacity < 0:
            raise ValueError(f"容量不能为负：{capacity}")
        config = config or InternerConfig()
        if capacity > config.max_entries:
            warnings.warn(
                f"容量 {capacity} 超过标识符空间 {config.max_entries}，已截断。",
                RuntimeWarning,
            )
            capacity = config.max_entries
        return cls(config, capacity=capacity)

    @property
    def capacity(self) -> int:
        return self.store.capacity

    def intern(self, text: str) -> InternId:
        """驻留字符串，返回其标识符；已驻留则返回原有标识符。"""

        text = _owned(text)
        existing = self.store.find(text)
        if existing is not None:
            return existing
        if self.store.size >= self.config.max_entries:
            raise InternerFullError(
                f"标识符空间已满（{self.config.id_bits} 位，共 {self.config.max_entries} 个）"
            )
        return self.store.append(text)

    def lookup(self, intern_id: InternId) -> str:
        """按标识符取回原字符串。

        未签发的标识符（越界、负数、非整数）抛出 InvalidIdentifierError，
        不能让 Python 的负下标悄悄返回别的条目。
        """

        position = self._position(intern_id)
        if position is None:
            raise InvalidIdentifierError(
                f"无效标识符 {intern_id!r}：当前共 {self.store.size} 个条目"
            )
        return self.store.entry(position)

    def try_lookup(self, intern_id: InternId) -> str | None:
        position = self._position(intern_id)
        if position is None:
            return None
        return self.store.entry(position)

    def get(self, text: str) -> InternId | None:
        """查询已驻留字符串的标识符，不驻留新值。"""

        return self.store.find(_owned(text))

    def intern_many(self, texts: Iterable[str]) -> List[InternId]:
        return [self.intern(text) for text in texts]

    def intern_text(
        self,
        text: str,
        tokenizer: Callable[[str], Iterable[str]] | None = None,
        mode: str | None = None,
    ) -> List[InternId]:
        """分词后逐个驻留词元，返回与词元顺序一致的标识符列表。

        tokenizer 可以是任意 str -> 词元序列 的可调用对象，例如 str.split；
        不传时使用按配置构建的 TextSegmenter，mode 只对它生效。
        """

        if tokenizer is not None:
            if mode is not None:
                raise ValueError("自定义 tokenizer 时不能再指定 mode")
            return self.intern_many(tokenizer(text))
        if mode is None:
            mode = self.config.segment_mode
        return self.intern_many(self._default_segmenter().tokenize(text, mode))

    def _default_segmenter(self) -> TextSegmenter:
        if self._segmenter is None:
            self._segmenter = TextSegmenter(self.config.segmenter_backend)
        return self._segmenter

    def _position(self, intern_id: object) -> int | None:
        # bool 是 int 的子类，True 不应被当作标识符 1。
        if isinstance(intern_id, bool):
            return None
        try:
            position = operator.index(intern_id)
        except TypeError:
            return None
        if 0 <= position < self.store.size:
            return position
        return None

    def __len__(self) -> int:
        return self.store.size

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.store.find(str.__str__(text)) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.store)

    def __repr__(self) -> str:
        return f"Interner(size={self.store.size}, capacity={self.store.capacity})"
