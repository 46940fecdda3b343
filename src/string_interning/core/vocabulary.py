"""预填词表的驻留表构建。"""

from __future__ import annotations

import importlib.util
import warnings
from typing import Callable, List, Sequence

from ..config import InternerConfig
from .interner import Interner

TopWords = Callable[[str, int], List[str]]


def wordfreq_top_words(language: str, n: int) -> List[str]:
    """wordfreq 的常用词表，按频率从高到低。缺少 wordfreq 时警告并返回空表。"""

    if importlib.util.find_spec("wordfreq") is None:
        warnings.warn(
            "缺少 wordfreq，常用词表为空；请安装 string-interning[text]。",
            RuntimeWarning,
        )
        return []
    from wordfreq import top_n_list

    return list(top_n_list(language, n))


def build_interner(words: Sequence[str], config: InternerConfig | None = None) -> Interner:
    """按给定顺序驻留词表，重复词只保留第一次出现的位置。"""

    interner = Interner.with_capacity(len(words), config)
    interner.intern_many(words)
    return interner


def build_common_vocabulary(
    config: InternerConfig | None = None,
    top_words: TopWords = wordfreq_top_words,
) -> Interner:
    """用常用词预填驻留表，使高频词拿到最小的标识符。"""

    config = config or InternerConfig()
    words = top_words(config.frequency_language, config.vocabulary_size)
    return build_interner(words[: config.vocabulary_size], config)
