"""把文本切成待驻留的词元。"""

from __future__ import annotations

import importlib.util
from typing import Iterator, List

from ..config import SEGMENT_MODES
from .text_utils import TOKEN_RUN_PATTERN, is_punctuation

BACKENDS = ("jieba", "simple")


def _pairs(run: str) -> List[str]:
    # 两字一组，落单的末字并入前一组。
    chunks = [run[index : index + 2] for index in range(0, len(run), 2)]
    if len(chunks) >= 2 and len(chunks[-1]) == 1:
        chunks[-2] += chunks.pop()
    return chunks


class TextSegmenter:
    """驻留表的分词器。

    jieba 可用时优先使用；否则按字符类别切分：汉字逐字（或两字一组），
    连续字母数字整体成词。词元原样驻留，只丢弃纯标点/空白。
    """

    def __init__(self, backend: str | None = None) -> None:
        if backend is not None and backend not in BACKENDS:
            raise ValueError(f"未知的分词后端：{backend}")
        if backend is None:
            backend = "jieba" if importlib.util.find_spec("jieba") is not None else "simple"
        self.backend = backend

    def tokenize(self, text: str, mode: str = "words") -> List[str]:
        if mode not in SEGMENT_MODES:
            raise ValueError(f"未知的切分粒度：{mode!r}，可选 {', '.join(SEGMENT_MODES)}")
        if mode == "chars":
            return [char for char in text if not is_punctuation(char)]
        if self.backend == "jieba":
            import jieba

            # search 模式在长词之外还会给出其中的短词，作为“词素”粒度。
            pieces = jieba.cut_for_search(text) if mode == "morphemes" else jieba.cut(text)
            return [piece for piece in pieces if not is_punctuation(piece)]
        return list(self._runs(text, pair_cjk=mode == "morphemes"))

    def segment_words(self, text: str) -> List[str]:
        return self.tokenize(text, "words")

    def segment_morphemes(self, text: str) -> List[str]:
        return self.tokenize(text, "morphemes")

    def segment_chars(self, text: str) -> List[str]:
        return self.tokenize(text, "chars")

    @staticmethod
    def _runs(text: str, pair_cjk: bool) -> Iterator[str]:
        for match in TOKEN_RUN_PATTERN.finditer(text):
            run = match.group()
            if match.group("cjk") is None:
                yield run
            elif pair_cjk:
                yield from _pairs(run)
            else:
                yield from run

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)
