"""字符串驻留表：把不同的字符串映射为稳定的小整数标识符。"""

from __future__ import annotations

from .config import InternerConfig
from .core.interner import InternId, Interner, InternerFullError, InvalidIdentifierError
from .core.segmentation import TextSegmenter
from .core.vocabulary import build_common_vocabulary, build_interner

__all__ = [
    "InternId",
    "Interner",
    "InternerConfig",
    "InternerFullError",
    "InvalidIdentifierError",
    "TextSegmenter",
    "build_common_vocabulary",
    "build_interner",
]
