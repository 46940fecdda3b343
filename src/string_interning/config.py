"""全局配置与默认参数。"""

from dataclasses import dataclass

SEGMENT_MODES = ("words", "morphemes", "chars")


@dataclass
class InternerConfig:
    """驻留表可调参数集合。

    注意：容量只影响预分配，不影响任何可观察行为。
    """

    # 默认预分配槽位数（0 表示按需增长）
    default_capacity: int = 0
    # 标识符位宽：32 位即最多 2^32 个不同字符串
    id_bits: int = 32
    # 分词后端：jieba 或 simple，None 表示自动探测
    segmenter_backend: str | None = None
    # intern_text 默认的切分粒度
    segment_mode: str = "words"
    # 常用词表语言（wordfreq 语言代码）
    frequency_language: str = "zh"
    # 常用词表规模
    vocabulary_size: int = 2000

    def __post_init__(self) -> None:
        if self.id_bits <= 0:
            raise ValueError(f"id_bits 必须为正数：{self.id_bits}")
        if self.default_capacity < 0:
            raise ValueError(f"default_capacity 不能为负：{self.default_capacity}")
        if self.vocabulary_size <= 0:
            raise ValueError(f"vocabulary_size 必须为正数：{self.vocabulary_size}")
        if self.segment_mode not in SEGMENT_MODES:
            raise ValueError(f"未知的切分粒度：{self.segment_mode}")

    @property
    def max_entries(self) -> int:
        return 2**self.id_bits
