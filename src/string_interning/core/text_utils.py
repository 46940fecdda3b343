"""词元识别用的正则。"""

from __future__ import annotations

import re

CJK_RANGE = "\u4e00-\u9fff"

# 常见中英文标点符号集合，分词后只含这些字符的词元不参与驻留。
PUNCTUATION_PATTERN = re.compile(
    r"[\s\u3000"
    r"。！？!?；;，,、：:「」『』“”\"'（）\(\)【】\[\]《》<>"
    r"…—\-·]"
)

# 一段连续汉字，或一段不含汉字的字母数字串。
TOKEN_RUN_PATTERN = re.compile(rf"(?P<cjk>[{CJK_RANGE}]+)|(?:(?![{CJK_RANGE}])[^\W_])+")


def is_punctuation(text: str) -> bool:
    """判断一段文本是否只包含标点/空白。空串也算。"""

    return not PUNCTUATION_PATTERN.sub("", text)
