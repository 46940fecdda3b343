"""驻留一段文本的词元并输出标识符表。"""

from __future__ import annotations

import argparse

from string_interning import Interner, InternerConfig
from string_interning.config import SEGMENT_MODES
from string_interning.core.segmentation import BACKENDS


def format_table(interner: Interner) -> list[str]:
    return [f"{intern_id}\t{text}" for intern_id, text in enumerate(interner)]


def main() -> None:
    parser = argparse.ArgumentParser(description="文本词元驻留")
    parser.add_argument("text", nargs="*", help="待驻留文本（可空格分隔）")
    parser.add_argument("--mode", choices=SEGMENT_MODES, default="words", help="切分粒度")
    parser.add_argument("--backend", choices=BACKENDS, default=None, help="分词后端")
    args = parser.parse_args()

    if args.text:
        text = " ".join(args.text)
    else:
        text = input("请输入文本：").strip()

    if not text:
        raise SystemExit("文本不能为空。")

    interner = Interner(InternerConfig(segmenter_backend=args.backend, segment_mode=args.mode))
    ids = interner.intern_text(text)
    if not ids:
        print("没有可驻留的词元。")
        return

    print(f"词元 {len(ids)} 个，去重后 {len(interner)} 个：")
    for line in format_table(interner):
        print(line)


if __name__ == "__main__":
    main()
