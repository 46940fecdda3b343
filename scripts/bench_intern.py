"""驻留 + 取回的耗时基准。"""

from __future__ import annotations

import argparse
import random
import string
import time
from pathlib import Path

from string_interning import Interner

ALPHANUMERIC = string.ascii_letters + string.digits
DEFAULT_SIZES = (10, 100, 1000, 10000)


def random_string(length: int, randomizer: random.Random) -> str:
    return "".join(randomizer.choice(ALPHANUMERIC) for _ in range(length))


def run_benchmark(
    sizes: tuple[int, ...] | list[int] = DEFAULT_SIZES,
    rounds: int = 1000,
    seed: int = 42,
) -> dict[int, float]:
    """每个长度生成一个随机串，在新驻留表上驻留并取回，返回每轮平均秒数。"""

    randomizer = random.Random(seed)
    results: dict[int, float] = {}
    for size in sizes:
        text = random_string(size, randomizer)
        started = time.perf_counter()
        for _ in range(rounds):
            interner = Interner()
            intern_id = interner.intern(text)
            if interner.lookup(intern_id) != text:
                raise RuntimeError(f"取回结果与输入不一致（长度 {size}）")
        results[size] = (time.perf_counter() - started) / rounds
    return results


def render_plot(output_path: Path, results: dict[int, float]) -> None:
    try:
        import matplotlib.pyplot as plt
    except ImportError as exc:  # pragma: no cover - 可选依赖
        raise SystemExit("缺少 matplotlib，请先安装后再绘制基准图。") from exc

    sizes = sorted(results)
    fig, ax = plt.subplots(figsize=(8.0, 5.0))
    ax.plot(sizes, [results[size] * 1e6 for size in sizes], marker="o", color="#444444")
    ax.set_xscale("log")
    ax.set_xlabel("string length")
    ax.set_ylabel("intern + lookup (µs)")
    ax.set_title("string_interning benchmark")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="驻留表基准测试")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES), help="随机串长度")
    parser.add_argument("--rounds", type=int, default=1000, help="每个长度的轮次")
    parser.add_argument("--seed", type=int, default=42, help="随机种子")
    parser.add_argument("--plot", type=Path, default=None, help="输出图片路径（需 matplotlib）")
    args = parser.parse_args()

    if args.rounds <= 0:
        raise SystemExit("轮次必须为正数。")
    if any(size < 0 for size in args.sizes):
        raise SystemExit("长度不能为负。")

    results = run_benchmark(args.sizes, args.rounds, args.seed)
    for size, seconds in results.items():
        print(f"intern/{size}: {seconds * 1e6:.3f} µs")
    if args.plot is not None:
        render_plot(args.plot, results)
        print(f"基准图已生成：{args.plot}")


if __name__ == "__main__":
    main()
