import importlib.util
import random
import sys
from pathlib import Path

from string_interning import Interner

SCRIPTS_PATH = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_random_string_is_alphanumeric():
    bench = _load_script("bench_intern")
    text = bench.random_string(64, random.Random(7))
    assert len(text) == 64
    assert text.isalnum()


def test_run_benchmark_reports_every_size():
    bench = _load_script("bench_intern")
    results = bench.run_benchmark([0, 10, 100], rounds=3)
    assert list(results) == [0, 10, 100]
    assert all(seconds >= 0.0 for seconds in results.values())


def test_format_table_lists_ids_in_order():
    intern_text = _load_script("intern_text")
    interner = Interner()
    interner.intern_many(["b", "a", "b"])
    assert intern_text.format_table(interner) == ["0\tb", "1\ta"]


def test_intern_text_main_prints_table(monkeypatch, capsys):
    intern_text = _load_script("intern_text")
    monkeypatch.setattr(sys, "argv", ["intern_text.py", "--backend", "simple", "--mode", "chars", "你好你"])
    intern_text.main()
    output = capsys.readouterr().out.splitlines()
    assert output == ["词元 3 个，去重后 2 个：", "0\t你", "1\t好"]
