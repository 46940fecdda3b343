import importlib.util

import pytest

from string_interning import InternerConfig, build_common_vocabulary, build_interner
from string_interning.core import vocabulary


def test_build_interner_keeps_first_occurrence():
    interner = build_interner(["a", "b", "a", "c"])
    assert len(interner) == 3
    assert [interner.get(word) for word in ("a", "b", "c")] == [0, 1, 2]
    assert interner.capacity == 4


def test_common_vocabulary_gives_frequent_words_small_ids():
    requested = []

    def top_words(language, n):
        requested.append((language, n))
        return ["的", "一", "是", "不", "了"][:n]

    interner = build_common_vocabulary(InternerConfig(vocabulary_size=3), top_words)
    assert requested == [("zh", 3)]
    assert list(interner) == ["的", "一", "是"]
    assert interner.intern("了") == 3


def test_common_vocabulary_trims_oversized_word_lists():
    interner = build_common_vocabulary(InternerConfig(vocabulary_size=2), lambda language, n: ["x", "y", "z"])
    assert list(interner) == ["x", "y"]


def test_common_vocabulary_without_wordfreq_is_empty(monkeypatch):
    monkeypatch.setattr(vocabulary.importlib.util, "find_spec", lambda name: None)
    with pytest.warns(RuntimeWarning):
        interner = build_common_vocabulary(InternerConfig(vocabulary_size=10))
    assert len(interner) == 0


def test_common_vocabulary_from_wordfreq():
    if importlib.util.find_spec("wordfreq") is None:
        return
    config = InternerConfig(frequency_language="en", vocabulary_size=50)
    interner = build_common_vocabulary(config)
    assert len(interner) == 50
    assert interner.lookup(0) == "the"
