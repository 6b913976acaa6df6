"""Tests for the greedy chunk builder and the module-level shorthands."""
from __future__ import annotations

import pytest

from phrasecut import DEFAULT_THRESHOLD, parse, parse_with_threshold, segment, segment_spans
from phrasecut.features import Window, cell_at
from phrasecut.model import Model
from phrasecut.scorer import Scorer
from phrasecut.segmenter import Segmenter
from phrasecut.types import NEGATIVE

SENTENCES = [
    "水と油",
    "これはテストです。",
    "今日はとても天気です。",
    "PythonとJavaScriptとGolang",
    "これはテストです。\n今日は晴天です。",
    "日本語の文章において語の区切りに空白を挟んで記述すること",
    "絵文字😀も混ざる🎌テキスト",
]


# The scenarios below run against the hand-built tables in
# tests/fixtures/models/. Passing them shows the feature keys and sums are
# right for those weights; it says nothing about agreement with a trained
# model, whose tables are not shipped with the tests.
def test_fixture_scores_follow_from_the_listed_weights(ja_model):
    scorer = Scorer(ja_model)
    first = Window.start("水と油")
    second = first.advance(cell_at("水と油", 3), NEGATIVE)

    assert scorer.explain(first) == [("BB2:120108", -300)]
    assert scorer.explain(second) == [("BB2:108120", 1500)]
    assert [scorer.score(first), scorer.score(second)] == [-300, 1500]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("水と油", ["水と", "油"]),
        ("これはテストです。", ["これは", "テストです。"]),
        ("今日はとても天気です。", ["今日は", "とても", "天気です。"]),
        ("PythonとJavaScriptとGolang", ["Pythonと", "JavaScriptと", "Golang"]),
        ("日本語", ["日本語"]),
    ],
)
def test_japanese_scenarios(ja_model, text, expected):
    assert parse(ja_model, text) == expected


def test_simplified_chinese_scenario(zh_hans_model):
    assert parse(zh_hans_model, "今天是晴天。") == ["今天", "是", "晴天。"]


def test_empty_input_yields_one_empty_chunk(ja_model, zh_hans_model):
    assert segment(ja_model, "") == [""]
    assert segment(zh_hans_model, "") == [""]
    assert segment_spans(ja_model, "") == [(0, 0)]


@pytest.mark.parametrize("ch", ["x", "と", "😀", "\n"])
def test_single_character_is_returned_unscored(ch):
    # Even a model that would split everywhere cannot split one character.
    model = Model.from_flat({f"UW4:{ch}": 10**9, f"UW3:{ch}": 10**9})
    assert segment(model, ch, threshold=-(10**9)) == [ch]


@pytest.mark.parametrize("text", SENTENCES)
def test_chunks_round_trip(ja_model, text):
    for threshold in (-(10**6), -1, 0, 500, DEFAULT_THRESHOLD, 10**8):
        chunks = segment(ja_model, text, threshold)
        assert "".join(chunks) == text
        assert all(chunks)


@pytest.mark.parametrize("text", SENTENCES)
def test_spans_are_contiguous_and_match_chunks(ja_model, text):
    spans = segment_spans(ja_model, text)

    assert spans[0][0] == 0
    assert spans[-1][1] == len(text)
    assert all(a[1] == b[0] for a, b in zip(spans, spans[1:]))
    assert [text[s:e] for s, e in spans] == segment(ja_model, text)


@pytest.mark.parametrize("text", SENTENCES)
def test_chunk_count_never_grows_with_threshold(ja_model, text):
    counts = [len(segment(ja_model, text, t)) for t in range(-2000, 3001, 250)]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize("text", SENTENCES)
def test_huge_threshold_keeps_text_whole(ja_model, text):
    assert parse_with_threshold(ja_model, text, 100_000_000) == [text]


def test_very_low_threshold_splits_every_character():
    model = Model.from_flat({})
    assert segment(model, "あいう", threshold=-1) == ["あ", "い", "う"]


def test_astral_characters_are_never_split_in_half(ja_model):
    text = "😀🎌😀"
    chunks = segment(ja_model, text, threshold=-1)
    assert chunks == ["😀", "🎌", "😀"]


def test_history_uses_zero_test_not_threshold():
    # Boundary 1 scores 10: below the threshold, yet recorded as positive,
    # which pushes boundary 2 over the threshold.
    model = Model.from_flat({"UW4:b": 10, "UP3:B": 2000})

    assert segment(model, "abc") == ["ab", "c"]
    # With only the zero test feeding history, a negative first score leaves
    # boundary 2 unsplit.
    negative = Model.from_flat({"UW4:b": -10, "UP3:B": 2000})
    assert segment(negative, "abc") == ["abc"]


def test_history_ring_keeps_three_decisions():
    # Only a boundary preceded by three positive scores may split.
    model = Model.from_flat({"UW4:x": 1, "BP1:BB": 500, "UP1:B": 600})

    assert segment(model, "axxxx") == ["axxx", "x"]


def test_default_threshold_is_1000():
    model = Model.from_flat({"UW4:b": 1000})
    assert DEFAULT_THRESHOLD == 1000
    assert parse(model, "ab") == ["ab"]
    assert parse_with_threshold(model, "ab", 999) == ["a", "b"]


def test_normalized_rule_uses_base_score(models_dir):
    from phrasecut.io_utils import load_model

    model = load_model(str(models_dir / "nested.json"))

    assert model.base_score == -1300
    assert segment(model, "今天是晴天。", threshold=None) == ["今天", "是", "晴天。"]
    assert segment(model, "今天是晴天。") == ["今天是晴天。"]


def test_normalized_rule_requires_base_score(ja_model):
    with pytest.raises(ValueError):
        Segmenter(Scorer(ja_model), threshold=None)


def test_segmenter_is_reusable_across_calls(ja_model):
    segmenter = Segmenter(Scorer(ja_model))

    first = segmenter.chunks("水と油")
    segmenter.chunks("これはテストです。")

    assert segmenter.chunks("水と油") == first == ["水と", "油"]
