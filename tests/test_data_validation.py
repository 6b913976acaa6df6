from phrasecut import segment
from phrasecut.data_validation import iter_spans, validate


def test_iter_spans_lays_chunks_end_to_end():
    assert list(iter_spans(["水と", "油"])) == [(0, 2), (2, 3)]
    assert list(iter_spans([""])) == [(0, 0)]


def test_validate_accepts_segmenter_output(ja_model):
    text = "今日はとても天気です。"

    report = validate(text, segment(ja_model, text))

    assert report == {"issue_count": 0, "issues": []}


def test_validate_accepts_single_empty_chunk():
    assert validate("", [""])["issue_count"] == 0


def test_validate_flags_broken_partitions():
    report = validate("水と油", ["水と", "", "酢"])

    issue_types = {issue["type"] for issue in report["issues"]}

    assert issue_types == {"round_trip_error", "empty_chunk_error", "misplaced_chunk_error"}
    assert report["issue_count"] == 3


def test_validate_flags_missing_chunks():
    report = validate("", [])

    assert [issue["type"] for issue in report["issues"]] == ["no_chunks_error"]
