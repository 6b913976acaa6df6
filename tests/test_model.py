import pytest

from phrasecut.model import Model


def test_from_flat_builds_read_only_mapping():
    model = Model.from_flat({"UW4:あ": 12, "BB2:108120": -3})

    assert len(model) == 2
    assert model["UW4:あ"] == 12
    assert model.get("UW4:い") == 0
    assert "BB2:108120" in model
    assert model.base_score is None

    with pytest.raises(TypeError):
        model["UW4:あ"] = 1  # type: ignore[index]
    with pytest.raises(AttributeError):
        model.base_score = 5  # type: ignore[misc]


def test_from_flat_copies_its_input():
    table = {"UW4:あ": 12}
    model = Model.from_flat(table)
    table["UW4:あ"] = 99

    assert model["UW4:あ"] == 12


def test_from_nested_flattens_keys_and_computes_base_score():
    model = Model.from_nested({"UW4": {"あ": 10, "い": -4}, "BB2": {"108120": 6}})

    assert model.to_dict() == {"UW4:あ": 10, "UW4:い": -4, "BB2:108120": 6}
    assert model.base_score == -12


def test_from_dict_detects_shape():
    assert Model.from_dict({"UW4": {"あ": 1}}).base_score == -1
    assert Model.from_dict({"UW4:あ": 1}).base_score is None
    assert len(Model.from_dict({})) == 0


@pytest.mark.parametrize(
    "table",
    [
        {"UW4:あ": 1.5},
        {"UW4:あ": "12"},
        {"UW4:あ": True},
        {1: 3},
    ],
)
def test_from_flat_rejects_malformed_tables(table):
    with pytest.raises(TypeError):
        Model.from_flat(table)


def test_from_nested_rejects_non_mapping_family():
    with pytest.raises(TypeError):
        Model.from_nested({"UW4": [1, 2]})


def test_from_dict_rejects_non_mapping_root():
    with pytest.raises(TypeError):
        Model.from_dict([("UW4:あ", 1)])  # type: ignore[arg-type]


def test_models_compare_by_content():
    assert Model.from_flat({"UW4:あ": 1}) == Model.from_flat({"UW4:あ": 1})
    assert Model.from_flat({"UW4:あ": 1}) != Model.from_flat({"UW4:あ": 2})


def test_models_with_different_base_scores_are_not_equal():
    nested = Model.from_nested({"UW4": {"a": 1}})
    flat = Model.from_flat({"UW4:a": 1})

    assert nested.to_dict() == flat.to_dict()
    assert nested != flat
    assert nested == Model.from_nested({"UW4": {"a": 1}})


def test_model_still_compares_with_plain_mappings():
    assert Model.from_flat({"UW4:a": 1}) == {"UW4:a": 1}
