import pytest

from tp_ranker.domain.normalization import normalize_name


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_empty_input_normalizes_to_empty(raw):
    assert normalize_name(raw) == ""


def test_case_and_punctuation_insensitive():
    assert normalize_name("Chriss O'Brien!!") == normalize_name("chriss obrien")
    assert normalize_name("  Ja'Marr   CHASE ") == "jamarr chase"


def test_misspelling_corrected_in_any_case():
    assert "christian" in normalize_name("Christiian Lee")
    assert "christiian" not in normalize_name("CHRISTIIAN McCaffrey")
    assert normalize_name("CHRISTIIAN McCaffrey") == "christian mccaffrey"


def test_non_ascii_and_symbols_removed():
    assert normalize_name("Amon-Ra St. Brown") == "amonra st brown"
    assert normalize_name("José\tRamírez") == "josramrez"


@pytest.mark.parametrize(
    "raw",
    ["Chriss O'Brien!!", "a !", "christi'ian smith", "  Bob  \n Jones ", "D.J. Moore Jr.", "ÀÉÎ"],
)
def test_normalization_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once
