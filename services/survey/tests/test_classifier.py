import pytest

from parley.identifiers.classifier import (
    SHORT_CODE_ALPHABET,
    IdentifierKind,
    classify,
    is_short_code,
    is_uuid,
)


@pytest.mark.parametrize(
    "raw",
    [
        "550e8400-e29b-41d4-a716-446655440000",
        "550E8400-E29B-41D4-A716-446655440000",
        "00000000-0000-0000-0000-000000000000",
    ],
)
def test_uuid_shapes(raw: str) -> None:
    assert is_uuid(raw)
    assert classify(raw) is IdentifierKind.UUID


@pytest.mark.parametrize("raw", ["ABCD", "abcd", "X7K2M9", "23456789", "zzzz"])
def test_short_code_shapes(raw: str) -> None:
    assert is_short_code(raw)
    assert classify(raw) is IdentifierKind.SHORT_CODE


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "ABC",  # too short
        "ABCDEFGHJ",  # too long
        "AB0D",  # zero
        "ABOD",  # letter O
        "AB1D",  # one
        "ABID",  # letter I
        "ABLD",  # letter L
        "AB-D",
        "ABCD\n",
        "550e8400e29b41d4a716446655440000",  # no hyphens
        "550e8400-e29b-41d4-a716-44665544000g",
        " 550e8400-e29b-41d4-a716-446655440000",
        "survey-123",
    ],
)
def test_ambiguous_shapes(raw: str) -> None:
    assert classify(raw) is IdentifierKind.AMBIGUOUS


def test_alphabet_excludes_confusable_characters() -> None:
    assert len(SHORT_CODE_ALPHABET) == 31
    for ch in "01OIL":
        assert ch not in SHORT_CODE_ALPHABET


def test_shapes_never_overlap() -> None:
    # Every UUID has hyphens and is 36 long, so it can't be a short code.
    raw = "abcdef12-3456-7892-abcd-ef1234567890"
    assert is_uuid(raw)
    assert not is_short_code(raw)


def test_overlapping_shapes_fail_loudly(monkeypatch) -> None:
    from parley.identifiers import classifier

    monkeypatch.setattr(classifier, "is_uuid", lambda raw: True)
    monkeypatch.setattr(classifier, "is_short_code", lambda raw: True)
    with pytest.raises(RuntimeError):
        classifier.classify("ABCD")
