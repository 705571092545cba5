import pytest

from rcv_tally.choices import ChoiceId, ChoiceNames, UNKNOWN_CHOICE
from rcv_tally.errors import MalformedBallotField

params = [
    ("3", True, 3),
    ("3", False, 3),
    ("Option 3", True, 3),
    ("Option 3", False, 3),
    ("Steampunk (3)", True, 3),
    ("Rank 1: Option 4", True, 4),
    ("a1b2c", True, 2),
    ("a1b2c", False, 2),
    ("Option 12", True, 12),
    ("Option 12", False, 2),
    ("12 monkeys", True, 12),
    ("12 monkeys", False, 2),
    ("Option 10 - Invasion", True, 10),
    ("Option 10 - Invasion", False, 0),
    ("Option 3²", True, 3),
]


@pytest.mark.parametrize("label, whole_number, expected", params)
def test_from_label(label, whole_number, expected):
    assert ChoiceId.from_label(label, whole_number=whole_number) == ChoiceId(expected)


@pytest.mark.parametrize("whole_number", [True, False])
@pytest.mark.parametrize("label", ["", "Steampunk", "no choice", "   "])
def test_from_label_errors(label, whole_number):

    with pytest.raises(MalformedBallotField) as err:
        ChoiceId.from_label(label, whole_number=whole_number)

    assert err.value.field == label


@pytest.mark.parametrize("value", [1.5, "1", True, None])
def test_constructor_errors(value):

    with pytest.raises(TypeError):
        ChoiceId(value)


def test_equality_and_hash():

    assert ChoiceId(2) == ChoiceId(2)
    assert ChoiceId(2) != ChoiceId(3)
    assert ChoiceId(2) != 2
    assert len({ChoiceId(2), ChoiceId(2), ChoiceId(5)}) == 2


def test_ordering():

    assert sorted([ChoiceId(3), ChoiceId(1), ChoiceId(2)]) == [ChoiceId(1), ChoiceId(2), ChoiceId(3)]
    assert max([ChoiceId(3), ChoiceId(10)]) == ChoiceId(10)


def test_default_names():

    names = ChoiceNames()

    assert names.name(ChoiceId(1)) == "Medieval Fantasy"
    assert names.name(ChoiceId(5)) == "Invasion"
    assert names.name(ChoiceId(9)) == UNKNOWN_CHOICE
    assert names.label(ChoiceId(3)) == "Steampunk (3)"
    assert names.label(ChoiceId(0)) == "Unknown (0)"


def test_custom_names_from_json_keys():

    names = ChoiceNames({"1": "Alice", "2": "Bob"})

    assert names.name(ChoiceId(2)) == "Bob"
    assert names.name(ChoiceId(3)) == UNKNOWN_CHOICE
    assert dict(names) == {1: "Alice", 2: "Bob"}
    assert len(names) == 2


def test_names_are_read_only():

    names = ChoiceNames()

    with pytest.raises(TypeError):
        names[1] = "Something Else"


@pytest.mark.parametrize("label", ["Option 3²", "Option ½", "3 of 四"])
def test_from_label_single_digit_stops_at_last_numeric(label):

    with pytest.raises(MalformedBallotField) as err:
        ChoiceId.from_label(label, whole_number=False)

    assert err.value.field == label
