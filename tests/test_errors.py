import pytest

from rustlings.solutions.errors import (
    CreationError,
    NegativeValueError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroValueError,
    generate_nametag_text,
    maybe_icecream,
    parse_pos_nonzero,
    total_cost,
)


def test_nametag_for_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_nametag_explains_failure():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_total_cost_valid_number():
    assert total_cost("34") == 171


def test_total_cost_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_total_cost_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_creation_positive():
    assert PositiveNonzeroInteger(10).value == 10


def test_creation_negative():
    with pytest.raises(NegativeValueError):
        PositiveNonzeroInteger(-10)


def test_creation_zero():
    with pytest.raises(ZeroValueError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="number is zero"):
        PositiveNonzeroInteger(0)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.error, CreationError)
    assert str(info.value.error) == "invalid digit found in string"


def test_parse_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.error, NegativeValueError)


def test_parse_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.error, ZeroValueError)


def test_parse_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


@pytest.mark.parametrize(
    "hour, expected", [(9, 5), (10, 5), (23, 0), (22, 0), (25, None)]
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_icecream_negative_hour():
    with pytest.raises(ValueError):
        maybe_icecream(-1)