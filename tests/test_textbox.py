import pytest

from raidtools.textbox import InputType, NumberField


def test_preset_advances_32bit():
    field = NumberField.for_type(InputType.ADVANCES_32BIT)
    assert (field.minimum, field.maximum, field.length, field.base) == (0, 0xFFFFFFFF, 10, 10)


def test_preset_seed_64bit():
    field = NumberField.for_type(InputType.SEED_64BIT)
    assert (field.maximum, field.length, field.base) == (0xFFFFFFFFFFFFFFFF, 16, 16)


def test_preset_id():
    field = NumberField.for_type(InputType.ID)
    assert (field.maximum, field.length, field.base) == (0xFFFF, 5, 10)


def test_decimal_edit_removes_non_digits():
    field = NumberField.for_type(InputType.DELAY)
    result = field.edit("12ab34")
    assert result == "1234"
    assert field.text == result


def test_hex_edit_strips_prefix_and_uppercases():
    field = NumberField.for_type(InputType.SEED_16BIT)
    assert field.edit("0xdead") == "dead".upper()


def test_hex_edit_keeps_uppercase_prefix_digit():
    field = NumberField.for_type(InputType.SEED_32BIT)
    assert field.edit("0Xab") == "0AB"


@pytest.mark.parametrize(
    "input_type", [InputType.ADVANCES_32BIT, InputType.SEED_16BIT, InputType.ID]
)
def test_edit_truncates_to_length(input_type):
    field = NumberField.for_type(input_type)
    assert len(field.edit("1" * 40)) == field.length


def test_finish_clamps_to_maximum():
    field = NumberField(5, 100, 5)
    field.edit("500")
    assert field.finish() == str(field.maximum)


def test_finish_clamps_to_minimum():
    field = NumberField(5, 100, 5)
    field.edit("1")
    assert field.finish() == str(field.minimum)


def test_finish_writes_lowercase_hex():
    field = NumberField.for_type(InputType.SEED_32BIT)
    field.edit("ABCDEF12")
    assert field.finish() == "ABCDEF12".lower()


def test_finish_on_empty_text_gives_minimum():
    field = NumberField(3, 9, 1)
    assert field.finish() == "3"


def test_value_of_empty_text_is_zero():
    assert NumberField.for_type(InputType.SEED_64BIT).value() == 0


@pytest.mark.parametrize("text", ["4096", "17", "999"])
def test_value_round_trips_after_finish(text):
    field = NumberField.for_type(InputType.ADVANCES_32BIT)
    field.edit(text)
    field.finish()
    assert field.value() == int(text)
    assert field.text == text


def test_hex_value_accepts_prefix():
    field = NumberField.for_type(InputType.SEED_64BIT)
    field.text = "0x1F"
    assert field.value() == 0x1F


def test_value_overflow_is_zero():
    field = NumberField(0, 0xFFFFFFFFFFFFFFFF, 40)
    field.text = "9" * 30
    assert field.value() == 0


def test_invalid_text_value_is_zero():
    field = NumberField.for_type(InputType.ID)
    field.text = "12x"
    assert field.value() == 0


def test_unsupported_base_raises():
    with pytest.raises(ValueError):
        NumberField(0, 10, 2, base=8)


def test_minimum_above_maximum_raises():
    with pytest.raises(ValueError):
        NumberField(10, 5, 2)