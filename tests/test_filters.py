import pytest

from raidtools.filters import CheckList, CheckState, IVFilter, Modifier

NATURES = ["Hardy", "Lonely", "Brave", "Adamant", "Naughty"]


def test_iv_filter_defaults_to_full_range():
    ivs = IVFilter()
    assert ivs.lower() == (0,) * 6
    assert ivs.upper() == (31,) * 6


def test_set_range_changes_only_that_stat():
    ivs = IVFilter()
    ivs.set_range(2, 10, 20)
    assert ivs.lower()[2] == 10
    assert ivs.upper()[2] == 20
    assert ivs.lower()[:2] + ivs.lower()[3:] == (0,) * 5


def test_set_range_by_name():
    ivs = IVFilter()
    ivs.set_range("Spe", 0, 0)
    assert ivs.upper()[5] == 0


def test_clear_restores_full_range():
    ivs = IVFilter()
    ivs.set_range(0, 31, 31)
    ivs.set_range(4, 5, 6)
    ivs.clear()
    assert ivs.lower() == (0,) * 6
    assert ivs.upper() == (31,) * 6


@pytest.mark.parametrize(
    "modifiers, expected",
    [
        (Modifier.NONE, (0, 31)),
        (Modifier.CONTROL, (31, 31)),
        (Modifier.ALT, (30, 31)),
        (Modifier.CONTROL | Modifier.ALT, (0, 0)),
        (Modifier.CONTROL | Modifier.ALT | Modifier.SHIFT, (0, 0)),
    ],
)
def test_apply_modifier_presets(modifiers, expected):
    ivs = IVFilter()
    ivs.set_range(1, 12, 14)
    ivs.apply_modifier(1, modifiers)
    assert (ivs.lower()[1], ivs.upper()[1]) == expected


def test_unmatched_modifier_leaves_range():
    ivs = IVFilter()
    ivs.set_range(3, 12, 14)
    ivs.apply_modifier(3, Modifier.SHIFT)
    assert (ivs.lower()[3], ivs.upper()[3]) == (12, 14)


def test_control_with_shift_is_not_control_preset():
    ivs = IVFilter()
    ivs.apply_modifier(0, Modifier.CONTROL | Modifier.SHIFT)
    assert (ivs.lower()[0], ivs.upper()[0]) == (0, 31)


def test_invalid_bound_raises():
    with pytest.raises(ValueError):
        IVFilter().set_range(0, 0, 32)


@pytest.mark.parametrize("stat", [6, -1, "Speed"])
def test_invalid_stat_raises(stat):
    with pytest.raises(ValueError):
        IVFilter().set_range(stat, 0, 31)


def test_new_check_list_means_any():
    checks = CheckList(NATURES)
    assert checks.check_state() == CheckState.UNCHECKED
    assert checks.checked() == [True] * len(NATURES)
    assert checks.text() == "Any"


def test_partial_selection():
    checks = CheckList(NATURES)
    checks.toggle(3)
    assert checks.check_state() == CheckState.PARTIALLY_CHECKED
    result = checks.checked()
    assert result[3] is True
    assert sum(result) == 1
    assert checks.text() == NATURES[3]


def test_two_selected_text_lists_both_in_order():
    checks = CheckList(NATURES)
    checks.toggle(4)
    checks.toggle(1)
    assert checks.text() == "Lonely, Naughty"


def test_all_checked_means_any():
    checks = CheckList(NATURES)
    for index in range(len(NATURES)):
        checks.toggle(index)
    assert checks.check_state() == CheckState.CHECKED
    assert checks.checked() == [True] * len(NATURES)
    assert checks.text() == "Any"


def test_toggle_twice_unchecks():
    checks = CheckList(NATURES)
    checks.toggle(0)
    checks.toggle(0)
    assert checks.check_state() == CheckState.UNCHECKED


def test_reset_unchecks_all():
    checks = CheckList(NATURES)
    checks.toggle(0)
    checks.toggle(2)
    checks.reset()
    assert checks.check_state() == CheckState.UNCHECKED


def test_setup_without_items_keeps_items_and_unchecks():
    checks = CheckList(NATURES)
    checks.toggle(1)
    checks.setup([])
    assert checks.items == NATURES
    assert checks.check_state() == CheckState.UNCHECKED


def test_setup_with_items_replaces():
    checks = CheckList(NATURES)
    checks.setup(["Male", "Female"])
    assert checks.items == ["Male", "Female"]
    assert len(checks.checked()) == 2


def test_empty_list_counts_as_checked():
    checks = CheckList()
    assert checks.check_state() == CheckState.CHECKED
    assert checks.checked() == []


def test_toggle_out_of_range_raises():
    with pytest.raises(IndexError):
        CheckList(NATURES).toggle(len(NATURES))