"""Tests for the floating label state machine."""

from components.focus_label import (
    INTERNAL,
    External,
    FocusLabelController,
    is_label_floating,
    source_of,
)


def test_source_of() -> None:
    assert source_of(None) is INTERNAL
    assert source_of(True) == External(True)
    assert source_of(False) == External(False)


def test_is_label_floating_pure_function() -> None:
    assert is_label_floating(External(False), True, "abc") is False
    assert is_label_floating(External(True), False, "") is True
    assert is_label_floating(INTERNAL, False, "") is False
    assert is_label_floating(INTERNAL, False, None) is False
    assert is_label_floating(INTERNAL, True, "") is True
    assert is_label_floating(INTERNAL, False, "x") is True


def test_initial_state_follows_value() -> None:
    assert FocusLabelController(value="abc").floating
    assert not FocusLabelController(value="").floating
    assert not FocusLabelController(value=None).floating


def test_external_override_wins() -> None:
    ctl = FocusLabelController(value="abc", is_focused=False)
    assert not ctl.floating
    ctl.focus_gained()
    assert not ctl.floating
    ctl.focus_lost()
    assert not ctl.floating


def test_internal_events_apply_after_override_is_cleared() -> None:
    ctl = FocusLabelController(value="", is_focused=False)
    ctl.focus_gained()
    assert not ctl.floating
    ctl.set_external(None)
    assert ctl.floating
    ctl.set_external(False)
    assert not ctl.floating
    ctl.set_external(True)
    assert ctl.floating


def test_blur_with_empty_value_rests() -> None:
    ctl = FocusLabelController(value="")
    ctl.focus_gained()
    assert ctl.floating
    ctl.focus_lost()
    assert not ctl.floating


def test_blur_with_value_keeps_floating() -> None:
    ctl = FocusLabelController(value="x")
    ctl.focus_gained()
    ctl.focus_lost()
    assert ctl.floating


def test_value_changes_without_override() -> None:
    ctl = FocusLabelController(value="")
    ctl.value_changed("a")
    assert ctl.floating
    ctl.value_changed("")
    assert not ctl.floating


def test_clearing_value_while_focused_keeps_floating() -> None:
    ctl = FocusLabelController(value="a")
    ctl.focus_gained()
    ctl.value_changed("")
    assert ctl.floating


def test_clearing_value_after_blur_rests() -> None:
    ctl = FocusLabelController(value="x")
    ctl.focus_gained()
    ctl.focus_lost()
    ctl.value_changed("")
    assert not ctl.floating


def test_value_changes_under_override_apply_once_cleared() -> None:
    ctl = FocusLabelController(value="", is_focused=False)
    ctl.value_changed("abc")
    assert not ctl.floating
    ctl.set_external(None)
    assert ctl.floating


def test_clearing_value_under_forced_focus_keeps_floating() -> None:
    ctl = FocusLabelController(value="abc", is_focused=True)
    ctl.value_changed("")
    assert ctl.floating
    ctl.set_external(None)
    assert not ctl.floating


def test_transition_callback_fires_on_state_changes_only() -> None:
    seen: list[bool] = []
    ctl = FocusLabelController(value="", on_transition=seen.append)
    ctl.focus_gained()
    ctl.focus_gained()
    ctl.value_changed("a")
    ctl.focus_lost()
    ctl.value_changed("")
    assert seen == [True, False]


def test_external_override_emits_transition() -> None:
    seen: list[bool] = []
    ctl = FocusLabelController(value="abc", on_transition=seen.append)
    ctl.set_external(False)
    ctl.set_external(False)
    ctl.set_external(None)
    assert seen == [False, True]
