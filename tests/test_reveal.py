"""Tests for RevealSession."""

import pytest

from spoiler_gate.models import GatedItem, ProgressState
from spoiler_gate.reveal import RevealSession


def test_reveal_then_is_revealed():
    session = RevealSession()
    assert session.is_revealed("a") is False
    session.reveal("a")
    assert session.is_revealed("a") is True


def test_reveal_is_per_key():
    """Two items with the same spoiler chapter are revealed independently."""
    session = RevealSession()
    a = GatedItem(key="a", spoiler_chapter=120)
    b = GatedItem(key="b", spoiler_chapter=120)
    p = ProgressState(raw_progress=80)
    session.reveal("a")
    assert session.should_hide(a, p) is False
    assert session.should_hide(b, p) is True


def test_reveal_int_and_str_keys_distinct():
    session = RevealSession()
    session.reveal(1)
    assert session.is_revealed(1) is True
    assert session.is_revealed("1") is False


def test_reveal_is_idempotent():
    session = RevealSession()
    session.reveal("a")
    session.reveal("a")
    assert len(session) == 1


def test_reveal_without_key_rejected():
    with pytest.raises(ValueError):
        RevealSession().reveal(None)


def test_keyless_item_never_revealed():
    session = RevealSession()
    assert session.is_revealed(None) is False
    assert session.should_hide(GatedItem(spoiler_chapter=10), ProgressState(raw_progress=1)) is True


def test_should_hide_visible_item_unaffected():
    session = RevealSession()
    assert session.should_hide(GatedItem(key="a", spoiler_chapter=10), ProgressState(raw_progress=20)) is False


def test_should_hide_passes_threshold():
    session = RevealSession()
    item = GatedItem(key="a")
    assert session.should_hide(item, ProgressState(raw_progress=8), untagged_threshold=10) is True


def test_new_session_starts_closed():
    first = RevealSession()
    first.reveal("a")
    second = RevealSession()
    assert second.is_revealed("a") is False


def test_reset_forgets_reveals():
    session = RevealSession()
    session.reveal("a")
    session.reset()
    assert "a" not in session
    assert len(session) == 0
