"""Tests for should_hide, gated_item, filter_visible, and spoiler_label."""

from spoiler_gate.gate import (
    DEFAULT_UNTAGGED_THRESHOLD,
    filter_visible,
    gated_item,
    is_visible,
    should_hide,
    spoiler_label,
)
from spoiler_gate.models import GatedItem, ProgressState
from spoiler_gate.reveal import RevealSession


def progress(raw: int = 0, tolerance: int = 0, show_all: bool = False) -> ProgressState:
    return ProgressState(raw_progress=raw, tolerance_override=tolerance, show_all=show_all)


# ── should_hide ─────────────────────────────────────────────


def test_hidden_before_spoiler_chapter():
    item = GatedItem(spoiler_chapter=120)
    assert should_hide(item, progress(80)) is True


def test_tolerance_unlocks_item():
    item = GatedItem(spoiler_chapter=120)
    assert should_hide(item, progress(80, tolerance=150)) is False


def test_visible_at_and_after_spoiler_chapter():
    item = GatedItem(spoiler_chapter=30)
    for p in (30, 31, 500):
        assert should_hide(item, progress(p)) is False
    for p in (0, 1, 29):
        assert should_hide(item, progress(p)) is True


def test_stricter_tolerance_hides_read_chapters():
    """A tolerance below the literal progress still wins."""
    item = GatedItem(spoiler_chapter=50)
    assert should_hide(item, progress(100, tolerance=40)) is True


def test_show_all_never_hides():
    items = [
        GatedItem(spoiler_chapter=539),
        GatedItem(is_spoiler=True),
        GatedItem(),
    ]
    for item in items:
        assert should_hide(item, progress(0, show_all=True)) is False


def test_chapter_beats_server_flag():
    """The server's is_spoiler hint is ignored once a chapter is known."""
    assert should_hide(GatedItem(spoiler_chapter=10, is_spoiler=True), progress(20)) is False
    assert should_hide(GatedItem(spoiler_chapter=30, is_spoiler=False), progress(20)) is True


def test_flag_used_without_chapter():
    assert should_hide(GatedItem(is_spoiler=True), progress(300)) is True
    assert should_hide(GatedItem(is_spoiler=False), progress(1)) is False


def test_untagged_default_protects_new_readers():
    item = GatedItem()
    assert should_hide(item, progress(3)) is True
    assert should_hide(item, progress(5)) is True
    assert should_hide(item, progress(6)) is False


def test_untagged_threshold_configurable():
    item = GatedItem()
    assert should_hide(item, progress(6), untagged_threshold=10) is True
    assert should_hide(item, progress(3), untagged_threshold=0) is False
    assert DEFAULT_UNTAGGED_THRESHOLD == 5


def test_malformed_chapter_falls_through_to_default():
    item = GatedItem(spoiler_chapter=-4)
    assert should_hide(item, progress(100)) is False
    assert should_hide(item, progress(2)) is True


def test_repeated_calls_are_stable():
    item = GatedItem(spoiler_chapter=12)
    p = progress(11)
    assert [should_hide(item, p) for _ in range(5)] == [True] * 5


def test_is_visible_negates():
    item = GatedItem(spoiler_chapter=12)
    assert is_visible(item, progress(12)) is True
    assert is_visible(item, progress(11)) is False


# ── gated_item ──────────────────────────────────────────────


def test_gated_item_camel_case():
    item = gated_item({"id": 4, "spoilerChapter": 77, "isSpoiler": True})
    assert item == GatedItem(key=4, spoiler_chapter=77, is_spoiler=True)


def test_gated_item_snake_case():
    item = gated_item({"id": "q1", "spoiler_chapter": 5, "is_spoiler": False})
    assert item == GatedItem(key="q1", spoiler_chapter=5, is_spoiler=False)


def test_gated_item_timeline_event_uses_chapter_number():
    item = gated_item({"id": 9, "chapterNumber": 210})
    assert item.spoiler_chapter == 210


def test_gated_item_spoiler_chapter_wins_over_chapter_number():
    item = gated_item({"id": 9, "chapterNumber": 210, "spoilerChapter": 250})
    assert item.spoiler_chapter == 250


def test_gated_item_custom_key_field():
    item = gated_item({"slug": "baku", "spoiler_chapter": 1}, key_field="slug")
    assert item.key == "baku"


# ── filter_visible ──────────────────────────────────────────


def test_filter_visible_keeps_unlocked():
    records = [
        {"id": 1, "spoilerChapter": 10},
        {"id": 2, "spoilerChapter": 100},
        {"id": 3, "isSpoiler": False},
    ]
    visible = filter_visible(records, progress(50))
    assert [r["id"] for r in visible] == [1, 3]


def test_filter_visible_honours_reveals():
    records = [{"id": 1, "spoilerChapter": 100}, {"id": 2, "spoilerChapter": 100}]
    session = RevealSession()
    session.reveal(2)
    visible = filter_visible(records, progress(50), session=session)
    assert [r["id"] for r in visible] == [2]


# ── spoiler_label ───────────────────────────────────────────


def test_label_with_chapter():
    label = spoiler_label(GatedItem(spoiler_chapter=120), progress(80))
    assert label == "Chapter 120 spoiler - you're at Chapter 80. Click to reveal."


def test_label_uses_effective_progress():
    label = spoiler_label(GatedItem(spoiler_chapter=120), progress(80, tolerance=90))
    assert "Chapter 90" in label


def test_label_without_chapter():
    assert spoiler_label(GatedItem(is_spoiler=True), progress(1)) == "Spoiler content. Click to reveal."


def test_gated_item_unusable_key_dropped():
    """Float or object ids still produce a gate decision, just without a key."""
    for bad in (1.5, {"x": 1}, [1], True):
        item = gated_item({"id": bad, "spoilerChapter": 3})
        assert item.key is None
        assert should_hide(item, progress(10)) is False


def test_filter_visible_with_unusable_keys():
    records = [{"id": 2.5, "spoilerChapter": 3}, {"id": {"x": 1}, "spoilerChapter": 90}]
    visible = filter_visible(records, progress(10))
    assert visible == [records[0]]
