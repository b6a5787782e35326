"""Manual forward/backward navigation through an entity's variant group.

States:
  empty       no variants; navigation is a no-op and current() is None
  positioned  index in [0, len - 1]

reset() orders the group by chapter and starts on the variant the selector
picks for the viewer's progress, so first paint shows the latest unlocked
depiction. When no variant is unlocked yet it starts on the first one.
next()/previous() wrap around and may land on variants past the viewer's
progress; whether the current variant is shown is decided separately by
should_hide_current().
"""

from __future__ import annotations

from typing import Iterable, Literal

from .gate import DEFAULT_UNTAGGED_THRESHOLD, should_hide
from .models import ChapterVariant, ProgressState
from .reveal import RevealSession
from .variants import order_variants, select_index

CyclingState = Literal["empty", "positioned"]


class CyclingController:
    def __init__(
        self,
        variants: Iterable[ChapterVariant] = (),
        progress: ProgressState | None = None,
    ) -> None:
        self._progress = progress or ProgressState()
        self._variants: list[ChapterVariant] = []
        self._index = 0
        self.reset(variants)

    def reset(
        self,
        variants: Iterable[ChapterVariant],
        progress: ProgressState | None = None,
    ) -> ChapterVariant | None:
        """Load a new variant group (or new progress) and return the start variant."""
        if progress is not None:
            self._progress = progress
        self._variants = order_variants(variants)
        start = select_index(self._variants, self._progress)
        self._index = start if start is not None else 0
        return self.current()

    @property
    def state(self) -> CyclingState:
        return "positioned" if self._variants else "empty"

    @property
    def index(self) -> int | None:
        return self._index if self._variants else None

    @property
    def progress(self) -> ProgressState:
        return self._progress

    @property
    def variants(self) -> tuple[ChapterVariant, ...]:
        return tuple(self._variants)

    def current(self) -> ChapterVariant | None:
        if not self._variants:
            return None
        return self._variants[self._index]

    def next(self) -> ChapterVariant | None:
        if self._variants:
            self._index = (self._index + 1) % len(self._variants)
        return self.current()

    def previous(self) -> ChapterVariant | None:
        if self._variants:
            self._index = (self._index - 1) % len(self._variants)
        return self.current()

    def position(self) -> tuple[int, int] | None:
        """1-based (position, total) for a "2 / 5" counter, or None when empty."""
        if not self._variants:
            return None
        return self._index + 1, len(self._variants)

    def should_hide_current(
        self,
        session: RevealSession | None = None,
        untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
    ) -> bool:
        """Gate the current variant. An empty group has nothing to hide."""
        variant = self.current()
        if variant is None:
            return False
        item = variant.as_gated_item()
        if session is not None:
            return session.should_hide(item, self._progress, untagged_threshold)
        return should_hide(item, self._progress, untagged_threshold)

    def __len__(self) -> int:
        return len(self._variants)
