"""Per-view record of items the viewer chose to reveal."""

from .gate import DEFAULT_UNTAGGED_THRESHOLD, should_hide
from .models import GatedItem, ItemKey, ProgressState


class RevealSession:
    """In-memory set of manually revealed item keys.

    One session belongs to one view. Nothing is persisted: a new view starts
    with a new session and every gate is closed again. Revealing one key
    never reveals another, even if both share a spoiler chapter.
    """

    def __init__(self) -> None:
        self._revealed: set[ItemKey] = set()

    def reveal(self, key: ItemKey) -> None:
        if key is None:
            raise ValueError("Cannot reveal an item without a key")
        self._revealed.add(key)

    def is_revealed(self, key: ItemKey | None) -> bool:
        return key is not None and key in self._revealed

    def should_hide(
        self,
        item: GatedItem,
        progress: ProgressState,
        untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
    ) -> bool:
        """Gate decision with this session's reveals applied."""
        return should_hide(item, progress, untagged_threshold) and not self.is_revealed(item.key)

    def reset(self) -> None:
        """Forget all reveals (view torn down)."""
        self._revealed.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._revealed

    def __len__(self) -> int:
        return len(self._revealed)
