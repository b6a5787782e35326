"""Spoiler gating and chapter-variant selection for a serialized-story wiki.

ProgressState (reader progress, tolerance override, show-all switch) is
passed explicitly into every call; nothing here reads global settings.
"""

# Re-export the public surface so `from spoiler_gate import should_hide` works.

from .models import (  # noqa: F401
    ChapterVariant,
    GatedItem,
    ProgressState,
    normalize_chapter,
)

from .gate import (  # noqa: F401
    DEFAULT_UNTAGGED_THRESHOLD,
    filter_visible,
    gated_item,
    is_visible,
    should_hide,
    spoiler_label,
)

from .variants import (  # noqa: F401
    coerce_variants,
    order_variants,
    select_current,
    select_index,
)

from .reveal import RevealSession  # noqa: F401
from .cycling import CyclingController  # noqa: F401

from .markup import (  # noqa: F401
    parse_spoiler_blocks,
    redact,
    segments_to_text,
)
