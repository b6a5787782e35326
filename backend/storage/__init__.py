"""File-based JSON storage.

Data layout:
  data/
    config.json                    Viewer spoiler settings (reading progress,
                                   chapter tolerance, show-all, thresholds)
    media/
      <owner_type>/<owner_id>.json Entity display media, one list per entity
                                   (owner_type: character, arc, gamble,
                                   organization, volume)

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates; unknown keys are ignored.

Media records carry their chapter_number as stored; chapter normalisation
and ordering happen in spoiler_gate, not here.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    media_dir,
)

from .config import (  # noqa: F401
    MAX_CHAPTER,
    get_config,
    update_config,
)

from .media import (  # noqa: F401
    OWNER_TYPES,
    add_media,
    delete_media,
    get_media,
    save_media,
)
