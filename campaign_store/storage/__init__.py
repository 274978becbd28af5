"""Single-document JSON storage for campaign data.

Data layout (one file, default data/campaign.json):
  {
    "characters": [ {name, race, age, personality, goals, visual_description, relationship} ],
    "locations":  [ {name, visual_description, region, type, notes, factions, characters[]} ],
    "quests":     [ {title, description, status, locations[], reward, notes} ],
    "scenes":     [ {title, description, location, characters[], notes} ],
    "sheet":      {name, race, class, level, background, xp, abilities, proficiencies,
                   features, equipment, misc}
  }

Every operation loads the whole document, mutates it in memory, and saves the
whole document back. There is no cross-request lock: concurrent writers race
and the last save wins.

Collections are generic: SCHEMAS describes each kind (identity field, required
fields, list fields, numeric fields) and CollectionRepository enforces it.
Identity lookup is case-insensitive; uniqueness is checked on add only.

Sheet updates deep-merge: nested objects merge key-by-key, lists and scalars
are replaced wholesale.
"""

# Re-export all public symbols so `from campaign_store import storage` is enough.

from .core import (  # noqa: F401
    characters,
    data_file,
    document_store,
    init_storage,
    locations,
    quests,
    scenes,
    sheet,
)

from .document import DocumentStore  # noqa: F401

from .collections import (  # noqa: F401
    SCHEMAS,
    CollectionRepository,
    EntitySchema,
    coerce_number,
    split_list,
)

from .placement import LocationRepository  # noqa: F401

from .merge import deep_merge  # noqa: F401

from .paths import has_key, resolve_path  # noqa: F401

from .sheets import (  # noqa: F401
    MISSING,
    RemovalResult,
    SheetService,
    new_sheet,
)
