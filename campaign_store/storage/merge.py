"""In-place deep merge for partial document updates.

Mapping-into-mapping recurses; anything else (lists, scalars, None) replaces
the target field wholesale. Lists are never merged element-wise, so a client
adding one item to a list resends the full list.
"""

import copy
from typing import Any


def deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge `source` into `target` in place and return `target`.

    >>> deep_merge({"misc": {"gold": 1, "titles": []}}, {"misc": {"gold": 5}})
    {'misc': {'gold': 5, 'titles': []}}
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            deep_merge(current, value)
        else:
            target[key] = copy.deepcopy(value)
    return target
