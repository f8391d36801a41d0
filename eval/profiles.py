from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from typing import Dict, List

from sim.dice_game import DEFAULT_COMPOSITION, DEFAULT_DICE_COUNT, DEFAULT_FACES

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "standard"

BUILTIN_PROFILES: Dict[str, List[int]] = {
    "standard": list(DEFAULT_COMPOSITION),
    "legacy": [DEFAULT_FACES] * DEFAULT_DICE_COUNT + [8, 9, 12],
}


def _valid_composition(value) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(f, int) and not isinstance(f, bool) and f >= 2 for f in value)
    )


def _profile_file_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "compositions.json")


@lru_cache(maxsize=1)
def _load_profile_overrides() -> Dict[str, List[int]]:
    """Load extra compositions from eval/compositions.json. Returns empty dict when absent.
    Private ('_'-prefixed) keys and malformed entries are dropped.
    """
    path = _profile_file_path()
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable composition file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring composition file %s: top level must be an object", path)
        return {}
    profiles = {}
    for name, value in data.items():
        if str(name).startswith("_"):
            continue
        if not _valid_composition(value):
            logger.warning("Ignoring malformed composition %r in %s", name, path)
            continue
        profiles[str(name)] = list(value)
    return profiles


def available_profiles() -> List[str]:
    names = list(BUILTIN_PROFILES)
    names.extend(n for n in _load_profile_overrides() if n not in BUILTIN_PROFILES)
    return names


def get_composition(profile_name: str) -> List[int]:
    name = str(profile_name).lower()
    overrides = _load_profile_overrides()
    if name in overrides:
        return list(overrides[name])
    if name in BUILTIN_PROFILES:
        return list(BUILTIN_PROFILES[name])
    raise ValueError(f"Unknown composition profile: {profile_name}")
