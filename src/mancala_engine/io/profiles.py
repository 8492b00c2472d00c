# src/mancala_engine/io/profiles.py
# Player profiles (name + win tally) persisted as JSON.
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Config / paths
# ---------------------------------------------------------------------
PROFILES_PATH = os.getenv("MANCALA_PROFILES", os.path.join("profiles", "profiles.json"))

DEFAULT_PROFILES: List[Dict] = [
    {"name": "PL1", "wins": 0},
    {"name": "PL2", "wins": 0},
    {"name": "CPU", "wins": 0},
]

PathLike = Union[str, Path]


class ProfileError(Exception):
    pass


class DuplicateProfile(ProfileError):
    pass


class UnknownProfile(ProfileError):
    pass

# ---------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------
def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path if path is not None else PROFILES_PATH)

def load_profiles(path: Optional[PathLike] = None) -> List[Dict]:
    """Read the profile list; a missing file yields the defaults."""
    p = _resolve(path)
    if not p.exists():
        return [dict(entry) for entry in DEFAULT_PROFILES]
    with p.open(encoding="utf-8") as fh:
        data = json.load(fh)
    return [{"name": str(e["name"]), "wins": int(e.get("wins", 0))} for e in data]

def save_profiles(profiles: List[Dict], path: Optional[PathLike] = None) -> None:
    p = _resolve(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        json.dump(profiles, fh, indent=2)
    logger.info("saved %d profiles to %s", len(profiles), p)

# ---------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------
def add_profile(name: str, path: Optional[PathLike] = None) -> Dict:
    name = name.strip()
    if not name:
        raise ProfileError("profile name must not be empty")
    profiles = load_profiles(path)
    if any(p["name"] == name for p in profiles):
        raise DuplicateProfile(f"profile {name!r} already exists")
    entry = {"name": name, "wins": 0}
    profiles.append(entry)
    save_profiles(profiles, path)
    return entry

def record_win(name: str, path: Optional[PathLike] = None) -> Dict:
    profiles = load_profiles(path)
    for entry in profiles:
        if entry["name"] == name:
            entry["wins"] += 1
            save_profiles(profiles, path)
            return entry
    raise UnknownProfile(f"no profile named {name!r}")
