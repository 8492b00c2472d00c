import json

import pytest

from mancala_engine.io import profiles


def test_missing_file_yields_defaults(tmp_path):
    path = tmp_path / "profiles.json"
    loaded = profiles.load_profiles(path)
    assert loaded == [{"name": "PL1", "wins": 0}, {"name": "PL2", "wins": 0}, {"name": "CPU", "wins": 0}]
    assert not path.exists()

def test_add_and_record_win_persist(tmp_path):
    path = tmp_path / "nested" / "profiles.json"
    profiles.add_profile("  Grace ", path)
    profiles.record_win("Grace", path)
    profiles.record_win("PL1", path)

    on_disk = json.loads(path.read_text())
    wins = {p["name"]: p["wins"] for p in on_disk}
    assert wins == {"PL1": 1, "PL2": 0, "CPU": 0, "Grace": 1}

def test_duplicate_and_unknown_names(tmp_path):
    path = tmp_path / "profiles.json"
    with pytest.raises(profiles.DuplicateProfile):
        profiles.add_profile("PL2", path)
    with pytest.raises(profiles.UnknownProfile):
        profiles.record_win("nobody", path)
    with pytest.raises(profiles.ProfileError):
        profiles.add_profile("   ", path)
