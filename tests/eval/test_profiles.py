import pytest

from eval import profiles
from eval.profiles import available_profiles, get_composition
from sim.dice_game import DEFAULT_COMPOSITION


def test_builtin_profiles():
    assert get_composition("standard") == list(DEFAULT_COMPOSITION)
    legacy = get_composition("legacy")
    assert legacy.count(6) == 12
    assert sorted(f for f in legacy if f != 6) == [8, 9, 12]
    assert get_composition("LEGACY") == legacy
    assert {"standard", "legacy"} <= set(available_profiles())


def test_get_composition_returns_copy():
    comp = get_composition("standard")
    comp.append(20)
    assert get_composition("standard") == list(DEFAULT_COMPOSITION)


def test_unknown_profile():
    with pytest.raises(ValueError):
        get_composition("nope")


def test_overrides(monkeypatch):
    monkeypatch.setattr(profiles, "_load_profile_overrides", lambda: {"tiny": [6, 6, 20]})
    assert get_composition("tiny") == [6, 6, 20]
    assert "tiny" in available_profiles()


def test_override_file_parsing(monkeypatch, tmp_path):
    path = tmp_path / "compositions.json"
    path.write_text('{"_doc": "x", "good": [6, 8], "bad": [1, 6], "worse": "six"}', encoding="utf-8")
    monkeypatch.setattr(profiles, "_profile_file_path", lambda: str(tmp_path / "compositions.json"))
    profiles._load_profile_overrides.cache_clear()
    try:
        assert profiles._load_profile_overrides() == {"good": [6, 8]}
    finally:
        profiles._load_profile_overrides.cache_clear()


def test_override_file_malformed(monkeypatch, tmp_path):
    (tmp_path / "compositions.json").write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(profiles, "_profile_file_path", lambda: str(tmp_path / "compositions.json"))
    profiles._load_profile_overrides.cache_clear()
    try:
        assert profiles._load_profile_overrides() == {}
    finally:
        profiles._load_profile_overrides.cache_clear()
