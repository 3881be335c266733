# ABOUTME: Tests for the persisted recent-search list and its JSON-file storage.
# ABOUTME: Verifies ordering, the five-entry cap, exact-match dedup, and reload behavior.

import json

from weather_lookup.recent_searches import MAX_RECENT_SEARCHES, STORAGE_KEY, LocalStorage, RecentSearches


class TestLocalStorage:
    def test_missing_file_reads_as_empty(self, tmp_path):
        storage = LocalStorage(tmp_path / "nested" / "storage.json")
        assert storage.get_item(STORAGE_KEY) is None

    def test_set_item_creates_parent_dirs_and_keeps_other_keys(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        storage = LocalStorage(path)
        storage.set_item("theme", "dark")
        storage.set_item(STORAGE_KEY, '["Oslo"]')

        assert json.loads(path.read_text()) == {"theme": "dark", STORAGE_KEY: '["Oslo"]'}

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json")
        assert LocalStorage(path).get_item(STORAGE_KEY) is None


class TestRecentSearches:
    def test_most_recent_first(self, tmp_path):
        recent = RecentSearches(LocalStorage(tmp_path / "s.json"))
        recent.add("Oslo")
        recent.add("Rome")
        assert recent.items == ["Rome", "Oslo"]

    def test_sixth_city_evicts_oldest(self, tmp_path):
        """Pushing a sixth distinct city drops the oldest one.

        Implementation: Adds six cities in order.
        Passing implies: The list never exceeds five entries.
        """
        recent = RecentSearches(LocalStorage(tmp_path / "s.json"))
        for city in ["A", "B", "C", "D", "E", "F"]:
            recent.add(city)

        assert len(recent) == MAX_RECENT_SEARCHES
        assert recent.items == ["F", "E", "D", "C", "B"]

    def test_exact_duplicates_are_ignored_but_case_matters(self, tmp_path):
        """Dedup is an exact, case-sensitive string match and does not reorder.

        Implementation: Re-adds an existing city and a differently-cased variant.
        Passing implies: 'paris' and 'Paris' are distinct entries; a repeat leaves order alone.
        """
        recent = RecentSearches(LocalStorage(tmp_path / "s.json"))
        recent.add("Paris")
        recent.add("Oslo")

        assert recent.add("Paris") is False
        assert recent.add("paris") is True
        assert recent.items == ["paris", "Oslo", "Paris"]

    def test_survives_reload(self, tmp_path):
        path = tmp_path / "s.json"
        RecentSearches(LocalStorage(path)).add("Lima")

        assert RecentSearches(LocalStorage(path)).items == ["Lima"]

    def test_stored_value_is_json_array(self, tmp_path):
        storage = LocalStorage(tmp_path / "s.json")
        recent = RecentSearches(storage)
        recent.add("Lima")
        recent.add("Quito")

        assert json.loads(storage.get_item(STORAGE_KEY)) == ["Quito", "Lima"]

    def test_load_sanitizes_stored_entries(self, tmp_path):
        """Loaded history drops non-strings and duplicates and is capped.

        Implementation: Seeds storage with a messy array.
        Passing implies: Hand-edited or stale storage cannot break the invariants.
        """
        storage = LocalStorage(tmp_path / "s.json")
        storage.set_item(STORAGE_KEY, json.dumps(["A", 3, "A", None, "B", "C", "D", "E", "F"]))

        assert RecentSearches(storage).items == ["A", "B", "C", "D", "E"]

    def test_malformed_value_loads_empty(self, tmp_path):
        storage = LocalStorage(tmp_path / "s.json")
        storage.set_item(STORAGE_KEY, "not-json")
        assert RecentSearches(storage).items == []
