"""Tests for persisted preferences."""

import logging

from chefai.services.preferences import (
    BANNER_KEYS,
    MemoryPreferenceBackend,
    PersistedPreference,
    SqlPreferenceBackend,
    banner_preference,
)


class TestPersistedPreference:
    def test_default_when_missing(self):
        pref = PersistedPreference(MemoryPreferenceBackend(), "theme", "light")
        assert pref.value == "light"

    def test_reads_stored_value(self):
        backend = MemoryPreferenceBackend({"theme": '"dark"'})
        assert PersistedPreference(backend, "theme", "light").value == "dark"

    def test_set_writes_json(self):
        backend = MemoryPreferenceBackend()
        pref = PersistedPreference(backend, "servings", 2)
        pref.set(4)
        assert pref.value == 4
        assert backend.get("servings") == "4"

    def test_set_with_updater(self):
        backend = MemoryPreferenceBackend()
        pref = PersistedPreference(backend, "count", 1)
        pref.set(lambda current: current + 1)
        assert pref.value == 2

    def test_invalid_json_falls_back(self, caplog):
        backend = MemoryPreferenceBackend({"theme": "{not json"})
        with caplog.at_level(logging.WARNING):
            pref = PersistedPreference(backend, "theme", "light")
        assert pref.value == "light"
        assert "theme" in caplog.text

    def test_unserializable_value_ignored(self):
        backend = MemoryPreferenceBackend()
        pref = PersistedPreference(backend, "thing", None)
        pref.set(object())
        assert pref.value is None
        assert backend.get("thing") is None


class TestSqlBackend:
    def test_round_trip_per_user(self, db_session, make_user):
        alice, bob = make_user(), make_user()
        SqlPreferenceBackend(db_session, alice.id).set("banner.generator_intro", "true")

        assert SqlPreferenceBackend(db_session, alice.id).get("banner.generator_intro") == "true"
        assert SqlPreferenceBackend(db_session, bob.id).get("banner.generator_intro") is None

    def test_overwrites_existing_row(self, db_session, make_user):
        user = make_user()
        backend = SqlPreferenceBackend(db_session, user.id)
        backend.set("k", "1")
        backend.set("k", "2")
        assert backend.get("k") == "2"


class TestBannerPreference:
    def test_defaults_to_not_dismissed(self):
        pref = banner_preference(MemoryPreferenceBackend(), BANNER_KEYS[0])
        assert pref.value is False

    def test_dismiss_persists(self, db_session, make_user):
        user = make_user()
        banner_preference(SqlPreferenceBackend(db_session, user.id), "banner.planner_intro").set(True)
        again = banner_preference(SqlPreferenceBackend(db_session, user.id), "banner.planner_intro")
        assert again.value is True

    def test_banner_keys(self):
        assert set(BANNER_KEYS) == {
            "banner.generator_intro",
            "banner.planner_intro",
            "banner.community_intro",
        }
