# ABOUTME: Contract tests for the in-memory TTL cache.
# ABOUTME: Drives expiry with an injected clock instead of sleeping.

import pytest

from weather_lookup.cache import DEFAULT_TTL_MS, TTLCache


class FakeClock:
    """Epoch-millis clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> TTLCache[str]:
    return TTLCache[str](ttl_ms=1000, clock=clock)


class TestKeys:
    def test_stores_and_retrieves_values(self, cache):
        """set followed by get returns the stored value.

        Implementation: Stores a value under a key and reads it back.
        Passing implies: Basic storage works.
        """
        cache.set("key1", "value1")
        assert cache.get("key1") == "value1"

    def test_missing_key_returns_none(self, cache):
        """get on an unknown key returns None.

        Implementation: Reads a key that was never set.
        Passing implies: Absence is reported as None rather than raising.
        """
        assert cache.get("nonexistent") is None

    def test_keys_are_case_insensitive(self, cache):
        """Keys differing only in case share one entry.

        Implementation: Stores under "Boston" and reads back with other casings.
        Passing implies: Keys are lowercased before every lookup.
        """
        cache.set("Boston", "data")
        assert cache.get("boston") == "data"
        assert cache.get("BOSTON") == "data"
        assert cache.get("BoStOn") == "data"

    def test_keys_ignore_surrounding_whitespace(self, cache):
        """Keys differing only in leading/trailing whitespace share one entry.

        Implementation: Stores under a padded key and reads back with and without padding.
        Passing implies: Keys are stripped before every lookup.
        """
        cache.set("  Boston  ", "data")
        assert cache.get("Boston") == "data"
        assert cache.get("\tboston\n") == "data"

    def test_set_overwrites_equivalent_key(self, cache):
        """Setting an equivalent key replaces the earlier value.

        Implementation: Sets "Boston" then " BOSTON " and reads back.
        Passing implies: Both writes land on the same normalized entry.
        """
        cache.set("Boston", "old")
        cache.set(" BOSTON ", "new")
        assert cache.get("boston") == "new"
        assert cache.size() == 1


class TestExpiry:
    def test_value_available_at_exactly_ttl(self, cache, clock):
        """An entry is still live when exactly ttl ms have passed.

        Implementation: Advances the clock to ttl - 1, then to ttl, reading each time.
        Passing implies: Expiry uses a strict "older than ttl" comparison.
        """
        cache.set("key1", "value1")
        clock.advance(999)
        assert cache.get("key1") == "value1"
        clock.advance(1)
        assert cache.get("key1") == "value1"

    def test_value_expires_after_ttl(self, cache, clock):
        """An entry older than ttl is reported missing.

        Implementation: Advances the clock past the TTL and reads the key.
        Passing implies: Stale entries are never served.
        """
        cache.set("key1", "value1")
        clock.advance(1001)
        assert cache.get("key1") is None

    def test_expired_get_evicts_entry(self, cache, clock):
        """Reading an expired entry removes it from the store.

        Implementation: Expires an entry, reads it, then checks delete reports nothing removed.
        Passing implies: Eviction is lazy and happens on access.
        """
        cache.set("key1", "value1")
        clock.advance(1001)
        assert cache.get("key1") is None
        assert cache.delete("key1") is False

    def test_has_tracks_expiry(self, cache, clock):
        """has() mirrors get() including expiry.

        Implementation: Checks has() before and after the TTL elapses.
        Passing implies: has() cannot report a key that get() would not return.
        """
        cache.set("key1", "value1")
        assert cache.has("key1") is True
        assert cache.has("key2") is False
        clock.advance(1001)
        assert cache.has("key1") is False

    def test_size_excludes_expired_entries(self, cache, clock):
        """size() only counts live entries.

        Implementation: Stores two entries, one later than the other, and counts across expiry.
        Passing implies: size() sweeps stale entries before counting.
        """
        cache.set("key1", "value1")
        clock.advance(600)
        cache.set("key2", "value2")
        assert cache.size() == 2
        clock.advance(500)
        assert cache.size() == 1
        assert len(cache) == 1
        clock.advance(600)
        assert cache.size() == 0

    def test_rewrite_refreshes_timestamp(self, cache, clock):
        """Re-setting a key restarts its TTL.

        Implementation: Re-sets a key near expiry and reads it after the original TTL.
        Passing implies: set() replaces the whole entry, timestamp included.
        """
        cache.set("key1", "v1")
        clock.advance(900)
        cache.set("key1", "v2")
        clock.advance(900)
        assert cache.get("key1") == "v2"

    def test_default_ttl_is_ten_minutes(self):
        """A cache built without a TTL uses ten minutes.

        Implementation: Constructs a cache with defaults and reads ttl_ms.
        Passing implies: The default matches the documented 600000 ms.
        """
        assert TTLCache().ttl_ms == DEFAULT_TTL_MS == 600_000


class TestRemoval:
    def test_delete_specific_entry(self, cache):
        """delete() removes one entry and reports it.

        Implementation: Deletes one of two keys and checks both.
        Passing implies: delete only touches the named (normalized) key.
        """
        cache.set("key1", "value1")
        cache.set("key2", "value2")
        assert cache.delete(" KEY1 ") is True
        assert cache.get("key1") is None
        assert cache.get("key2") == "value2"

    def test_delete_missing_returns_false(self, cache):
        """delete() on an unknown key reports no removal.

        Implementation: Deletes a key that was never set.
        Passing implies: The boolean result reflects whether anything was removed.
        """
        assert cache.delete("ghost") is False

    def test_clear_removes_everything(self, cache):
        """clear() empties the cache.

        Implementation: Stores two entries, clears, and checks size and reads.
        Passing implies: No prior key survives a clear.
        """
        cache.set("key1", "value1")
        cache.set("key2", "value2")
        assert cache.size() == 2
        cache.clear()
        assert cache.size() == 0
        assert cache.get("key1") is None
        assert cache.get("key2") is None
