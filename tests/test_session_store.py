"""SessionStore atomicity, per-key serialization and the team index."""
from concurrent.futures import ThreadPoolExecutor
import threading
import time

import pytest

from core.locks import KeyedLock
from core.session_store import SessionStore
from core.state_machine import NodeStateMachine


def test_get_does_not_create():
    store = SessionStore()
    assert store.get("ALPHA", "SYS-01") is None
    assert len(store) == 0


def test_get_or_create_returns_same_instance():
    store = SessionStore()
    first = store.get_or_create("ALPHA", "SYS-01")
    second = store.get_or_create("ALPHA", "SYS-01")
    assert first is second
    assert len(store) == 1


def test_concurrent_get_or_create_creates_one_session():
    store = SessionStore()
    barrier = threading.Barrier(16)

    def create():
        barrier.wait()
        return store.get_or_create("ALPHA", "SYS-01")

    with ThreadPoolExecutor(max_workers=16) as pool:
        sessions = list(pool.map(lambda _: create(), range(16)))

    assert len(store) == 1
    assert all(s is sessions[0] for s in sessions)


def test_put_replaces_entry_and_keeps_team_index():
    store = SessionStore()
    original = store.get_or_create("ALPHA", "SYS-01")
    fresh = NodeStateMachine.fresh("ALPHA", "SYS-01", authenticated=True)

    store.put(fresh)

    assert store.get("ALPHA", "SYS-01") is fresh
    assert store.get("ALPHA", "SYS-01") is not original
    assert store.team_sessions("ALPHA") == [fresh]


def test_team_sessions_in_first_seen_order():
    store = SessionStore()
    store.get_or_create("ALPHA", "SYS-02")
    store.get_or_create("BETA", "SYS-01")
    store.get_or_create("ALPHA", "SYS-01")

    assert [s.node_id for s in store.team_sessions("ALPHA")] == ["SYS-02", "SYS-01"]
    assert store.team_sessions("GAMMA") == []


def test_snapshot_is_a_copy():
    store = SessionStore()
    live = store.get_or_create("ALPHA", "SYS-01")
    copy = store.snapshot("ALPHA", "SYS-01")

    copy.level_attempts = 2
    assert live.level_attempts == 0
    assert store.snapshot("BETA", "SYS-01") is None


def test_all_sessions_returns_copies():
    store = SessionStore()
    store.get_or_create("ALPHA", "SYS-01")
    store.get_or_create("BETA", "SYS-02")

    sessions = store.all_sessions()

    assert {s.key for s in sessions} == {"ALPHA_SYS-01", "BETA_SYS-02"}
    sessions[0].current_level = 3
    assert all(s.current_level == 1 for s in store.all_sessions())


def test_locked_serializes_read_modify_write():
    store = SessionStore()
    store.get_or_create("ALPHA", "SYS-01")

    def bump():
        for _ in range(200):
            with store.locked("ALPHA", "SYS-01") as session:
                current = session.level_attempts
                time.sleep(0)
                session.level_attempts = current + 1

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get("ALPHA", "SYS-01").level_attempts == 1600


def test_locked_does_not_block_other_keys():
    store = SessionStore()
    store.get_or_create("ALPHA", "SYS-01")
    store.get_or_create("ALPHA", "SYS-02")
    entered = threading.Event()

    with store.locked("ALPHA", "SYS-01"):
        def other():
            with store.locked("ALPHA", "SYS-02"):
                entered.set()

        t = threading.Thread(target=other)
        t.start()
        assert entered.wait(timeout=2)
        t.join()


def test_keyed_lock_reuses_lock_per_key():
    locks = KeyedLock()
    assert locks.add("a") is locks.add("a")
    assert locks.lock_for("a") is locks.add("a")
    assert locks.add("a") is not locks.add("b")
    assert len(locks) == 2


def test_keyed_lock_lookup_never_creates():
    locks = KeyedLock()

    assert locks.lock_for("a") is None
    with pytest.raises(KeyError):
        with locks.hold("a"):
            pass
    assert len(locks) == 0


def test_locks_follow_sessions_one_to_one():
    store = SessionStore()
    store.get_or_create("ALPHA", "SYS-01")
    store.get_or_create("ALPHA", "SYS-01")
    store.put(NodeStateMachine.fresh("ALPHA", "SYS-01", authenticated=True))
    store.get_or_create("BETA", "SYS-02")

    assert len(store._locks) == len(store) == 2


def test_lookups_for_unknown_sessions_create_no_locks():
    store = SessionStore()

    for i in range(100):
        with store.locked(f"GHOST{i}", "SYS-01") as session:
            assert session is None
        assert store.snapshot(f"GHOST{i}", "SYS-02") is None
        assert store.team_sessions(f"GHOST{i}") == []

    assert len(store) == 0
    assert len(store._locks) == 0


def test_team_sessions_returns_copies():
    store = SessionStore()
    live = store.get_or_create("ALPHA", "SYS-01")

    copy = store.team_sessions("ALPHA")[0]
    copy.authenticated = True

    assert copy is not live
    assert live.authenticated is False
