"""NodeStateMachine transitions and guards."""
import pytest

from core.exceptions import InvalidStateTransition
from core.state_machine import NodeStateMachine


@pytest.fixture
def session():
    return NodeStateMachine.fresh("ALPHA", "SYS-01", authenticated=True)


def test_fresh_session_defaults():
    s = NodeStateMachine.fresh("ALPHA", "SYS-02")
    assert s.key == "ALPHA_SYS-02"
    assert s.authenticated is False
    assert s.current_level == 1
    assert s.level_attempts == 0
    assert s.attempts_remaining == 3
    assert not s.unlocked and not s.permanently_locked


def test_authenticate_is_idempotent(session):
    session.level_attempts = 1
    NodeStateMachine.authenticate(session)
    NodeStateMachine.authenticate(session)
    assert session.authenticated is True
    assert session.level_attempts == 1


def test_advance_level_resets_attempts(session):
    NodeStateMachine.record_failure(session)
    NodeStateMachine.advance_level(session)
    assert session.current_level == 2
    assert session.level_attempts == 0
    assert session.attempts_remaining == 3


def test_cannot_advance_past_final_level(session):
    NodeStateMachine.advance_level(session)
    NodeStateMachine.advance_level(session)
    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.advance_level(session)
    assert session.current_level == 3


def test_unlock_only_at_final_level(session):
    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.unlock(session)

    session.current_level = 3
    NodeStateMachine.unlock(session)
    assert session.unlocked is True
    assert session.frozen is True


def test_third_failure_locks_atomically(session):
    NodeStateMachine.record_failure(session)
    NodeStateMachine.record_failure(session)
    assert session.permanently_locked is False
    assert session.attempts_remaining == 1

    NodeStateMachine.record_failure(session)
    assert session.permanently_locked is True
    assert session.attempts_remaining == 0


def test_frozen_session_rejects_transitions(session):
    for _ in range(3):
        NodeStateMachine.record_failure(session)

    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.record_failure(session)
    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.advance_level(session)
    assert session.level_attempts == 3
    assert session.current_level == 1


def test_force_lock_never_overrides_unlock(session):
    session.current_level = 3
    NodeStateMachine.unlock(session)
    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.force_lock(session)
    assert session.permanently_locked is False


def test_unlocked_session_rejects_failures(session):
    session.current_level = 3
    NodeStateMachine.unlock(session)
    with pytest.raises(InvalidStateTransition):
        NodeStateMachine.record_failure(session)
    assert not (session.unlocked and session.permanently_locked)
