"""EventWindow: start/end lifecycle and countdown arithmetic."""
import pytest

from models import StartStatus
from core.event_window import EventWindow
from tests.conftest import FakeClock


@pytest.fixture
def window(clock):
    return EventWindow(duration_seconds=600, clock=clock)


def test_new_window_is_inactive(window):
    assert window.is_active() is False
    assert window.started is False
    assert window.start_time is None
    assert window.remaining_seconds() == 0


def test_start_activates_and_stamps_time(window, clock):
    result = window.start()

    assert result.status == StartStatus.STARTED
    assert result.remaining_seconds == 600
    assert window.is_active() is True
    assert window.start_time == clock.now
    assert window.remaining_seconds() == 600


def test_remaining_seconds_counts_down_in_whole_seconds(window, clock):
    window.start()
    clock.advance(10.7)
    assert window.remaining_seconds() == 589


def test_second_start_reports_already_running_without_restamping(window, clock):
    window.start()
    first_start = window.start_time
    clock.advance(120)

    result = window.start()

    assert result.status == StartStatus.ALREADY_RUNNING
    assert result.remaining_seconds == 480
    assert window.start_time == first_start
    clock.advance(60)
    assert window.remaining_seconds() == 420


def test_window_expires_at_duration(window, clock):
    window.start()
    clock.advance(599)
    assert window.is_active() is True

    clock.advance(1)
    assert window.is_active() is False
    assert window.remaining_seconds() == 0
    # started flag stays set; only the clock closed the window
    assert window.started is True


def test_end_deactivates_but_keeps_start_time(window, clock):
    window.start()
    stamped = window.start_time

    window.end()

    assert window.is_active() is False
    assert window.started is False
    assert window.start_time == stamped
    assert window.remaining_seconds() == 0


def test_end_is_idempotent(window):
    window.end()
    window.end()
    assert window.is_active() is False


def test_restart_after_end_gets_fresh_window(window, clock):
    window.start()
    clock.advance(300)
    window.end()
    clock.advance(5)

    result = window.start()

    assert result.status == StartStatus.STARTED
    assert window.remaining_seconds() == 600


def test_restart_after_expiry_is_allowed(window, clock):
    window.start()
    clock.advance(700)
    assert window.start().status == StartStatus.STARTED


def test_snapshot_reads_consistent_state(window, clock):
    assert window.snapshot() == (False, False, 0)
    window.start()
    clock.advance(100)
    assert window.snapshot() == (True, True, 500)


def test_non_positive_duration_rejected():
    with pytest.raises(ValueError):
        EventWindow(duration_seconds=0, clock=FakeClock())
