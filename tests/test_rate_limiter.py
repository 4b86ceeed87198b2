import pytest

from scoreboard.core.rate_limiter import RateLimiter

W = 60000
T0 = 1_000_000.0


def test_fresh_limiter_admits_and_reports_nothing():
    limiter = RateLimiter(window_ms=W, max_submissions=3)
    assert limiter.is_admitted(T0)
    state = limiter.tick(T0)
    assert state.last_submission is None
    assert state.submission_count == 0
    assert not state.is_limited
    assert state.time_until_reset == 0


def test_rejects_non_positive_configuration():
    with pytest.raises(ValueError):
        RateLimiter(window_ms=0)
    with pytest.raises(ValueError):
        RateLimiter(max_submissions=0)


def test_fourth_submission_blocked_until_window_after_third():
    limiter = RateLimiter(window_ms=W, max_submissions=3)
    for offset in (0, 20000, 40000):
        assert limiter.is_admitted(T0 + offset)
        limiter.record_submission(T0 + offset)

    third = T0 + 40000
    assert limiter.snapshot().is_limited
    # A window measured from the first submission would already have passed.
    assert not limiter.is_admitted(T0 + W + 1)
    assert not limiter.is_admitted(third + W)
    assert limiter.is_admitted(third + W + 1)


def test_record_refreshes_full_window():
    limiter = RateLimiter(window_ms=W, max_submissions=3)
    limiter.record_submission(T0)
    state = limiter.record_submission(T0 + 59000)
    assert state.submission_count == 2
    assert state.time_until_reset == W
    assert state.last_submission == T0 + 59000


def test_record_after_window_resets_count_to_one():
    limiter = RateLimiter(window_ms=W, max_submissions=3)
    limiter.record_submission(T0)
    limiter.record_submission(T0 + 1)
    state = limiter.record_submission(T0 + 1 + W + 1)
    assert state.submission_count == 1
    assert not state.is_limited


def test_tick_updates_countdown_without_touching_count():
    limiter = RateLimiter(window_ms=W, max_submissions=1)
    limiter.record_submission(T0)
    state = limiter.tick(T0 + 10)
    assert state.submission_count == 1
    assert state.is_limited
    assert state.time_until_reset == W - 10
    assert state.seconds_until_reset == 60


def test_tick_after_window_clears_limit():
    limiter = RateLimiter(window_ms=W, max_submissions=1)
    limiter.record_submission(T0)
    state = limiter.tick(T0 + W + 1)
    assert state.submission_count == 0
    assert not state.is_limited
    assert state.time_until_reset == 0
    assert state.last_submission == T0


def test_snapshot_is_independent():
    limiter = RateLimiter(window_ms=W, max_submissions=3)
    before = limiter.snapshot()
    limiter.record_submission(T0)
    assert before.submission_count == 0
    assert limiter.snapshot().submission_count == 1
