import time

from dining.timing import now_ms, sleep_ms, wait_until


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_is_monotone_over_short_span():
    first = now_ms()
    time.sleep(0.01)
    assert now_ms() >= first + 9


def test_sleep_ms_waits_full_duration():
    start = now_ms()
    sleep_ms(30, lambda: False)
    assert now_ms() - start >= 30


def test_sleep_ms_stops_early():
    calls = []

    def stop():
        calls.append(1)
        return True

    start = now_ms()
    sleep_ms(5000, stop)
    assert now_ms() - start < 1000
    assert len(calls) == 1


def test_sleep_ms_zero_duration_returns():
    start = now_ms()
    sleep_ms(0, lambda: False)
    assert now_ms() - start < 100


def test_wait_until_reaches_target():
    target = now_ms() + 25
    wait_until(target)
    assert now_ms() >= target


def test_wait_until_past_returns_immediately():
    start = now_ms()
    wait_until(start - 1000)
    assert now_ms() - start < 100