from app.core.rate_limit import RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_within_window():
    limiter = RateLimiter(3, 900, clock=FakeClock())
    assert [limiter.allow("1.2.3.4") for _ in range(4)] == [True, True, True, False]


def test_window_resets_after_expiry():
    clock = FakeClock()
    limiter = RateLimiter(1, 900, clock=clock)
    assert limiter.allow("1.2.3.4") is True
    assert limiter.allow("1.2.3.4") is False
    clock.now += 899
    assert limiter.allow("1.2.3.4") is False
    clock.now += 1
    assert limiter.allow("1.2.3.4") is True


def test_clients_are_tracked_independently():
    limiter = RateLimiter(1, 60, clock=FakeClock())
    assert limiter.allow("10.0.0.1") is True
    assert limiter.allow("10.0.0.2") is True
    assert limiter.allow("10.0.0.1") is False


def test_reset_clears_counters():
    limiter = RateLimiter(1, 60, clock=FakeClock())
    limiter.allow("10.0.0.1")
    limiter.reset()
    assert limiter.allow("10.0.0.1") is True
