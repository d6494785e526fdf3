from trippulse.services.rate_limiter import InMemoryRateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_second_call_within_window_is_denied():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(10, clock=clock)
    assert limiter.allow("FCO-BCN-2026-04-01") is True
    clock.now += 9.9
    assert limiter.allow("FCO-BCN-2026-04-01") is False


def test_window_expiry_allows_again():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(10, clock=clock)
    assert limiter.allow("k")
    clock.now += 10
    assert limiter.allow("k")


def test_denied_call_does_not_extend_window():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(10, clock=clock)
    limiter.allow("k")
    clock.now += 8
    assert not limiter.allow("k")
    clock.now += 2
    assert limiter.allow("k")


def test_keys_are_independent():
    limiter = InMemoryRateLimiter(10, clock=FakeClock())
    assert limiter.allow("refresh-a")
    assert limiter.allow("refresh-b")
    assert not limiter.allow("refresh-a")


def test_expired_keys_are_evicted():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(10, clock=clock)
    for i in range(50):
        limiter.allow(f"route-{i}")
    assert len(limiter) == 50
    clock.now += 11
    limiter.allow("fresh")
    assert len(limiter) == 1


def test_reset_clears_cooldowns():
    limiter = InMemoryRateLimiter(10, clock=FakeClock())
    limiter.allow("k")
    limiter.reset()
    assert limiter.allow("k")
