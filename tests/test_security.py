"""Rate limiter window behaviour and client IP resolution."""

from flask import Flask

from utils.security import RateLimiter, get_client_ip


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_limit_is_enforced_within_window():
    limiter = RateLimiter(max_requests=2, window=60, clock=FakeClock())
    assert limiter.allow("1.2.3.4")
    assert limiter.allow("1.2.3.4")
    assert not limiter.allow("1.2.3.4")


def test_window_expiry_allows_new_requests():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=1, window=60, clock=clock)
    assert limiter.allow("1.2.3.4")
    assert not limiter.allow("1.2.3.4")
    clock.now += 61
    assert limiter.allow("1.2.3.4")


def test_endpoints_are_counted_separately():
    limiter = RateLimiter(max_requests=1, window=60, clock=FakeClock())
    assert limiter.allow("1.2.3.4", "contact")
    assert limiter.allow("1.2.3.4", "resume")


def test_reset_clears_history():
    limiter = RateLimiter(max_requests=1, window=60, clock=FakeClock())
    limiter.allow("1.2.3.4")
    limiter.reset()
    assert limiter.allow("1.2.3.4")


def test_client_ip_ignores_forwarded_header_by_default():
    app = Flask(__name__)
    with app.test_request_context("/", headers={"X-Forwarded-For": "203.0.113.7"},
                                  environ_base={"REMOTE_ADDR": "198.51.100.2"}):
        assert get_client_ip() == "198.51.100.2"


def test_expired_keys_are_evicted():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=5, window=60, clock=clock)
    for i in range(1000):
        limiter.allow(f"10.0.{i // 256}.{i % 256}")
    assert len(limiter) == 1000

    clock.now += 61
    assert limiter.allow("192.0.2.1")
    assert len(limiter) == 1


def test_active_keys_survive_sweep():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=1, window=60, clock=clock)
    limiter.allow("10.0.0.1")
    clock.now += 59
    limiter.allow("10.0.0.2")
    clock.now += 2
    assert limiter.allow("10.0.0.3")
    # 10.0.0.2 is still inside its window and stays limited
    assert not limiter.allow("10.0.0.2")
    assert len(limiter) == 2
