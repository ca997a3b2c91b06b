import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from passgen.middleware.rate_limit import RateLimitConfig, RateLimiter
from passgen.middleware.security import SecurityMiddleware


class FakeClock:
    def __init__(self, step: float = 0.0):
        self.now = 1000.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


def test_rate_limiter_allows_burst_then_blocks():
    limiter = RateLimiter(RateLimitConfig(requests_per_minute=60, burst_size=2), clock=FakeClock())

    assert limiter.is_allowed("10.0.0.1")
    assert limiter.is_allowed("10.0.0.1")
    assert not limiter.is_allowed("10.0.0.1")
    assert limiter.is_allowed("10.0.0.2")


def test_first_request_allowed_with_burst_of_one_on_a_moving_clock():
    limiter = RateLimiter(
        RateLimitConfig(requests_per_minute=1, burst_size=1),
        clock=FakeClock(step=0.001),
    )

    assert limiter.is_allowed("10.0.0.1")
    assert not limiter.is_allowed("10.0.0.1")


def test_rate_limiter_replenishes_over_time():
    clock = FakeClock()
    limiter = RateLimiter(RateLimitConfig(requests_per_minute=60, burst_size=1), clock=clock)

    assert limiter.is_allowed("10.0.0.1")
    assert not limiter.is_allowed("10.0.0.1")
    clock.now += 1.0
    assert limiter.is_allowed("10.0.0.1")


def test_tracked_clients_stay_within_max_clients():
    clock = FakeClock(step=0.001)
    limiter = RateLimiter(RateLimitConfig(max_clients=100), clock=clock)

    for n in range(5000):
        limiter.is_allowed(f"10.0.{n // 256}.{n % 256}")

    assert limiter.tracked_clients() <= 100


def test_idle_clients_are_dropped_before_active_ones():
    clock = FakeClock()
    limiter = RateLimiter(
        RateLimitConfig(requests_per_minute=60, burst_size=10, max_clients=2),
        clock=clock,
    )
    limiter.is_allowed("10.0.0.1")
    clock.now += 60
    limiter.is_allowed("10.0.0.2")
    limiter.is_allowed("10.0.0.2")

    limiter.is_allowed("10.0.0.3")

    assert limiter.tracked_clients() == 2
    # 10.0.0.2 kept its partly drained bucket
    for _ in range(8):
        assert limiter.is_allowed("10.0.0.2")
    assert not limiter.is_allowed("10.0.0.2")


@pytest.mark.asyncio
async def test_security_middleware_returns_429_when_limited():
    app = FastAPI()
    app.add_middleware(
        SecurityMiddleware,
        rate_limiter=RateLimiter(RateLimitConfig(requests_per_minute=1, burst_size=1)),
    )

    @app.get("/api/ping")
    async def ping():
        return {"ok": True}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        first = await client.get("/api/ping")
        second = await client.get("/api/ping")
        health = await client.get("/health")

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json()["error"] == "rate_limited"
    assert second.headers["Cache-Control"].startswith("no-store")
    assert health.status_code == 200
