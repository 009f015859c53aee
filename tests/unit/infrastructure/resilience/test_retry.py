from __future__ import annotations

import pytest

from contact_feed.infrastructure.resilience.retry import RetryPolicy, retry_async


class _Flaky:
    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f"attempt {self.calls}")
        return "ok"


async def _no_sleep(_: float) -> None:
    return None


def test_backoff_is_capped_exponential_without_jitter() -> None:
    policy = RetryPolicy(total=5, base=0.5, cap=3.0, jitter=False)

    assert [policy.backoff_for(n) for n in range(4)] == [0.5, 1.0, 2.0, 3.0]


def test_backoff_with_jitter_stays_in_bounds() -> None:
    policy = RetryPolicy(total=5, base=1.0, cap=4.0, jitter=True)

    for attempt in range(6):
        assert 0.0 <= policy.backoff_for(attempt) <= 4.0


@pytest.mark.asyncio
async def test_retry_async_succeeds_after_transient_failures() -> None:
    fn = _Flaky(failures=2)
    policy = RetryPolicy(total=3, base=0.1, cap=1.0, jitter=False)

    result = await retry_async(fn, policy=policy, retry_on=lambda e: True, sleep=_no_sleep)

    assert result == "ok"
    assert fn.calls == 3


@pytest.mark.asyncio
async def test_retry_async_reraises_when_budget_exhausted() -> None:
    fn = _Flaky(failures=10)
    policy = RetryPolicy(total=2, base=0.1, cap=1.0, jitter=False)

    with pytest.raises(ConnectionError, match="attempt 3"):
        await retry_async(fn, policy=policy, retry_on=lambda e: True, sleep=_no_sleep)

    assert fn.calls == 3


@pytest.mark.asyncio
async def test_retry_async_stops_on_non_retryable() -> None:
    fn = _Flaky(failures=10)
    policy = RetryPolicy(total=5, base=0.1, cap=1.0, jitter=False)

    with pytest.raises(ConnectionError):
        await retry_async(fn, policy=policy, retry_on=lambda e: False, sleep=_no_sleep)

    assert fn.calls == 1


@pytest.mark.asyncio
async def test_retry_async_sleeps_with_policy_backoff() -> None:
    delays: list[float] = []

    async def _record(delay: float) -> None:
        delays.append(delay)

    policy = RetryPolicy(total=3, base=0.25, cap=2.0, jitter=False)
    await retry_async(_Flaky(failures=3), policy=policy, retry_on=lambda e: True, sleep=_record)

    assert delays == [0.25, 0.5, 1.0]
