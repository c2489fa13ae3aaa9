import asyncio
import logging
import pytest

from upshot.result import Err, Ok, Result


@pytest.mark.asyncio
async def test_wrap_async_returns_ok():
    async def compute():
        await asyncio.sleep(0)
        return 42

    result = await Result.wrap_async(compute)

    assert result == Ok(42)


@pytest.mark.asyncio
async def test_wrap_async_captures_error():
    error = ValueError("bad")

    async def fail():
        await asyncio.sleep(0)
        raise error

    result = await Result.wrap_async(fail)

    assert result.is_err()
    assert result == Err(error)


@pytest.mark.asyncio
async def test_wrap_async_captures_error_before_await():
    def fail():
        raise ValueError("bad")

    result = await Result.wrap_async(fail)

    assert isinstance(result.err, ValueError)


@pytest.mark.asyncio
async def test_wrap_async_captures_non_awaitable():
    result = await Result.wrap_async(lambda: 42)

    assert isinstance(result.err, TypeError)


@pytest.mark.asyncio
async def test_wrap_async_future():
    loop = asyncio.get_running_loop()
    future = loop.create_future()
    loop.call_soon(future.set_result, "done")

    result = await Result.wrap_async(lambda: future)

    assert result == Ok("done")


@pytest.mark.asyncio
async def test_wrap_async_does_not_capture_cancellation():
    started = asyncio.Event()

    async def wait_forever():
        started.set()
        await asyncio.Event().wait()

    task = asyncio.create_task(Result.wrap_async(wait_forever))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_wrap_async_logs_caught_error(caplog):
    async def fail():
        raise ValueError("bad")

    with caplog.at_level(logging.DEBUG, logger="upshot.result"):
        await Result.wrap_async(fail)

    [record] = caplog.records
    assert record.levelno == logging.DEBUG
    assert record.exc_info[0] is ValueError


@pytest.mark.asyncio
async def test_wrap_async_does_not_capture_keyboard_interrupt():
    async def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        await Result.wrap_async(interrupt)


@pytest.mark.asyncio
async def test_wrap_async_does_not_capture_system_exit():
    async def exit_():
        raise SystemExit(1)

    with pytest.raises(SystemExit):
        await Result.wrap_async(exit_)
