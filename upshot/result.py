"""
Result of a computation that either succeeded with a value or failed
with an error.

A ``Result`` is always exactly one of ``Ok`` or ``Err``; the variant
itself says which, so ``Ok(None)`` is an ordinary success.
"""
from abc import ABC, abstractmethod
import attr
import logging
from typing import Any, Awaitable, Callable, Generic, TypeVar

from upshot.errors import UnwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


class Result(ABC, Generic[T, E]):
    @abstractmethod
    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        return not self.is_ok()

    @property
    @abstractmethod
    def ok(self) -> T:
        """
        The success value.

        Only valid when ``is_ok()`` is true.

        Raises:
            UnwrapError: if this is an ``Err``.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def err(self) -> E:
        """
        The error value.

        Only valid when ``is_err()`` is true.

        Raises:
            UnwrapError: if this is an ``Ok``.
        """
        raise NotImplementedError

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        raise NotImplementedError

    @abstractmethod
    def expect(self, msg: str) -> T:
        """
        Return the success value or raise with ``msg``.

        Raises:
            UnwrapError: if this is an ``Err``. The message reads
                ``"{msg} - {error}"``.
        """
        raise NotImplementedError

    @staticmethod
    def wrap(func: Callable[[], T]) -> "Result[T, Exception]":
        """
        Call ``func`` and capture its outcome.

        Any ``Exception`` raised by ``func`` is returned as ``Err``
        instead of propagating. Exceptions deriving only from
        ``BaseException``, such as ``KeyboardInterrupt`` and
        ``SystemExit``, are not captured. Arguments can be bound with
        ``functools.partial``.
        """
        try:
            value = func()
        except Exception as e:
            logger.debug("Result.wrap caught error from %r", func, exc_info=True)
            return Err(e)
        return Ok(value)

    @staticmethod
    async def wrap_async(func: Callable[[], Awaitable[T]]) -> "Result[T, Exception]":
        """
        Await ``func()`` and capture its outcome.

        Same as ``wrap`` for coroutines. Cancellation of the awaiting
        task and other ``BaseException`` failures are not captured.
        """
        try:
            value = await func()
        except Exception as e:
            logger.debug(
                "Result.wrap_async caught error from %r", func, exc_info=True
            )
            return Err(e)
        return Ok(value)


@attr.s(frozen=True, repr=False)
class Ok(Result[T, E]):
    value: T = attr.ib()

    def is_ok(self) -> bool:
        return True

    @property
    def ok(self) -> T:
        return self.value

    @property
    def err(self) -> E:
        raise UnwrapError(f"Called err on {self!r}", self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@attr.s(frozen=True, repr=False)
class Err(Result[T, E]):
    error: E = attr.ib()

    def is_ok(self) -> bool:
        return False

    @property
    def ok(self) -> T:
        raise UnwrapError(f"Called ok on {self!r}", self.error)

    @property
    def err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def expect(self, msg: str) -> T:
        cause: Any = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(f"{msg} - {self.error}", self.error) from cause

    def __repr__(self) -> str:
        return f"Err({self.error!r})"
