"""
Optional values.

Example::

    option = Option.wrap(42)
    option.is_some()  # True
    option.some  # 42

    empty = Option.wrap(None)
    empty.is_none()  # True
"""
from abc import ABC, abstractmethod
import attr
from typing import Generic, Optional, TypeVar

from upshot.errors import UnwrapError

T = TypeVar("T")


class Option(ABC, Generic[T]):
    @abstractmethod
    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    @property
    @abstractmethod
    def some(self) -> T:
        """
        The stored value.

        Raises:
            UnwrapError: if the Option is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        raise NotImplementedError

    @abstractmethod
    def expect(self, msg: str) -> T:
        """
        Raises:
            UnwrapError: if the Option is empty. The message reads
                ``"{msg} - Option is None"``.
        """
        raise NotImplementedError

    @staticmethod
    def wrap(value: Optional[T]) -> "Option[T]":
        if value is None:
            return Nothing()
        return Some(value)


@attr.s(frozen=True, repr=False)
class Some(Option[T]):
    value: T = attr.ib()

    @value.validator
    def check(self, attribute: attr.Attribute, value: T):
        if value is None:
            raise ValueError("Some cannot hold None, use Nothing()")

    def is_some(self) -> bool:
        return True

    @property
    def some(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@attr.s(frozen=True, repr=False)
class Nothing(Option[T]):
    def is_some(self) -> bool:
        return False

    @property
    def some(self) -> T:
        raise UnwrapError("Option is None")

    def unwrap_or(self, default: T) -> T:
        return default

    def expect(self, msg: str) -> T:
        raise UnwrapError(f"{msg} - Option is None")

    def __repr__(self) -> str:
        return "Nothing()"
