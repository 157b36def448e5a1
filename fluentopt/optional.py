from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import ContractError, NoSuchElementError, NullValueError
from .functions import Action, Consumer, Mapper, Predicate, Supplier, require_callable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, repr=False)
class Optional(Generic[T]):
    """A container that may or may not hold a non-None value.

    Modeled on ``java.util.Optional``. Build instances with ``empty``, ``of``
    or ``of_nullable``; every other operation returns a new Optional (or the
    receiver) and never mutates it.

    Instead of::

        url = user.profile_url if user.profile_url is not None else "/default.jpeg"

    write::

        url = Optional.of_nullable(user.profile_url).or_else("/default.jpeg")
    """

    _value: T | None = None

    @classmethod
    def empty(cls) -> "Optional[T]":
        return _EMPTY  # type: ignore[return-value]

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """Wrap a non-None value; raises NullValueError for None."""
        if value is not None:
            return cls(value)
        raise NullValueError("Null or undefined value")

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        return cls(value)

    def is_present(self) -> bool: return self._value is not None
    def is_empty(self) -> bool: return self._value is None

    def get(self) -> T:
        if self.is_present():
            return self._value  # type: ignore[return-value]
        raise NoSuchElementError("Null or undefined value")

    def or_else(self, other: U) -> T | U:
        return self._value if self.is_present() else other  # type: ignore[return-value]

    def or_else_get(self, supplier: Supplier[U]) -> T | U:
        """Return the value if present, otherwise the result of ``supplier()``."""
        require_callable(supplier, "The given supplier is not a function")
        return self._value if self.is_present() else supplier()  # type: ignore[return-value]

    def or_else_throw(self, error_supplier: Supplier[BaseException]) -> T:
        """Return the value if present, otherwise raise the exception built by ``error_supplier``.

        Raises ContractError if ``error_supplier`` is not callable or does not
        return an exception instance.
        """
        require_callable(error_supplier, "The given error supplier is not a function")
        if self.is_present():
            return self._value  # type: ignore[return-value]
        error = error_supplier()
        if not isinstance(error, BaseException):
            raise ContractError("Error supplier doesn't return an exception")
        raise error

    def map(self, mapper: Mapper[T, U]) -> "Optional[U]":
        """Apply ``mapper`` to a present value and wrap the result.

        A mapper returning None yields an empty Optional.
        """
        require_callable(mapper, "The given mapper is not a function")
        if self.is_present():
            return Optional(mapper(self._value))  # type: ignore[arg-type]
        return Optional.empty()

    def flat_map(self, mapper: Mapper[T, "Optional[U]"]) -> "Optional[U]":
        """Apply ``mapper`` to a present value and return its Optional as-is.

        Raises ContractError if ``mapper`` is not callable or its result is
        not an Optional.
        """
        require_callable(mapper, "The given mapper is not a function")
        if self.is_present():
            result = mapper(self._value)  # type: ignore[arg-type]
            if not isinstance(result, Optional):
                raise ContractError("Mapper doesn't return an Optional")
            return result
        return Optional.empty()

    def filter(self, predicate: Predicate[T]) -> "Optional[T]":
        require_callable(predicate, "The given predicate is not a function")
        if self.is_present():
            return self if predicate(self._value) else Optional.empty()  # type: ignore[arg-type]
        return self

    def or_(self, supplier: Supplier["Optional[T]"]) -> "Optional[T]":
        """Return this Optional if a value is present, otherwise the Optional from ``supplier()``.

        Named with a trailing underscore since ``or`` is a keyword.
        """
        require_callable(supplier, "The given supplier is not a function")
        if self.is_present():
            return self
        result = supplier()
        if not isinstance(result, Optional):
            raise ContractError("Supplier doesn't return an Optional")
        return result

    def peek(self, consumer: Consumer[T | None]) -> "Optional[T]":
        """Hand the current value to ``consumer`` and return this Optional.

        The consumer runs even when the Optional is empty, receiving None.
        """
        require_callable(consumer, "The given consumer is not a function")
        consumer(self._value)
        return self

    def if_present(self, consumer: Consumer[T]) -> None:
        require_callable(consumer, "The given consumer is not a function")
        if self.is_present():
            consumer(self._value)  # type: ignore[arg-type]

    def if_empty(self, on_empty: Action) -> None:
        require_callable(on_empty, "The given onEmpty action is not a function")
        if self.is_empty():
            on_empty()

    def if_present_or_else(self, on_present: Consumer[T], on_empty: Action) -> None:
        require_callable(on_present, "The given onPresent action is not a function")
        require_callable(on_empty, "The given onEmpty action is not a function")
        if self.is_present():
            on_present(self._value)  # type: ignore[arg-type]
        else:
            on_empty()

    def __str__(self) -> str:
        return f"Optional({self._value})"

    def __repr__(self) -> str:
        return f"Optional({self._value!r})"


_EMPTY: Optional[Any] = Optional(None)
