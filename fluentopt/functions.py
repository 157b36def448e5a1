from __future__ import annotations
from typing import Any, Protocol, TypeVar

from .errors import ContractError

T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class Action(Protocol):
    """Takes no argument and returns nothing."""
    def __call__(self) -> None: ...


class Consumer(Protocol[T_contra]):
    """Consumes a single value."""
    def __call__(self, arg: T_contra, /) -> None: ...


class Mapper(Protocol[T_contra, R_co]):
    """Maps a value into another value."""
    def __call__(self, arg: T_contra, /) -> R_co: ...


class Predicate(Protocol[T_contra]):
    """Tests a value."""
    def __call__(self, arg: T_contra, /) -> bool: ...


class Supplier(Protocol[R_co]):
    """Produces a value without any argument."""
    def __call__(self) -> R_co: ...


def require_callable(func: Any, message: str) -> None:
    if not callable(func):
        raise ContractError(message)
