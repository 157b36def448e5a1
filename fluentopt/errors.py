from __future__ import annotations


class AbsenceError(Exception):
    """A value was required but none was present."""


class NullValueError(AbsenceError, ValueError):
    """Value is None when it is not supposed to be."""


class NoSuchElementError(AbsenceError, LookupError):
    """Element in question does not exist."""


class ContractError(TypeError):
    """A callback is not callable, or returned a value of the wrong shape."""
