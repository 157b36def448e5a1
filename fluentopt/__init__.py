from . import errors, functions
from .optional import Optional
from .errors import AbsenceError, NullValueError, NoSuchElementError, ContractError
from .functions import Action, Consumer, Mapper, Predicate, Supplier
from .logger import ConsoleLogger

__all__ = [
    "Optional",
    "errors",
    "functions",
    "AbsenceError",
    "NullValueError",
    "NoSuchElementError",
    "ContractError",
    "Action",
    "Consumer",
    "Mapper",
    "Predicate",
    "Supplier",
    "ConsoleLogger",
]
