# src/lifecost/errors.py
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class InvalidInputError(ValueError):
    """Raised by the engine for input it cannot give a meaningful answer for."""


class CityNotFoundError(LookupError):
    def __init__(self, slug: str):
        super().__init__(f"City '{slug}' not found.")
        self.slug = slug


class ErrorKind(str, Enum):
    NOT_FOUND = 'not_found'         # the query ran but there is no data
    FETCH_FAILED = 'fetch_failed'   # the query itself failed


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
