# 📄 File: my_garden/shared/core/result.py
# 🧭 Purpose (Layman Explanation):
# A small "outcome" box that says whether something worked, what it produced,
# and any soft problems (like "saved in memory but not on disk") worth showing.
# 🧪 Purpose (Technical Summary):
# Generic result value returned by application handlers and repositories so that
# recoverable failures (decode, encode, validation, permission) are explicit values
# instead of swallowed exceptions.
# 🔗 Dependencies:
# typing, app exceptions
# 🔄 Connected Modules / Calls From:
# Plant and calendar repositories, command/query handlers, presentation endpoints

from typing import Generic, List, Optional, TypeVar

from .exceptions import GardenException

T = TypeVar("T")


class Result(Generic[T]):
    """Outcome of an operation: a value on success, an error otherwise."""

    def __init__(
        self,
        success: bool,
        value: Optional[T] = None,
        error: Optional[GardenException] = None,
        warnings: Optional[List[str]] = None,
    ):
        self.success = success
        self.value = value
        self.error = error
        self.warnings = warnings or []

    @classmethod
    def ok(cls, value: Optional[T] = None, warnings: Optional[List[str]] = None) -> "Result[T]":
        return cls(True, value=value, warnings=warnings)

    @classmethod
    def fail(cls, error: GardenException, warnings: Optional[List[str]] = None) -> "Result[T]":
        return cls(False, error=error, warnings=warnings)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if not self.success:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"Result.ok({self.value!r}, warnings={self.warnings!r})"
        return f"Result.fail({self.error!r})"


class PersistResult:
    """Outcome of writing a full snapshot to the storage slot."""

    def __init__(self, persisted: bool, error: Optional[GardenException] = None):
        self.persisted = persisted
        self.error = error

    def __bool__(self) -> bool:
        return self.persisted

    def __repr__(self) -> str:
        return f"PersistResult(persisted={self.persisted}, error={self.error!r})"
