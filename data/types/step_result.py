from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from data.enums import RoundStep
from exceptions import WarGameError

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of one orchestrated game step: either a value or an error.

    Attributes:
        step: The last step attempted
        value: Value produced when the step succeeded
        error: Error raised by the step, None on success
    """

    step: RoundStep
    value: Optional[T] = None
    error: Optional[WarGameError] = None

    @classmethod
    def success(cls, step: RoundStep, value: T) -> "StepResult[T]":
        return cls(step=step, value=value)

    @classmethod
    def failure(cls, step: RoundStep, error: WarGameError) -> "StepResult[T]":
        return cls(step=step, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or re-raise the step's error."""
        if self.error is not None:
            raise self.error
        return self.value
