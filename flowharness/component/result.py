"""
Validation result type shared by components and the harness.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one subject (usually a property name).

    Invalid configurations are data, not exceptions: a component reports a
    problem by returning an instance with valid=False.
    """
    subject: str
    valid: bool
    explanation: str = ""
    input: Optional[str] = None

    @classmethod
    def ok(cls, subject: str, input: Optional[str] = None) -> 'ValidationResult':
        return cls(subject, True, "", input)

    @classmethod
    def invalid(cls, subject: str, explanation: str, input: Optional[str] = None) -> 'ValidationResult':
        return cls(subject, False, explanation, input)

    def __str__(self):
        state = "valid" if self.valid else "invalid"
        if self.input is None:
            text = f"'{self.subject}' is {state}"
        else:
            text = f"'{self.subject}' validated against '{self.input}' is {state}"
        if self.explanation:
            text += f" because {self.explanation}"
        return text
