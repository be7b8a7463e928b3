"""Validation result type shared by every validator.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation call.

    Behaves like the ``(ok, error, hints)`` triple: it can be unpacked,
    and ``bool(result)`` is ``result.ok``. ``error`` and ``hints`` only
    mean something when ``ok`` is false.
    """

    ok: bool
    error: str | None = None
    hints: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.hints is not None and not isinstance(self.hints, tuple):
            object.__setattr__(self, "hints", normalize_hints(self.hints))

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.ok

    def __iter__(self) -> Iterator[Any]:
        """Unpack as ``ok, error, hints``."""
        return iter((self.ok, self.error, self.hints))

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.ok

    @property
    def has_hints(self) -> bool:
        return bool(self.hints)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls(ok=True)

    @classmethod
    def failure(
        cls,
        error: str | None = None,
        hints: Iterable[str] | None = None,
    ) -> ValidationResult:
        """Create a failed validation result.

        Args:
            error: Human readable reason, or None to let a wrapper supply one
            hints: Optional remediation hints

        Returns:
            Failed ValidationResult
        """
        return cls(
            ok=False,
            error=error,
            hints=normalize_hints(hints),
        )

    @classmethod
    def coerce(cls, raw: Any) -> ValidationResult:
        """Normalize whatever a check callable returned.

        Accepts a ValidationResult, an ``(ok[, error[, hints]])`` tuple whose
        first element is a bool, or any other value interpreted by
        truthiness.
        """
        if isinstance(raw, ValidationResult):
            return raw
        if isinstance(raw, tuple) and raw and isinstance(raw[0], bool):
            ok, error, hints = (raw + (None, None))[:3]
            return cls(ok=ok, error=error, hints=hints)
        return cls(ok=bool(raw))

    def format_error(self) -> str:
        """Format the error and hints for display.

        Returns empty string if validation succeeded.
        """
        if self.ok:
            return ""
        lines = [self.error or "Validation failed"]
        for hint in self.hints or ():
            lines.append(f"  hint: {hint}")
        return "\n".join(lines)


def merge_diagnostics(
    inner: ValidationResult,
    fallback_error: str | None,
    fallback_hints: Iterable[str] | None = None,
) -> ValidationResult:
    """Fill in the diagnostics an inner result left absent.

    The inner result's present fields win; the fallbacks only replace
    fields that are None. The pass/fail outcome is never changed.

    Args:
        inner: Result produced by the wrapped check
        fallback_error: Error to use when ``inner.error`` is None
        fallback_hints: Hints to use when ``inner.hints`` is None

    Returns:
        New ValidationResult with merged diagnostics
    """
    error = inner.error if inner.error is not None else fallback_error
    if inner.hints is not None:
        hints = inner.hints
    else:
        hints = normalize_hints(fallback_hints)
    return ValidationResult(ok=inner.ok, error=error, hints=hints)


def normalize_hints(hints: str | Iterable[str] | None) -> tuple[str, ...] | None:
    """Return hints as a tuple, treating a lone string as a single hint."""
    if hints is None:
        return None
    if isinstance(hints, str):
        return (hints,)
    return tuple(hints)
