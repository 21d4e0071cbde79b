from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from html5check.core.models import ValidationMessage, ValidationResult

# The validator flags the Facebook login widget markup as an error.
DEFAULT_IGNORED_PATTERNS: tuple[str, ...] = ("fb:login-button",)


def compile_ignored_patterns(patterns: Iterable[str | re.Pattern[str]]) -> tuple[re.Pattern[str], ...]:
    """Compile ignore patterns, raising ValueError for an invalid regex."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ValueError(f"Invalid ignore pattern {pattern!r}: {e}") from e
    return tuple(compiled)


def qualifying_errors(
    result: ValidationResult,
    ignored_patterns: Iterable[str | re.Pattern[str]] = DEFAULT_IGNORED_PATTERNS,
) -> list[ValidationMessage]:
    """Return the error rows that should fail a test.

    Only rows typed exactly "error" are considered; rows whose message
    matches any of ``ignored_patterns`` (regex search) are dropped.
    """
    compiled = compile_ignored_patterns(ignored_patterns)
    return [
        row
        for row in result.errors
        if not any(pattern.search(row.message) for pattern in compiled)
    ]


def format_failure(errors: Iterable[ValidationMessage], message: str = "") -> str:
    text = "HTML5 validation failed"
    if message:
        text += f" [{message}]"
    text += ":\n"
    for row in errors:
        line = "?" if row.last_line is None else row.last_line
        text += f"  Line {line}: {row.message}\n"
    return text
