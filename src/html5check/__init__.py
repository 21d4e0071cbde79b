"""HTML5 conformance assertions for pytest, backed by a Nu validator service."""

from html5check.assertions import DEFAULT_HTML5_WRAPPER, PLACEHOLDER, Html5Assertions
from html5check.core.models import ValidationMessage, ValidationResult
from html5check.core.validator import ValidatorClient

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HTML5_WRAPPER",
    "PLACEHOLDER",
    "Html5Assertions",
    "ValidationMessage",
    "ValidationResult",
    "ValidatorClient",
    "__version__",
]
