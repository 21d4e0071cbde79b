"""HTML5 validity assertions.

Every assertion ends in one of three pytest outcomes: it returns (pass),
calls ``pytest.fail`` (fail), or calls ``pytest.skip`` when the validator
service cannot be reached (incomplete).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, NoReturn

import pytest

from html5check.core.report import (
    DEFAULT_IGNORED_PATTERNS,
    compile_ignored_patterns,
    format_failure,
    qualifying_errors,
)
from html5check.errors import MalformedValidatorResponseError, MissingPageClientError
from html5check.pages import is_successful

if TYPE_CHECKING:
    from collections.abc import Iterable

    from html5check.core.models import ValidationResult
    from html5check.core.validator import ValidatorClient
    from html5check.pages import PageClient

PLACEHOLDER = "<<CONTENT>>"

DEFAULT_HTML5_WRAPPER = """<!DOCTYPE html>
<html>
<head>
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8">
    <title></title>
</head>
<body>
<<CONTENT>>
</body>
</html>"""


class Html5Assertions:
    """HTML5 assertions bound to a validator and, optionally, an application client."""

    def __init__(
        self,
        validator: ValidatorClient,
        page_client: PageClient | None = None,
        *,
        wrapper: str = DEFAULT_HTML5_WRAPPER,
        ignored_patterns: Iterable[str] = DEFAULT_IGNORED_PATTERNS,
    ) -> None:
        self.validator = validator
        self.page_client = page_client
        self.wrapper = wrapper
        self.ignored_patterns = tuple(ignored_patterns)
        self._ignored = compile_ignored_patterns(self.ignored_patterns)

    def set_html5_wrapper(self, wrapper: str) -> None:
        """Use a custom document around snippets.

        The wrapper should be valid HTML5 containing the ``<<CONTENT>>``
        placeholder, which is replaced by the snippet before validation.
        """
        self.wrapper = wrapper

    def wrap_snippet(self, snippet: str) -> str:
        return self.wrapper.replace(PLACEHOLDER, snippet, 1)

    def validate_html5(self, content: str) -> ValidationResult | None:
        return self.validator.validate(content)

    def _mark_incomplete(self) -> NoReturn:
        pytest.skip(f"HTML5 Validator service not found at '{self.validator.url}' !")

    def assert_is_valid_html5(self, content: str, message: str = "") -> None:
        """Assert that ``content`` is a valid HTML5 document.

        This knows nothing about where the content came from, so pass the
        page URL or similar through ``message``; it is shown alongside the
        error summary when the assertion fails.
        """
        if not self.validator.is_available():
            self._mark_incomplete()

        try:
            result = self.validate_html5(content)
        except MalformedValidatorResponseError as e:
            pytest.fail(f"HTML5 validator returned an unexpected response: {e}")

        if result is None:
            self._mark_incomplete()

        errors = qualifying_errors(result, self._ignored)
        if errors:
            pytest.fail(format_failure(errors, message))

    def assert_is_valid_html5_snippet(self, snippet: str, message: str = "") -> None:
        """Assert that ``snippet`` is valid once placed inside the HTML5 wrapper."""
        self.assert_is_valid_html5(self.wrap_snippet(snippet), message)

    def assert_is_valid_html5_ajax_response(self, json_response: str, message: str = "") -> None:
        """Assert that the ``response[0].html`` field of an AJAX reply is a valid snippet."""
        html = _extract_ajax_html(json_response)
        if html is None:
            pytest.fail("Invalid JSON response!")

        self.assert_is_valid_html5_snippet(html, message)

    def get_page(self, relative_url: str, method: str = "GET") -> str:
        """Request a page from the application and assert the response is 2xx."""
        if self.page_client is None:
            raise MissingPageClientError("get_page() needs a page client; override the html5_page_client fixture")

        response = self.page_client.request(method, relative_url)
        if not is_successful(response):
            pytest.fail(f"{method} {relative_url} returned HTTP {response.status_code}")

        return response.text


def _extract_ajax_html(json_response: str) -> str | None:
    try:
        decoded: Any = json.loads(json_response)
    except (TypeError, ValueError):
        return None

    if not isinstance(decoded, dict):
        return None
    rows = decoded.get("response")
    if not isinstance(rows, list) or not rows:
        return None
    first = rows[0]
    if not isinstance(first, dict):
        return None
    html = first.get("html")
    return html if isinstance(html, str) else None
