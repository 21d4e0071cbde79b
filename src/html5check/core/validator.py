"""HTTP access to a Nu (validator.nu) compatible HTML5 validation service.

Web service interface: https://github.com/validator/validator/wiki/Service-%C2%BB-Input-%C2%BB-POST-body
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Self

import httpx
from pydantic import ValidationError

from html5check.core.models import ValidationResult
from html5check.errors import MalformedValidatorResponseError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ValidatorClient:
    """Talks to one validator endpoint.

    Availability is probed lazily and remembered, so constructing a client
    never touches the network.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)
        self._available: bool | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    def is_available(self) -> bool:
        """Probe the endpoint with a GET, once. Any HTTP answer counts as available."""
        if self._available is None:
            self._available = self._probe()
        return self._available

    def refresh_availability(self) -> bool:
        self._available = None
        return self.is_available()

    def _probe(self) -> bool:
        try:
            response = self._http.get(self._url, timeout=self._timeout)
        except httpx.TransportError as e:
            logger.warning("HTML5 validator not reachable at %s: %s", self._url, e)
            return False

        logger.debug("HTML5 validator at %s answered probe with %s", self._url, response.status_code)
        return True

    def validate(self, content: str) -> ValidationResult | None:
        """Validate ``content`` and return the decoded result.

        Returns ``None`` when the service cannot be reached. Raises
        MalformedValidatorResponseError when the answer is not a message list.
        """
        try:
            response = self._http.post(
                self._url,
                data={"out": "json", "parser": "html5", "content": content},
                timeout=self._timeout,
            )
        except httpx.TransportError as e:
            logger.warning("HTML5 validation request to %s failed: %s", self._url, e)
            return None

        body = response.text
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise MalformedValidatorResponseError(
                f"Validator returned non-JSON body (HTTP {response.status_code})", body
            ) from e

        try:
            result = ValidationResult.model_validate(payload)
        except ValidationError as e:
            raise MalformedValidatorResponseError("Validator response has no message list", body) from e

        logger.debug(
            "Validated %d characters: %d messages, %d errors",
            len(content),
            len(result.messages),
            len(result.errors),
        )
        return result

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
