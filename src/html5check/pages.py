"""Shape of the application test client consumed by ``Html5Assertions.get_page``.

``httpx.Client``, Starlette/FastAPI ``TestClient`` and ``requests.Session``
all satisfy these protocols as they are.
"""

from __future__ import annotations

from typing import Protocol


class PageResponse(Protocol):
    status_code: int

    @property
    def text(self) -> str: ...


class PageClient(Protocol):
    def request(self, method: str, url: str) -> PageResponse: ...


def is_successful(response: PageResponse) -> bool:
    return 200 <= response.status_code < 300
