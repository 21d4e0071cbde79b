"""Pytest plugin providing the ``html5`` assertion fixture."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from html5check.assertions import DEFAULT_HTML5_WRAPPER, Html5Assertions
from html5check.core.config.main import Html5CheckConfig
from html5check.core.validator import ValidatorClient

if TYPE_CHECKING:
    from collections.abc import Iterator

    from html5check.pages import PageClient


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("html5check", "HTML5 validation")
    group.addoption(
        "--html5-validator-url",
        dest="html5_validator_url",
        default=None,
        help="URL of the HTML5 validator web service",
    )
    group.addoption(
        "--html5-validator-timeout",
        dest="html5_validator_timeout",
        type=float,
        default=None,
        help="Timeout in seconds for requests to the validator",
    )
    parser.addini("html5_validator_url", "URL of the HTML5 validator web service", default="")
    parser.addini("html5_validator_timeout", "Timeout in seconds for requests to the validator", default="")


def resolve_config(config: pytest.Config) -> Html5CheckConfig:
    """Command line beats ini file, ini file beats html5check.yaml."""
    html5_config = Html5CheckConfig.load_or_default()

    url = config.getoption("html5_validator_url") or config.getini("html5_validator_url")
    if url:
        html5_config.validator.url = url

    timeout = config.getoption("html5_validator_timeout")
    if timeout is None and config.getini("html5_validator_timeout"):
        try:
            timeout = float(config.getini("html5_validator_timeout"))
        except ValueError as e:
            raise pytest.UsageError(f"html5_validator_timeout must be a number: {e}") from e
    if timeout is not None:
        html5_config.validator.timeout = timeout

    return html5_config


@pytest.fixture(scope="session")
def html5_config(pytestconfig: pytest.Config) -> Html5CheckConfig:
    return resolve_config(pytestconfig)


@pytest.fixture(scope="session")
def html5_validator(html5_config: Html5CheckConfig) -> Iterator[ValidatorClient]:
    with ValidatorClient(html5_config.validator.url, timeout=html5_config.validator.timeout) as client:
        yield client


@pytest.fixture
def html5_page_client() -> PageClient | None:
    """Override in a conftest to hand ``html5.get_page`` your application's test client."""
    return None


@pytest.fixture
def html5(
    html5_validator: ValidatorClient,
    html5_page_client: PageClient | None,
    html5_config: Html5CheckConfig,
) -> Html5Assertions:
    return Html5Assertions(
        html5_validator,
        html5_page_client,
        wrapper=html5_config.wrapper or DEFAULT_HTML5_WRAPPER,
        ignored_patterns=html5_config.validator.ignore,
    )
