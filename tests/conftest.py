"""Pytest configuration for tests."""

import pytest


ARTICLE = (
    "Solar power is growing quickly across the world. "
    "Solar panels convert sunlight into electricity without moving parts! "
    "Many households now install solar panels on their roofs. "
    "Wind energy also contributes to the renewable electricity mix. "
    "Batteries store solar electricity for use at night. "
    "Critics point out that manufacturing panels requires energy and materials. "
    "Governments offer incentives that lower the cost of solar installations. "
    "Is solar electricity cheaper than coal in most regions today? "
    "Analysts expect solar capacity to double within a decade. "
    "Grid operators must adapt to variable solar and wind output."
)


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use only asyncio backend."""
    return "asyncio"


@pytest.fixture
def article():
    return ARTICLE
