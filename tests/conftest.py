import pytest
import typing

from handlekit import Container


@pytest.fixture
def context() -> dict[str, typing.Any]:
    return {"organization": "Acme Corp", "environment": "production"}


@pytest.fixture
def container(context: dict[str, typing.Any]) -> Container:
    return Container(context)
