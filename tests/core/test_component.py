import pytest

from ecrtag.core import Component, Provider, Response, operation
from ecrtag.core.exceptions import BaseError


class EchoProvider(Provider):
    def __init__(self, prefix: str = "", **kwargs):
        self.prefix = prefix
        self.setups = 0
        super().__init__(**kwargs)

    def __setup__(self) -> None:
        self.setups += 1

    def echo(self, value: str, suffix: str | None = None) -> Response[str]:
        return Response(result=f"{self.prefix}{value}{suffix or ''}")

    async def ashout(self, value: str) -> Response[str]:
        return Response(result=value.upper())


class Echo(Component):
    @operation()
    def echo(self, value: str, suffix: str | None = None) -> Response[str]:
        ...

    @operation()
    def missing(self) -> Response[None]:
        ...

    @operation()
    def unbound(self, value: str) -> str:
        return f"local {value}"

    @operation()
    async def aecho(
        self, value: str, suffix: str | None = None
    ) -> Response[str]:
        ...

    @operation()
    async def ashout(self, value: str) -> Response[str]:
        ...


def test_operation_runs_on_provider():
    provider = EchoProvider(prefix="> ")
    component = Echo(__provider__=provider)
    assert provider.__component__ is component
    assert component.echo("hi").result == "> hi"
    assert component.echo(value="hi", suffix="!").result == "> hi!"
    assert provider.setups == 2


def test_unsupported_operation():
    component = Echo(__provider__=EchoProvider())
    with pytest.raises(BaseError):
        component.missing()


def test_operation_without_provider_runs_locally():
    assert Echo().unbound("call") == "local call"


@pytest.mark.asyncio
async def test_async_operation_falls_back_to_sync():
    component = Echo(__provider__=EchoProvider(prefix="> "))
    res = await component.aecho(value="hi")
    assert res.result == "> hi"


@pytest.mark.asyncio
async def test_async_operation_on_provider():
    provider = EchoProvider()
    component = Echo(__provider__=provider)
    res = await component.ashout(value="hi")
    assert res.result == "HI"
    assert provider.setups == 1


def test_bind_unknown_provider():
    from ecrtag.registry import ContainerRegistry

    with pytest.raises(BaseError):
        ContainerRegistry(__provider__="no_such_registry")
