from __future__ import annotations

import importlib
import inspect
from typing import Any

from ._operation import Operation
from ._provider import Provider
from .exceptions import BaseError


class Component:
    __provider__: Provider
    __type__: str

    def __init__(self, **kwargs):
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        if "__provider__" in kwargs:
            self.__bind__(kwargs.pop("__provider__"))

    def __bind__(self, provider: Provider | dict | str | None) -> None:
        if provider is None:
            return
        if isinstance(provider, Provider):
            provider.__component__ = self
            self.__provider__ = provider
            return
        if isinstance(provider, dict):
            provider = dict(provider)
            type = provider.pop("type")
            parameters = provider.pop("parameters", dict())
        else:
            type = provider
            parameters = dict()
        module_name = self.__class__.__module__.rsplit(".", 1)[0]
        self.__bind__(
            load_provider_instance(
                path=f"{module_name}.providers.{type}",
                parameters=parameters,
            )
        )

    def __setup__(self) -> None:
        self.__provider__.__setup__()

    async def __asetup__(self) -> None:
        await self.__provider__.__asetup__()

    def __run__(self, operation: Operation, **kwargs) -> Any:
        return self.__provider__.__run__(operation=operation, **kwargs)

    async def __arun__(self, operation: Operation, **kwargs) -> Any:
        return await self.__provider__.__arun__(operation=operation, **kwargs)


def load_provider_instance(
    path: str,
    parameters: dict[str, Any] | None = None,
) -> Provider:
    """Import a provider module and instantiate its provider class.

    The class is the first name in the module's ``__all__``, falling back to
    the first ``Provider`` subclass defined in the module.
    """
    try:
        module = importlib.import_module(path)
    except ModuleNotFoundError as e:
        raise BaseError(f"Provider {path} not found") from e

    provider_class = None
    names = getattr(module, "__all__", None)
    if names:
        provider_class = getattr(module, names[0], None)
    if provider_class is None:
        for _, value in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(value, Provider)
                and value is not Provider
                and value.__module__ == module.__name__
            ):
                provider_class = value
                break
    if provider_class is None:
        raise BaseError(f"No provider class in {path}")
    return provider_class(**(parameters or {}))
