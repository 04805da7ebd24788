from typing import Any

from ._async_helper import run_async
from ._operation import Operation
from .exceptions import BaseError


class Provider:
    __component__: Any
    __type__: str

    def __init__(self, **kwargs):
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __setup__(self) -> None:
        pass

    async def __asetup__(self) -> None:
        await run_async(func=self.__setup__)

    def __run__(self, operation: Operation, **kwargs) -> Any:
        func = getattr(self, operation.name or "", None)
        if func is None or not callable(func):
            raise BaseError(
                f"{self.__class__.__name__} does not support "
                f"operation {operation.name}"
            )
        if operation.name != "close":
            self.__setup__()
        return func(**(operation.args or {}))

    async def __arun__(self, operation: Operation, **kwargs) -> Any:
        afunc = getattr(self, f"a{operation.name}", None)
        if afunc is not None and callable(afunc):
            await self.__asetup__()
            return await afunc(**(operation.args or {}))

        return await run_async(self.__run__, operation, **kwargs)
