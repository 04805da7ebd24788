import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from ._operation import Operation

T = TypeVar("T", bound=Callable[..., Any])


def operation(**config: Any) -> Callable[[T], T]:
    """Route a component method to its bound provider.

    Sync methods run the provider's method of the same name. Async methods
    (``a`` prefix) run the provider's async twin, or the sync method in a
    worker thread when the provider has none.
    """

    def decorator(func: T) -> T:
        setattr(func, "__operation__", True)
        setattr(func, "__config__", config)
        if not inspect.iscoroutinefunction(func):

            @wraps(func)
            def wrapper(*args, **kwargs) -> Any:
                self = args[0]
                if not hasattr(self, "__provider__"):
                    return func(*args, **kwargs)
                operation = _bind_operation(func, func.__name__, args, kwargs)
                return self.__run__(operation)

            return cast(T, wrapper)

        @wraps(func)
        async def awrapper(*args, **kwargs) -> Any:
            self = args[0]
            if not hasattr(self, "__provider__"):
                return await func(*args, **kwargs)
            operation = _bind_operation(func, func.__name__[1:], args, kwargs)
            return await self.__arun__(operation)

        return cast(T, awrapper)

    return decorator


def _bind_operation(
    func: Callable[..., Any],
    name: str,
    args: tuple,
    kwargs: dict,
) -> Operation:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()
    locals = dict(bound_args.arguments)
    locals.pop("self", None)
    return Operation.normalize(name=name, args=locals)
