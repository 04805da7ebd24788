__all__ = [
    "BaseError",
    "DataError",
    "EmptyResultError",
    "RegistryError",
    "UserCancelled",
]


class BaseError(Exception):
    exit_code: int = 1


class RegistryError(BaseError):
    """Remote registry call failed."""


class DataError(BaseError):
    """Registry response is missing a required field."""


class EmptyResultError(BaseError):
    """Listing returned nothing to select from."""


class UserCancelled(BaseError):
    exit_code = 130
