# app/errors.py


class TypetrainerError(Exception):
    """Base class for every error the trainer raises on purpose."""


class InvalidArgument(TypetrainerError, ValueError):
    pass


class ConfigError(TypetrainerError):
    pass
