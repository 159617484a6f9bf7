"""
Registration helpers for host applications.

A host that wires services by name (a plain dict, a registry object, a DI container
exposing item assignment) can bind one shared, pre-built EmptyBrief under a handle.
provide() is cached, so every resolution yields the same instance per process.

Example
    >>> services = {}
    >>> register(services)["brief"]() is provide()
    True
"""
import functools
from collections.abc import MutableMapping

from .brief import EmptyBrief


@functools.cache
def provide():
    """
    Return the process-wide EmptyBrief (built on first call).
    """
    return EmptyBrief()


def register(container, /, name="brief"):
    """
    Bind provide() under `name` in `container` and return the container.

    The container may be any mutable mapping, or any object exposing a
    `register(name, factory)` method.

    Raises
    - TypeError: when the container supports neither form.
    """
    if not isinstance(name, str):
        raise TypeError("register() name must be a string")
    if isinstance(container, MutableMapping):
        container[name] = provide
    elif callable(getattr(container, "register", None)):
        container.register(name, provide)
    else:
        raise TypeError("register() argument must be a mutable mapping or expose register()")
    return container


__all__ = (
    "provide",
    "register",
)
