"""
Registry of named callables.

A Brief keeps the callables it needs internally (its diagnostics logger, a custom
emptiness predicate) in a Workers registry. The registry never raises on a missing
handle: call() simply answers None.
"""
import builtins


class Workers:
    __slots__ = ("_workers",)

    def __init__(self, workers=None, /):
        self._workers = {}
        for handle, callable in dict(workers or {}).items():
            self.add(handle, callable)

    def add(self, handle, callable, /):
        """
        Register `callable` under `handle`; non-callables are ignored.
        """
        if builtins.callable(callable):
            self._workers[handle] = callable
        return self

    def remove(self, handle, /):
        self._workers.pop(handle, None)
        return self

    def get(self, handle, /):
        return self._workers.get(handle)

    def isset(self, handle, /):
        return handle in self._workers

    def iscallable(self, handle, /):
        return self.isset(handle) and builtins.callable(self._workers[handle])

    def call(self, handle, /, *arguments, **keywords):
        """
        Call the callable registered under `handle`; None if there is none.
        """
        if self.iscallable(handle):
            return self._workers[handle](*arguments, **keywords)
        return None

    def copy(self):
        return type(self)(self._workers)

    def export(self):
        return dict(self._workers)

    def __contains__(self, handle, /):
        return self.isset(handle)

    def __len__(self):
        return len(self._workers)

    def __eq__(self, other, /):
        if not isinstance(other, Workers):
            return NotImplemented
        return self._workers == other._workers

    __hash__ = None

    def __repr__(self):
        return f"workers({', '.join(self._workers)})"

    def __rich_repr__(self):
        yield from self._workers.items()


__all__ = (
    "Workers",
)
