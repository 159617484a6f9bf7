"""
Ordered key/value storage.

Every stored value is an Entry: the value, the key it is stored under, and an integer
order used for positional unpacking. Keys are unique; orders are unique when they are
assigned but need not stay contiguous: overwriting a key through the container moves it
to the end of the order, and deleting a key leaves a hole. ordered() papers over those
holes with a fill value so that positional calls still line up.

Limits on an empty store
- highestorder() is -1, lowestorder() is 0, so nextorder() is 0 and ordered() is [].
"""
from typing import NamedTuple

from .utils import Unset, coalesce


class Entry(NamedTuple):
    """
    One stored value.

    Entries are immutable; overwriting a key replaces its Entry, which keeps copies of a
    store independent without copying the Entries themselves.
    """
    key: str | int
    value: object
    order: int


def iskey(key, /):
    """
    Return True when `key` can name an Entry: a string or a non-bool integer.
    """
    return isinstance(key, str | int) and not isinstance(key, bool)


def isorder(order, /):
    """
    Return True when `order` can position an Entry: a non-negative, non-bool integer.
    """
    return isinstance(order, int) and not isinstance(order, bool) and order >= 0


class OrderedStore:
    """
    Key → Entry table with order-aware views.

    The store is policy-free: it does not know about reserved keys, aliases or
    diagnostics. Those live one layer up, in Brief.
    """
    __slots__ = ("_entries",)

    def __init__(self, entries=None, /):
        self._entries = {}
        for entry in entries or ():
            entry = Entry(*entry)
            self._entries[entry.key] = entry

    def insert(self, value, key=Unset, order=Unset, /):
        """
        Store `value` under `key` at position `order`.

        A missing order becomes nextorder(); a missing key becomes the order number.
        Re-inserting an existing key replaces its Entry in place (the key keeps its
        position in keyed views).

        Returns
        - the stored Entry.
        """
        order = coalesce(order, self.nextorder())
        key = coalesce(key, order)
        entry = self._entries[key] = Entry(key, value, order)
        return entry

    def lookup(self, key, default=None, /):
        try:
            return self._entries[key].value
        except (KeyError, TypeError):
            return default

    def remove(self, key, /):
        try:
            del self._entries[key]
        except (KeyError, TypeError):
            pass

    def holder(self, order, /):
        """
        Key of the Entry at `order`, None when the position is free.
        """
        for entry in self._entries.values():
            if entry.order == order:
                return entry.key
        return None

    def entries(self):
        return list(self._entries.values())

    def keys(self):
        return list(self._entries)

    def values(self):
        return [entry.value for entry in self._entries.values()]

    def sortedbyorder(self):
        return sorted(self._entries.values(), key=lambda entry: entry.order)

    def highestorder(self):
        return max((entry.order for entry in self._entries.values()), default=-1)

    def lowestorder(self):
        return min((entry.order for entry in self._entries.values()), default=0)

    def nextorder(self):
        return self.highestorder() + 1

    def ordered(self, fill=None, /):
        """
        Return values as a dense list, lowest to highest order, gaps set to `fill`.
        """
        if not self._entries:
            return []
        byorder = {entry.order: entry.value for entry in self._entries.values()}
        return [
            byorder.get(order, fill)
            for order in range(self.lowestorder(), self.highestorder() + 1)
        ]

    def keyed(self):
        return {key: entry.value for key, entry in self._entries.items()}

    def copy(self):
        return type(self)(self._entries.values())

    def __contains__(self, key, /):
        try:
            return key in self._entries
        except TypeError:
            return False

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other, /):
        if not isinstance(other, OrderedStore):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None

    def __repr__(self):
        return f"ordered-store({', '.join(map(repr, self.sortedbyorder()))})"

    def __rich_repr__(self):
        for entry in self.sortedbyorder():
            yield entry.key, entry.value


__all__ = (
    "Entry",
    "OrderedStore",
    "iskey",
    "isorder",
)
