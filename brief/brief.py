r"""
Brief: a bag of arguments you can hand around as one object.

Overview
- Brief wraps a keyed or ordered collection of values so it can be passed around as a
  single object, read without existence checks failing loudly, and handed to any
  callable either whole (debrief/passarray) or unpacked (pass_/passkeywords).
- Every value is stored with a key and an order (see brief.store). Keyed reads go
  through aliases (see brief.aliases); reserved keys are refused (see brief.guard).

Reading and writing
- get(key) / brief[key]: the value, or None when the key does not exist. None is the
  only “absent” answer; use has(key) / `key in brief` to tell a stored None apart.
- set(key, value) / brief[key] = value: writes through aliases, so setting an alias
  updates the one shared value. Every write takes the next order number.
- find([key, ...]): first value that is not None, walking the list in order. Falsy
  values (0, "", False) count as found.

Settings (construction keywords; unknown ones are ignored)
- aliases / alias: {"target": "alias"} or {"target": ["alias", ...]}.
- logger: a callable (name, description, snapshot, data), or True for the default
  rich stderr sink (brief.faults.report).
- isempty: a callable predicate receiving a copy of the Brief; replaces the default
  “every value is None” heuristic.

Failure semantics
- Nothing here raises for ordinary misuse. Reserved keys and unusable input are
  reported to the logger (if any) and otherwise ignored; broken or cyclic alias chains
  resolve to nothing.

Quick example:
    >>> from brief import Brief
    >>> arguments = Brief({"real_key": "value"}, aliases={"real_key": ["pointer"]})
    >>> arguments["pointer"]
    'value'
    >>> arguments.pass_(lambda value: value.upper())
    'VALUE'
"""
import builtins
import copy
from collections.abc import Iterable, Mapping

from .aliases import AliasTable
from .faults import InvalidExportError, report
from .guard import PROTECTED, isallowed
from .store import Entry, OrderedStore, iskey, isorder
from .utils import Unset, coalesce
from .workers import Workers


class Brief:
    """
    Argument container: an ordered store, an alias table and a callable registry.

    Construction
    - Brief(items=None, /, **settings)
      • items is a Brief: its exported state is copied into the new instance, then
        settings are applied on top.
      • items is None or a bool: empty, silently.
      • items is a mapping: its items, in order.
      • items is any other non-string iterable: its values, keyed 0..n-1.
      • items is an object with public instance fields: those fields.
      • anything else: empty, reported as "WrongArgumentType".
    - Brief.make(items): like Brief(items), but returns `items` itself when it is
      already a Brief.
    - Brief.empty(**settings): an EmptyBrief.
    """
    __slots__ = ("_store", "_aliases", "_callables")

    def __init__(self, items=None, /, **settings):
        if isinstance(items, Brief):
            self._import(items, settings)
        else:
            self._store = OrderedStore()
            self._aliases = AliasTable()
            self._callables = Workers()
            self.parsesettings(settings)
            self._storemany(self._normalize(items))

    @classmethod
    def make(cls, items=None, /, **settings):
        """
        Create and receive a Brief.

        When given a Brief, return that very Brief (settings are ignored), so wrapping
        is idempotent and never produces nested Briefs.
        """
        if isinstance(items, Brief):
            return items
        return cls(items, **settings)

    @classmethod
    def empty(cls, **settings):
        return EmptyBrief(**settings)

    @classmethod
    def reconstruct(cls, exported, /, **settings):
        """
        Build a new Brief from the output of export().

        Missing or malformed parts of the export are replaced by empty ones; only an
        export that is not a mapping at all is refused.

        Raises
        - InvalidExportError: when `exported` is not a mapping.
        """
        if not isinstance(exported, Mapping):
            raise InvalidExportError("reconstruct() argument must be a mapping")
        self = object.__new__(cls)
        self._restore(exported)
        self.parsesettings(settings)
        return self

    def parsesettings(self, settings, /):
        """
        Apply recognised settings; unknown keys and non-mapping settings are ignored.
        """
        if not settings or not isinstance(settings, Mapping):
            return self

        for key, argument in settings.items():
            match key:
                case "aliases" | "alias":
                    self._aliases.parse(argument)
                case "logger":
                    self._setuplogger(argument)
                case "isempty" | "isEmpty":
                    self._callables.add("isempty", argument)
        return self

    def _setuplogger(self, logger, /):
        if builtins.callable(logger):
            self._callables.add("logger", logger)
        elif logger is True:
            self._callables.add("logger", report)

    def _normalize(self, items, /):
        if items is None or isinstance(items, bool):
            return {}

        if isinstance(items, Mapping):
            return dict(items)

        if isinstance(items, Iterable) and not isinstance(items, str | bytes | bytearray):
            return dict(enumerate(items))

        if fields := _publicfields(items):
            return fields

        self.log("WrongArgumentType", "Did not pass a mapping, an iterable or an object with fields.",
                 {"items": items})
        return {}

    def _storemany(self, values, start=0, /):
        for order, (key, value) in enumerate(values.items(), start):
            self.put(value, key, order)
        return self

    def _authoritative(self, name, /):
        # Direct keys win over aliases.
        if name in self._store:
            return name
        return self._aliases.resolve(name)

    def _resolvekey(self, name, /):
        return name if (key := self._authoritative(name)) is None else key

    def put(self, value, key=Unset, order=Unset, /):
        """
        Store a single value.

        Parameters
        - value: anything.
        - key: str | int. Defaults to the order number.
        - order: non-negative int. Defaults to nextorder().

        Behavior
        - A key that is a known alias is rewritten to its authoritative key.
        - A reserved key (see brief.guard.PROTECTED) is not stored; "ProtectedKeyUsed"
          is reported instead.
        - A key that is neither a string nor an integer, an order that is not a
          non-negative integer, or an order already held by another key is not stored;
          "WrongArgumentType" is reported instead.

        Returns
        - self.
        """
        order = coalesce(order, self._store.nextorder())
        if not isorder(order):
            self.log("WrongArgumentType", "Orders must be non-negative integers.", {"order": order})
            return self

        key = coalesce(key, order)
        if not iskey(key):
            self.log("WrongArgumentType", "Keys must be strings or integers.", {"key": key})
            return self

        if key not in self._store and key in self._aliases:
            key = self._resolvekey(key)

        if not isallowed(key):
            self.log("ProtectedKeyUsed", "This key is protected and cannot be used.",
                     {"key": key, "protected_keys": sorted(PROTECTED)})
            return self

        if (holder := self._store.holder(order)) is not None and holder != key:
            self.log("WrongArgumentType", "This order is already held by another key.",
                     {"key": key, "order": order, "holder": holder})
            return self

        self._store.insert(value, key, order)
        return self

    def get(self, key, /):
        """
        Value stored under `key` (directly or through an alias), None otherwise.
        """
        if (name := self._authoritative(key)) is None:
            return None
        return self._store.lookup(name)

    def set(self, key, value, /):
        """
        Store `value` under `key`, or under the key `key` is an alias of.

        The write always takes the next order number, so overwriting a key moves it to
        the end of the positional order.
        """
        return self.put(value, self._resolvekey(key), self._store.nextorder())

    def delete(self, key, /):
        if (name := self._authoritative(key)) is not None:
            self._store.remove(name)
        return self

    def has(self, key, /):
        return (name := self._authoritative(key)) is not None and name in self._store

    def getaliasedkey(self, alias, /):
        """
        Authoritative key for `alias`.

        Returns
        - False when `alias` is itself a stored key (it is not an alias).
        - None when the alias chain leads nowhere (unknown alias, cycle, reserved key).
        - the authoritative key otherwise. The key need not be stored yet.
        """
        if alias in self._store:
            return False
        return self._aliases.resolve(alias)

    def find(self, keys, /):
        """
        Return the value of the first key that holds something other than None.

        Accepts a single key or a list/tuple of fallback keys. Anything else, or an
        empty list, answers None.
        """
        if isinstance(keys, bool):
            return None
        if isinstance(keys, str | int):
            return self.get(keys)
        if not isinstance(keys, list | tuple):
            return None

        for key in keys:
            if (value := self.get(key)) is not None:
                return value
        return None

    def getordered(self, fill=None, /):
        """
        All values, lowest to highest order, with `fill` in any gap.
        """
        return self._store.ordered(fill)

    def getkeyed(self):
        return self._store.keyed()

    def highestorder(self):
        return self._store.highestorder()

    def lowestorder(self):
        return self._store.lowestorder()

    def nextorder(self):
        return self._store.nextorder()

    def debrief(self, callable, /):
        """
        Call `callable` with this Brief as its only argument.
        """
        return callable(self)

    def pass_(self, callable, /):
        """
        Call `callable` with the ordered values unpacked as positional arguments.

        Gaps in the order are passed as None so positions still line up.
        """
        return callable(*self.getordered())

    def passarray(self, callable, /, keyed=True):
        """
        Call `callable` with all values as one argument: the keyed dict by default,
        the ordered list when `keyed` is false.
        """
        return callable(self.getkeyed() if keyed else self.getordered())

    def passkeywords(self, callable, /):
        """
        Call `callable` with every string-keyed value unpacked as a keyword argument.
        """
        return callable(**{key: value for key, value in self.getkeyed().items() if isinstance(key, str)})

    def transform(self, callable, /):
        """
        Call `callable(value, key, brief)` for every stored item, in place.

        The callable is expected to write back through `brief` itself. Iteration runs
        over a snapshot, so writes made during the walk never disturb it. This changes
        the Brief it is called on; use map() for a changed copy.

        Returns
        - self.
        """
        for key, value in self.getkeyed().items():
            callable(value, key, self)
        return self

    def map(self, callable, /):
        """
        Like transform(), but on a copy; the original is left untouched.
        """
        return copy.copy(self).transform(callable)

    def isempty(self):
        """
        True unless at least one stored value is something other than None.

        A custom `isempty` predicate from the settings replaces this heuristic; it is
        called with a copy of the Brief.
        """
        if self._callables.iscallable("isempty"):
            return bool(self._callables.call("isempty", copy.copy(self)))
        return all(value is None for value in self._store.values())

    def isnotempty(self):
        return not self.isempty()

    def haslogger(self):
        return self._callables.iscallable("logger")

    def log(self, name, description=None, data=None, /):
        """
        Send an event to the configured logger; a no-op without one.

        The logger receives (name, description, snapshot, data) where snapshot is a
        copy of this Brief at the time of the event.
        """
        if not self.haslogger():
            return
        if data is None:
            data = {}
        elif not isinstance(data, Mapping):
            data = {"data": data}
        self._callables.call("logger", name, description, copy.copy(self), dict(data))

    def export(self):
        """
        Copy of the internal state: {"store", "aliases", "callables"}.

        Mostly useful to graft one Brief's state onto a new one (see reconstruct()).
        """
        return {
            "store": {entry.key: entry for entry in self._store.entries()},
            "aliases": self._aliases.export(),
            "callables": self._callables.copy(),
        }

    def _restore(self, exported, /):
        store = exported.get("store")
        aliases = exported.get("aliases")
        callables = exported.get("callables")

        self._store = OrderedStore(_restorable(store.values() if isinstance(store, Mapping) else ()))
        self._aliases = AliasTable(aliases if isinstance(aliases, Mapping) else None)
        if isinstance(callables, Workers):
            self._callables = callables.copy()
        else:
            self._callables = Workers(callables if isinstance(callables, Mapping) else None)

    def _import(self, source, settings, /):
        # Unlike make(), this grafts the source's state onto a brand-new Brief.
        self._restore(source.export())
        self.parsesettings(settings)

    def __copy__(self):
        clone = object.__new__(type(self))
        clone._restore(self.export())
        return clone

    def __deepcopy__(self, memo, /):
        clone = object.__new__(type(self))
        memo[id(self)] = clone
        clone._restore(self.export())
        clone._store = OrderedStore(
            Entry(entry.key, copy.deepcopy(entry.value, memo), entry.order)
            for entry in self._store.entries()
        )
        return clone

    def __getitem__(self, key, /):
        return self.get(key)

    def __setitem__(self, key, value, /):
        self.set(key, value)

    def __delitem__(self, key, /):
        self.delete(key)

    def __contains__(self, key, /):
        return self.has(key)

    def __iter__(self):
        return iter(self._store)

    def __len__(self):
        return len(self._store)

    def __eq__(self, other, /):
        if not isinstance(other, Brief):
            return NotImplemented
        return self._store == other._store and self._aliases == other._aliases

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.getkeyed()!r})"

    def __rich_repr__(self):
        yield from self.getkeyed().items()


class EmptyBrief(Brief):
    """
    A Brief that never receives data: only settings are parsed, so it can never
    report "WrongArgumentType".
    """
    __slots__ = ()

    def __init__(self, **settings):
        self._store = OrderedStore()
        self._aliases = AliasTable()
        self._callables = Workers()
        self.parsesettings(settings)


def _restorable(entries, /):
    # Keep well-formed entries only; the first entry to claim an order keeps it.
    orders = set()
    for entry in entries:
        if not isinstance(entry, tuple) or len(entry) != 3:
            continue
        key, value, order = entry
        if iskey(key) and isallowed(key) and isorder(order) and order not in orders:
            orders.add(order)
            yield Entry(key, value, order)


def _publicfields(object, /):
    if isinstance(object, type):
        return {}
    try:
        fields = vars(object)
    except TypeError:
        return {}
    return {name: value for name, value in fields.items() if isinstance(name, str) and not name.startswith("_")}


__all__ = (
    "Brief",
    "EmptyBrief",
)
