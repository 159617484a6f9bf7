"""
Alias table and chain resolution.

An alias table maps alternate names to target names. Targets may themselves be
aliases, so a lookup follows the chain until it reaches a name that is not an alias:
that last name is the authoritative key.

Declarations
- Aliases are declared per target: {"target": "alias"} or {"target": ["a", "b"]}.
- Each declaration group is inverted into alias → target pairs and merged on top of
  the existing table (additive; later declarations win per alias).
- Values that are neither a string nor a list/tuple are skipped, as are non-string
  alias names and reserved names (see brief.guard).

Cycles
- The table is a directed graph and may contain cycles (a → b, b → a). resolve()
  walks iteratively and gives up once the chain grows longer than the table itself,
  so it always terminates and never raises.
"""
from collections.abc import Mapping

from .guard import isallowed
from .utils import mirror


class AliasTable:
    """
    Mapping of alias → target with cycle-safe resolution.

    Properties
    - table: a copy of the alias → target mapping (read-only view of internal state).
    """
    __slots__ = ("_table",)

    table = mirror("table")

    def __init__(self, table=None, /):
        self._table = {}
        if isinstance(table, Mapping):
            for alias, target in table.items():
                if isinstance(alias, str) and isinstance(target, str) and isallowed(alias) and isallowed(target):
                    self._table[alias] = target

    def parse(self, declarations, /):
        """
        Merge a group of target → alias(es) declarations into the table.

        Returns
        - self, for chaining.
        """
        if not declarations or not isinstance(declarations, Mapping):
            return self

        compiled = {}
        for target, terms in declarations.items():
            if isinstance(terms, str):
                terms = [terms]
            if not isinstance(terms, list | tuple):
                continue
            if not isinstance(target, str) or not isallowed(target):
                continue
            for alias in terms:
                if isinstance(alias, str) and isallowed(alias):
                    compiled[alias] = target

        self._table |= compiled
        return self

    def resolve(self, name, /):
        """
        Collapse an alias chain and return the authoritative key, or None.

        None means one of:
        - `name` is not an alias at all (first lookup misses, chain is empty);
        - the chain grew longer than the table (a cycle);
        - the chain ends on a reserved name.
        """
        chain = []
        current = name
        while True:
            if len(chain) > len(self._table):
                # Longer than the table itself: this is a cycle.
                return None
            try:
                target = self._table[current]
            except (KeyError, TypeError):
                break
            chain.append(target)
            current = target

        if not chain:
            return None

        final = chain.pop()
        if not isinstance(final, str) or not isallowed(final):
            return None
        return final

    def copy(self):
        return type(self)(self._table)

    def export(self):
        return dict(self._table)

    def __contains__(self, name, /):
        try:
            return name in self._table
        except TypeError:
            return False

    def __getitem__(self, name, /):
        return self._table[name]

    def __iter__(self):
        return iter(dict(self._table))

    def __len__(self):
        return len(self._table)

    def __eq__(self, other, /):
        if not isinstance(other, AliasTable):
            return NotImplemented
        return self._table == other._table

    __hash__ = None

    def __repr__(self):
        return f"alias-table({self._table!r})"

    def __rich_repr__(self):
        yield from self._table.items()


__all__ = (
    "AliasTable",
)
