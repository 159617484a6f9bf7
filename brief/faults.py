"""
Brief faults (recoverable events) and their rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for the events a Brief reports on
  its own. Manual events sent through Brief.log() may use any name and carry no code.
- Diagnostic: one reported event (name, description, snapshot, data). It renders itself
  with rich for the console and as a plain " :: "-joined line for everything else.
- report(): the default diagnostics sink, used when a Brief is built with logger=True.
  It prints the rendered Diagnostic on stderr.
- BriefError / InvalidExportError: the few programmer errors that are raised. Data-shape
  problems (wrong input types, reserved keys, broken alias chains) are never raised;
  they are reported and recovered from.

Integration
- The host application may remap codes with a __codes__ mapping in __main__, restyle the
  output with __styles__, and rename the header with __prog__.
"""
import re
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.pretty import Pretty
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical codes for the events a brief reports by itself.

    grouping
    - keys (2110x)
      • PROTECTED_KEY_USED: a reserved name was used as a storage key.
      • WRONG_ARGUMENT_TYPE: construction input (or a key) had an unusable type.

    each member's name is the upper-snake spelling of the event name handed to the
    logger (e.g., PROTECTED_KEY_USED ↔ "ProtectedKeyUsed").
    """
    PROTECTED_KEY_USED  = 21101
    WRONG_ARGUMENT_TYPE = 21102

    @property
    def event(self):
        """
        the event name a logger receives for this code.
        """
        return "".join(part.title() for part in self.name.split("_"))

    @classmethod
    def lookup(cls, event, /):
        """
        return the code for an event name, or None for events without one.
        """
        if not isinstance(event, str):
            return None
        try:
            return cls[re.sub(r"(?<!^)(?=[A-Z])", r"_", event).upper()]
        except KeyError:
            return None

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class Diagnostic:
    """
    A single reported event.

    Attributes
    - name: event name (e.g., "ProtectedKeyUsed").
    - description: one-sentence explanation, or None.
    - snapshot: a copy of the reporting Brief at the time of the event, or None.
    - data: read-only mapping of event details.
    - code: the FaultCode for known events, None for manual ones.
    """

    def __init__(self, name, description=None, /, snapshot=None, data=None):
        self.name = name
        self.description = description
        self.snapshot = snapshot
        self.data = MappingProxyType(dict(data or {}))
        self.code = FaultCode.lookup(name)

    @property
    def title(self):
        return re.sub(r"(?<!^)(?=[A-Z])", " ", str(self.name)).lower()

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code
            "title": "bold #FFC2E0",  # soft pinky title

            # body
            "message": "#D6D6DE",  # light gray body
        } | getattr(main, "__styles__", {}))

        label = self.code.normalize() if self.code is not None else "log"
        header = Text.assemble(
            "[ ",
            (getattr(main, "__prog__", "brief"), styles["prog-name"]),
            " — ",
            (label, styles["code"]),
            " | ",
            (self.title, styles["title"]),
            " ]",
        )
        renders = [header]
        if self.description:
            renders.append(Text(str(self.description), styles["message"]))
        if self.data:
            renders.append(Pretty(dict(self.data)))
        return Group(*renders)

    def __str__(self):
        return " :: ".join(filter(None, (
            str(self.name),
            self.description and str(self.description),
            repr(dict(self.data)) if self.data else None,
        )))

    def __repr__(self):
        return f"diagnostic({self.name!r}, {self.description!r}, data={dict(self.data)!r})"

    def __rich_repr__(self):
        yield self.name
        yield "description", self.description, None
        yield "data", dict(self.data), {}


def report(name, description=None, snapshot=None, data=None, /):
    """
    default diagnostics sink: render the event on the stderr console.

    contract
    - same signature as any logger a brief accepts: (name, description, snapshot, data).
    - never raises for the event's content; return value is ignored by callers.
    """
    console.print(Diagnostic(name, description, snapshot=snapshot, data=data))


class BriefError(Exception):
    """
    base type for errors brief raises on programmer mistakes.
    """


class InvalidExportError(BriefError, TypeError):
    """
    raised by Brief.reconstruct() when the exported state is not a mapping.
    """


__all__ = (
    "FaultCode",
    "Diagnostic",
    "BriefError",
    "InvalidExportError",
    "report",
)
