"""
Reserved-key policy.

A Brief keeps its own state under a handful of well-known names. Those names are
reserved: they can never be used as user keys, nor as alias names or alias targets.
The check is a plain, case-sensitive set-membership test.
"""

PROTECTED = frozenset((
    "protected",
    "store",
    "aliases",
    "logger",
    "callables",
))


def isallowed(key, /):
    """
    Return True when `key` may be used as a user key.

    Unhashable keys cannot collide with a reserved name and are reported as allowed;
    rejecting them on type grounds is the caller's business.
    """
    try:
        return key not in PROTECTED
    except TypeError:
        return True


__all__ = (
    "PROTECTED",
    "isallowed",
)
