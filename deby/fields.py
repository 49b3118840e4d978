# Debian metadata generator: Enumerated control field values.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Closed sets of values for Debian changelog and control fields.

Each enumeration maps its members to the lowercase string that Debian
packaging conventions use for them (for example :attr:`Priority.OPTIONAL`
is rendered as ``optional``). Parsing is strict: only these exact strings
are accepted by :meth:`~DebianChoice.parse()`.
"""

# Standard library modules.
import enum

# External dependencies.
from humanfriendly.text import compact, concatenate

# Public identifiers that require documentation.
__all__ = (
    "Architecture",
    "DebianChoice",
    "Distribution",
    "Priority",
    "Urgency",
)


class DebianChoice(enum.Enum):

    """Base class for enumerations that render as their lowercase Debian spelling."""

    @classmethod
    def parse(cls, value):
        """
        Convert a string to an enumeration member.

        :param value: The Debian spelling of a member (a string).
        :returns: The matching member.
        :raises: :exc:`~exceptions.ValueError` when `value` doesn't match
                 any member exactly (matching is case sensitive).
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(compact(
                "Invalid {kind} {value}! (expected {choices})",
                kind=cls.__name__.lower(),
                value=repr(value),
                choices=concatenate([repr(m.value) for m in cls], conjunction='or'),
            )) from e

    def __str__(self):
        """Render the member as it appears in Debian control files (a string)."""
        return self.value


class Priority(DebianChoice):

    """The ``Priority`` field of source and binary stanzas."""

    REQUIRED = 'required'
    IMPORTANT = 'important'
    STANDARD = 'standard'
    OPTIONAL = 'optional'
    EXTRA = 'extra'


class Architecture(DebianChoice):

    """The ``Architecture`` field of binary stanzas."""

    ALL = 'all'
    ANY = 'any'


class Urgency(DebianChoice):

    """The ``urgency=`` keyword of changelog entries."""

    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    EMERGENCY = 'emergency'
    CRITICAL = 'critical'


class Distribution(DebianChoice):

    """The target distribution of changelog entries."""

    UNSTABLE = 'unstable'
    EXPERIMENTAL = 'experimental'
