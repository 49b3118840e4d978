# Debian metadata generator: Control field formatting.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""Formatting of Debian control fields in the :man:`deb822` format."""

# Standard library modules.
import logging

# External dependencies.
from humanfriendly.case import CaseInsensitiveDict
from humanfriendly.text import is_empty_line

# Public identifiers that require documentation.
__all__ = ("Deb822", "dump_deb822", "dump_field", "logger")

# Initialize a logger.
logger = logging.getLogger(__name__)


def dump_deb822(fields):
    """
    Format the given Debian control fields as text.

    :param fields: The control fields to dump (a dictionary, the order of
                   the keys is preserved).
    :returns: A Unicode string containing the formatted control fields (one
              line per field plus any continuation lines, without a
              trailing newline).
    """
    return "\n".join(dump_field(key, value) for key, value in fields.items())


def dump_field(key, value):
    """
    Format a single Debian control field as text.

    :param key: The name of the field (a string).
    :param value: The value of the field. Strings are emitted as is, with
                  multi-line strings folded into continuation lines. Lists
                  and tuples are treated as comma separated relationship
                  fields: A single item is emitted on the same line as the
                  key, two or more items each get their own continuation
                  line with a comma after every item except the last.
    :returns: The formatted field (a string).
    """
    if isinstance(value, (list, tuple)):
        if len(value) == 1:
            return "%s: %s" % (key, value[0])
        lines = ["%s:" % key]
        lines.append(",\n".join(" " + item for item in value))
        return "\n".join(lines)
    # Check for multi-line values.
    if "\n" in value:
        input_lines = value.splitlines()
        output_lines = [input_lines.pop(0)]
        for line in input_lines:
            if not is_empty_line(line):
                # Make sure continuation lines are indented.
                output_lines.append(" " + line)
            else:
                # Encode empty continuation lines as a dot (indented).
                output_lines.append(" .")
        value = "\n".join(output_lines)
    return "%s: %s" % (key, value)


class Deb822(CaseInsensitiveDict):

    """
    Case insensitive dictionary to represent the fields of a :man:`deb822` paragraph.

    The order in which fields are added is the order in which they are
    dumped by :func:`dump()`.
    """

    def dump(self):
        """
        Format the control fields as text.

        :returns: The output of :func:`dump_deb822()`.
        """
        return dump_deb822(self)
