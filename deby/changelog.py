# Debian metadata generator: Changelog entries.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Generation of ``debian/changelog`` entries.

New entries are always added at the top of the changelog (newest first) and
look like this:

.. code-block:: none

   foo (1.2.3) unstable; urgency=low

     * fix bug

    -- A <a@x.com>  Tue, 1 Jul 2003 08:52:37 +0000

The date is always reported in UTC, so that the output of the same run on
machines with different time zone settings is identical.
"""

# Standard library modules.
import datetime
import email.utils
import logging

# External dependencies.
from humanfriendly import format_path
from humanfriendly.text import compact, is_empty_line

# Modules included in our package.
from deby.config import CHANGELOG_FILE, find_project_file
from deby.exceptions import ChangelogOpenError, ChangelogReadError, ChangelogWriteError
from deby.utils import read_existing_file, write_text_file

# Public identifiers that require documentation.
__all__ = (
    "SKIPPED_MESSAGE",
    "SUCCESS_MESSAGE",
    "format_changelog_entry",
    "format_changes",
    "format_contents",
    "format_date",
    "logger",
    "render_changelog",
)

# Initialize a logger.
logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "debian/changelog file not updated due to config file setting"
"""The status message returned when the configuration disables changelog updates (a string)."""

SUCCESS_MESSAGE = "Successfully created a new entry in debian/changelog file"
"""The status message returned after a changelog entry was added (a string)."""


def render_changelog(config, version, changes, directory=None):
    """
    Add a new entry to the top of ``debian/changelog``.

    :param config: A :class:`.Configuration` object.
    :param version: The version number of the new entry (a string).
    :param changes: Notes about the changes in this version (a string, each
                    line becomes a bullet point).
    :param directory: The project directory (a string, defaults to the
                      current working directory). The ``debian/``
                      directory is expected to exist.
    :returns: :data:`SUCCESS_MESSAGE` or :data:`SKIPPED_MESSAGE` (when the
              ``changelog.update`` option is disabled, in which case the
              file system isn't touched at all).
    :raises: :exc:`.ChangelogReadError` when the existing changelog can't be
             read, :exc:`.ChangelogOpenError` or :exc:`.ChangelogWriteError`
             when the new changelog can't be written.
    """
    settings = config.changelog
    if not settings.update:
        logger.info("Not updating %s (disabled in configuration).", CHANGELOG_FILE)
        return SKIPPED_MESSAGE
    filename = find_project_file(CHANGELOG_FILE, directory)
    try:
        current = read_existing_file(filename)
    except (OSError, UnicodeDecodeError) as e:
        raise ChangelogReadError(compact(
            "Failed to read existing changelog {filename}! ({error})",
            filename=format_path(filename),
            error=e,
        ), filename=filename) from e
    entry = format_changelog_entry(settings, version, format_changes(changes))
    write_text_file(filename, format_contents(entry, current), ChangelogOpenError, ChangelogWriteError)
    logger.info("Added entry for %s %s to %s.", settings.package, version, format_path(filename))
    return SUCCESS_MESSAGE


def format_changes(changes):
    """
    Format change notes as a bullet list.

    :param changes: The change notes (a string).
    :returns: A string with one ``  * `` prefixed line for every non-empty
              line in `changes` (an empty string when there are none).
    """
    return "\n".join("  * %s" % line for line in changes.splitlines() if not is_empty_line(line))


def format_changelog_entry(settings, version, changes, date=None):
    """
    Format a single changelog entry.

    :param settings: A :class:`.ChangelogSettings` object.
    :param version: The version number of the entry (a string).
    :param changes: The bullet list generated by :func:`format_changes()`.
    :param date: The date of the entry (a string, defaults to the result of
                 :func:`format_date()`).
    :returns: The changelog entry (a string without a trailing newline).
    """
    return "\n".join([
        "%s (%s) %s; urgency=%s" % (settings.package, version, settings.distribution, settings.urgency),
        "",
        changes,
        "",
        " -- %s  %s" % (settings.maintainer, date or format_date()),
    ])


def format_contents(entry, current):
    """
    Put a new entry in front of the existing changelog entries.

    :param entry: The new entry (a string).
    :param current: The previous contents of the changelog (a string).
    :returns: The new contents of the changelog (a string): The new entry
              and the existing contents separated by one empty line, with
              leading and trailing whitespace removed and a single trailing
              newline added.
    """
    contents = "%s\n\n%s" % (entry, current)
    return contents.strip() + "\n"


def format_date(now=None):
    """
    Format a timestamp according to :rfc:`2822`.

    :param now: A :class:`~datetime.datetime` object (defaults to the
                current time). Naive values are assumed to be in UTC.
    :returns: The formatted date in UTC, for example
              ``Tue, 1 Jul 2003 08:52:37 +0000`` (a string).
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    else:
        now = now.astimezone(datetime.timezone.utc)
    # The day of the month isn't zero padded in changelogs.
    weekday, day, remainder = email.utils.format_datetime(now).split(" ", 2)
    return "%s %i %s" % (weekday, int(day), remainder)
