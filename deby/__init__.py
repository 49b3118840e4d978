# Debian metadata generator.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
The top-level :mod:`deby` module.

The :mod:`deby` module defines the `deby` version number and the functions
that update the Debian packaging metadata of a project based on its
``.debyrc`` configuration file:

- :func:`update()` updates ``debian/changelog`` and ``debian/control``.
- :func:`update_changelog()` only updates ``debian/changelog``.
- :func:`update_control()` only updates ``debian/control``.

Each of these functions loads the configuration file, makes sure the
``debian/`` directory exists and returns the status message(s) reported by
:func:`.render_changelog()` and/or :func:`.render_control()`. Failures are
reported by raising a subclass of :exc:`.DebyError`.

.. note:: Files are not locked while they're being updated, so when two
          processes update the same project concurrently the last writer
          wins.
"""

# Standard library modules.
import logging

# External dependencies.
from humanfriendly import format_path
from humanfriendly.text import compact

# Modules included in our package.
from deby.changelog import render_changelog
from deby.config import DEBIAN_DIRECTORY, find_project_file, load_config
from deby.control import render_control
from deby.exceptions import DebianDirError
from deby.utils import makedirs

# Semi-standard module versioning.
__version__ = '1.0'

# Public identifiers that require documentation.
__all__ = (
    "__version__",
    "create_debian_directory",
    "logger",
    "update",
    "update_changelog",
    "update_control",
)

# Initialize a logger.
logger = logging.getLogger(__name__)


def update(version, changes, extra_fields, directory=None):
    """
    Update ``debian/changelog`` and ``debian/control``.

    :param version: The version number of the new changelog entry (a string).
    :param changes: Notes about the changes in this version (a string).
    :param extra_fields: Additional lines for the control file (an iterable
                         of strings).
    :param directory: The project directory (a string, defaults to the
                      current working directory).
    :returns: A tuple with two status messages (strings): The first concerns
              the changelog and the second the control file.
    :raises: :exc:`.ConfigError` when the configuration can't be loaded,
             :exc:`.UpdateError` when one of the files can't be updated.
    """
    config = load_config(directory)
    create_debian_directory(directory)
    changelog_status = render_changelog(config, version, changes, directory)
    control_status = render_control(config, extra_fields, directory)
    return changelog_status, control_status


def update_changelog(version, changes, directory=None):
    """
    Update ``debian/changelog`` (without touching ``debian/control``).

    :returns: A status message (a string).

    Refer to :func:`update()` for details about the parameters and
    exceptions.
    """
    config = load_config(directory)
    create_debian_directory(directory)
    return render_changelog(config, version, changes, directory)


def update_control(extra_fields, directory=None):
    """
    Update ``debian/control`` (without touching ``debian/changelog``).

    :returns: A status message (a string).

    Refer to :func:`update()` for details about the parameters and
    exceptions.
    """
    config = load_config(directory)
    create_debian_directory(directory)
    return render_control(config, extra_fields, directory)


def create_debian_directory(directory=None):
    """
    Make sure the ``debian/`` directory exists.

    :param directory: The project directory (a string, defaults to the
                      current working directory).
    :raises: :exc:`.DebianDirError` when the directory can't be created.
    """
    pathname = find_project_file(DEBIAN_DIRECTORY, directory)
    try:
        if makedirs(pathname):
            logger.info("Created %s directory.", format_path(pathname))
    except OSError as e:
        raise DebianDirError(compact(
            "Failed to create directory {pathname}! ({error})",
            pathname=format_path(pathname),
            error=e,
        ), filename=pathname) from e
