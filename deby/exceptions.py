# Debian metadata generator: Custom exceptions.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Custom exceptions raised by the `deby` package.

All exceptions raised on purpose by `deby` inherit from :exc:`DebyError`.
Problems with the ``.debyrc`` configuration file are reported using
subclasses of :exc:`ConfigError` while problems updating the files in the
``debian/`` directory are reported using subclasses of :exc:`UpdateError`.
The underlying :exc:`~exceptions.OSError` or :exc:`~exceptions.ValueError`
(if any) is available as the ``__cause__`` of the exception.
"""

# Public identifiers that require documentation.
__all__ = (
    "ChangelogError",
    "ChangelogOpenError",
    "ChangelogReadError",
    "ChangelogWriteError",
    "ConfigError",
    "ConfigReadError",
    "ControlError",
    "ControlOpenError",
    "ControlWriteError",
    "DebianDirError",
    "DebyError",
    "DeserializeError",
    "UpdateError",
)


class DebyError(Exception):

    """Base class for the exceptions raised by `deby`."""

    def __init__(self, message, filename=None):
        """
        Initialize a :class:`DebyError` object.

        :param message: A human readable explanation of the problem (a string).
        :param filename: The pathname of the file or directory involved (a
                         string or :data:`None`).
        """
        super(DebyError, self).__init__(message)
        self.filename = filename


class ConfigError(DebyError):

    """Raised when the configuration can't be loaded."""


class ConfigReadError(ConfigError):

    """Raised when the ``.debyrc`` file can't be opened or read."""


class DeserializeError(ConfigError):

    """Raised when the configuration isn't valid JSON or doesn't have the expected shape."""


class UpdateError(DebyError):

    """Raised when one of the files in the ``debian/`` directory can't be updated."""


class DebianDirError(UpdateError):

    """Raised when the ``debian/`` directory can't be created."""


class ChangelogError(UpdateError):

    """Base class for failures to update ``debian/changelog``."""


class ChangelogOpenError(ChangelogError):

    """Raised when ``debian/changelog`` can't be opened for writing."""


class ChangelogReadError(ChangelogError):

    """Raised when ``debian/changelog`` exists but can't be read."""


class ChangelogWriteError(ChangelogError):

    """Raised when writing ``debian/changelog`` fails."""


class ControlError(UpdateError):

    """Base class for failures to update ``debian/control``."""


class ControlOpenError(ControlError):

    """Raised when ``debian/control`` can't be opened for writing."""


class ControlWriteError(ControlError):

    """Raised when writing ``debian/control`` fails."""
