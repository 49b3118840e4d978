# Debian metadata generator: Utility functions.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Utility functions.

The functions in the :mod:`deby.utils` module are not directly related to
Debian packaging metadata, however they are used by the other modules in
the `deby` package.
"""

# Standard library modules.
import errno
import logging
import os

# External dependencies.
from humanfriendly import format_path
from humanfriendly.text import compact

# Initialize a logger.
logger = logging.getLogger(__name__)


def makedirs(directory):
    """
    Create a directory and any missing parent directories.

    It is not an error if the directory already exists.

    :param directory: The pathname of a directory (a string).
    :returns: :data:`True` if the directory was created, :data:`False` if it already
              exists.
    """
    try:
        os.makedirs(directory)
        return True
    except OSError as e:
        if e.errno == errno.EEXIST and os.path.isdir(directory):
            return False
        else:
            raise


def read_existing_file(filename):
    """
    Read a UTF-8 encoded text file that may not exist yet.

    :param filename: The pathname of the file (a string).
    :returns: The contents of the file (a string) or an empty string when
              the file doesn't exist.
    :raises: :exc:`~exceptions.OSError` or :exc:`~exceptions.UnicodeDecodeError`
             when the file exists but can't be read.
    """
    try:
        with open(filename, encoding='UTF-8') as handle:
            return handle.read()
    except FileNotFoundError:
        return ''


def write_text_file(filename, text, open_error, write_error):
    """
    Replace the contents of a UTF-8 encoded text file.

    :param filename: The pathname of the file (a string). The file is created
                     when it doesn't exist yet and replaced otherwise.
    :param text: The new contents of the file (a string).
    :param open_error: The exception type to raise when the file can't be
                       opened for writing (a subclass of :exc:`.DebyError`).
    :param write_error: The exception type to raise when writing to the file
                        fails (a subclass of :exc:`.DebyError`).

    The text is written to a temporary file in the same directory which is
    then renamed over `filename`, so the previous contents of `filename`
    survive when writing fails halfway.
    """
    directory, name = os.path.split(filename)
    temporary_file = os.path.join(directory, '.%s-%i' % (name, os.getpid()))
    logger.debug("Writing %s ..", format_path(filename))
    try:
        handle = open(temporary_file, 'w', encoding='UTF-8')
    except OSError as e:
        raise open_error(compact(
            "Failed to open {filename} for writing! ({error})",
            filename=format_path(filename),
            error=e,
        ), filename=filename) from e
    try:
        with handle:
            handle.write(text)
        # Move the temporary file into place, trusting the
        # filesystem to handle this operation atomically.
        os.rename(temporary_file, filename)
    except (OSError, UnicodeEncodeError) as e:
        if os.path.exists(temporary_file):
            os.unlink(temporary_file)
        raise write_error(compact(
            "Failed to write {filename}! ({error})",
            filename=format_path(filename),
            error=e,
        ), filename=filename) from e
