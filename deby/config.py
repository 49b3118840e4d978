# Debian metadata generator: Configuration loading.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Configuration defaults and the ``.debyrc`` loader.

The configuration file is a JSON document in the project directory (the
current working directory unless the caller specifies otherwise). Refer to
:mod:`deby.settings` for the records it is parsed into.
"""

# Standard library modules.
import json
import logging
import os

# External dependencies.
from humanfriendly import format_path
from humanfriendly.text import compact
from schema import SchemaError

# Modules included in our package.
from deby.exceptions import ConfigReadError, DeserializeError
from deby.settings import describe_schema_error, parse_configuration

# Public identifiers that require documentation.
__all__ = (
    "CHANGELOG_FILE",
    "CONFIG_FILE",
    "CONTROL_FILE",
    "DEBIAN_DIRECTORY",
    "find_project_file",
    "load_config",
    "logger",
    "parse_config",
)

# Initialize a logger.
logger = logging.getLogger(__name__)

CONFIG_FILE = '.debyrc'
"""The base name of the configuration file (a string)."""

DEBIAN_DIRECTORY = 'debian'
"""The name of the directory with Debian packaging metadata (a string)."""

CHANGELOG_FILE = os.path.join(DEBIAN_DIRECTORY, 'changelog')
"""The pathname of the changelog relative to the project directory (a string)."""

CONTROL_FILE = os.path.join(DEBIAN_DIRECTORY, 'control')
"""The pathname of the control file relative to the project directory (a string)."""


def find_project_file(name, directory=None):
    """
    Get the pathname of a file in the project directory.

    :param name: The relative pathname of the file (a string).
    :param directory: The project directory (a string, defaults to the
                      current working directory).
    :returns: A pathname (a string).
    """
    return os.path.join(directory, name) if directory else name


def load_config(directory=None):
    """
    Load the ``.debyrc`` configuration file.

    :param directory: The project directory that contains the configuration
                      file (a string, defaults to the current working
                      directory).
    :returns: A :class:`.Configuration` object.
    :raises: :exc:`.ConfigReadError` when the file can't be read,
             :exc:`.DeserializeError` when its contents are invalid.
    """
    filename = find_project_file(CONFIG_FILE, directory)
    logger.debug("Loading configuration from %s ..", format_path(filename))
    try:
        with open(filename, encoding='UTF-8') as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(compact(
            "Failed to read configuration file {filename}! ({error})",
            filename=format_path(filename),
            error=e,
        ), filename=filename) from e
    return parse_config(text, filename=filename)


def parse_config(text, filename=None):
    """
    Parse the contents of a ``.debyrc`` configuration file.

    :param text: The JSON text to parse (a string).
    :param filename: The pathname of the file that `text` was read from (a
                     string, only used in error messages).
    :returns: A :class:`.Configuration` object.
    :raises: :exc:`.DeserializeError` when the text isn't valid JSON or
             doesn't match the expected structure.

    Absent keys are replaced by their default values, for example a file
    containing only ``{}`` results in a configuration that doesn't update
    any files.
    """
    location = (" in %s" % format_path(filename)) if filename else ""
    try:
        document = json.loads(text)
    except ValueError as e:
        raise DeserializeError(compact(
            "Invalid JSON{location}! ({error})",
            location=location,
            error=e,
        ), filename=filename) from e
    try:
        config = parse_configuration(document)
    except SchemaError as e:
        raise DeserializeError(compact(
            "Invalid configuration{location}! ({error})",
            location=location,
            error=describe_schema_error(e),
        ), filename=filename) from e
    logger.debug("Parsed configuration: %s", config)
    return config
