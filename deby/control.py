# Debian metadata generator: Control file generation.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Generation of ``debian/control`` files.

Unlike the changelog (which accumulates history) the control file is a
snapshot of the configuration: Every update replaces the whole file. The
generated file consists of three blocks separated by empty lines:

1. The source stanza (see :func:`format_source_stanza()`).
2. The binary stanza (see :func:`format_binary_stanza()`).
3. Extra fields given by the caller (see :func:`format_extra_fields()`).

Fields with an empty value are omitted, except for the ``Priority``,
``Maintainer`` and ``Architecture`` fields which are always included.
"""

# Standard library modules.
import logging

# External dependencies.
from humanfriendly import format_path
from humanfriendly.text import is_empty_line, pluralize

# Modules included in our package.
from deby.config import CONTROL_FILE, find_project_file
from deby.deb822 import Deb822, dump_field
from deby.exceptions import ControlOpenError, ControlWriteError
from deby.utils import write_text_file

# Public identifiers that require documentation.
__all__ = (
    "SKIPPED_MESSAGE",
    "SUCCESS_MESSAGE",
    "format_binary_stanza",
    "format_build_depends",
    "format_control_file",
    "format_extra_fields",
    "format_source_stanza",
    "logger",
    "render_control",
)

# Initialize a logger.
logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "debian/control file not updated due to config file setting"
"""The status message returned when the configuration disables control file updates (a string)."""

SUCCESS_MESSAGE = "Successfully created a new entry in debian/control file"
"""The status message returned after the control file was generated (a string)."""


def render_control(config, extra_fields, directory=None):
    """
    Generate ``debian/control`` based on the configuration.

    :param config: A :class:`.Configuration` object.
    :param extra_fields: An iterable of strings with additional lines for the
                         control file (for example ``X-Custom: value``). The
                         lines are included as is, no prefix is added.
    :param directory: The project directory (a string, defaults to the
                      current working directory). The ``debian/``
                      directory is expected to exist.
    :returns: :data:`SUCCESS_MESSAGE` or :data:`SKIPPED_MESSAGE` (when the
              ``control.update`` option is disabled, in which case the file
              system isn't touched at all).
    :raises: :exc:`.ControlOpenError` or :exc:`.ControlWriteError` when the
             control file can't be written.
    """
    if not config.control.update:
        logger.info("Not updating %s (disabled in configuration).", CONTROL_FILE)
        return SKIPPED_MESSAGE
    extra_fields = list(extra_fields)
    filename = find_project_file(CONTROL_FILE, directory)
    contents = format_control_file(config.control, extra_fields)
    write_text_file(filename, contents, ControlOpenError, ControlWriteError)
    logger.info("Generated %s (including %s).",
                format_path(filename),
                pluralize(len(extra_fields), "extra field"))
    return SUCCESS_MESSAGE


def format_control_file(settings, extra_fields):
    """
    Format the complete contents of a control file.

    :param settings: A :class:`.ControlSettings` object.
    :param extra_fields: A list of strings (see :func:`render_control()`).
    :returns: The contents of the control file (a string ending in a single
              newline).
    """
    contents = "\n\n".join([
        format_source_stanza(settings.source_control),
        format_binary_stanza(settings.binary_control),
        format_extra_fields(extra_fields),
    ])
    return contents.strip() + "\n"


def format_source_stanza(source_control):
    """
    Format the source stanza of a control file.

    :param source_control: A :class:`.SourceControl` object.
    :returns: The formatted stanza (a string).
    """
    fields = Deb822()
    add_optional_field(fields, 'Source', source_control.source)
    add_optional_field(fields, 'Section', source_control.section)
    fields['Priority'] = str(source_control.priority)
    fields['Maintainer'] = str(source_control.maintainer)
    if source_control.build_depends:
        fields['Build-Depends'] = tuple(source_control.build_depends)
    add_optional_field(fields, 'Standards-Version', source_control.standards_version)
    add_optional_field(fields, 'Homepage', source_control.homepage)
    add_optional_field(fields, 'Vcs-Browser', source_control.vcs_browser)
    return fields.dump()


def format_binary_stanza(binary_control):
    """
    Format the binary stanza of a control file.

    :param binary_control: A :class:`.BinaryControl` object.
    :returns: The formatted stanza (a string).
    """
    fields = Deb822()
    add_optional_field(fields, 'Package', binary_control.package)
    add_optional_field(fields, 'Section', binary_control.section)
    fields['Priority'] = str(binary_control.priority)
    add_optional_field(fields, 'Pre-Depends', binary_control.pre_depends)
    fields['Architecture'] = str(binary_control.architecture)
    add_optional_field(fields, 'Description', binary_control.description)
    return fields.dump()


def format_build_depends(values):
    """
    Format the ``Build-Depends`` field.

    :param values: A list of strings with build dependencies.
    :returns: An empty string when `values` is empty, a single line when
              there is one value and a multi-line field otherwise:

              .. code-block:: none

                 Build-Depends:
                  debhelper (>= 9),
                  python3
    """
    return dump_field('Build-Depends', tuple(values)) if values else ""


def format_extra_fields(extra_fields):
    """
    Format the extra fields given by the caller.

    :param extra_fields: A list of strings.
    :returns: The strings joined by newlines, in the given order and
              otherwise unmodified. Empty (or whitespace only) strings are
              skipped because they would end the paragraph.
    """
    return "\n".join(line for line in extra_fields if not is_empty_line(line))


def add_optional_field(fields, name, value):
    """Add a field to a :class:`.Deb822` object unless its value is empty."""
    if value:
        fields[name] = value
