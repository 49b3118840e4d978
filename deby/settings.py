# Debian metadata generator: Configuration records.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Immutable records that represent the contents of a ``.debyrc`` file.

The records in this module are named tuples, so they can't be changed once
they've been created by :func:`parse_configuration()`. Every field has a
default value which is used when the corresponding key is absent from the
configuration file. The external (JSON) key names differ from the Python
attribute names for some fields, for example ``sourceControl`` is parsed into
:attr:`ControlSettings.source_control` and ``buildDepends`` into
:attr:`SourceControl.build_depends`. The shape of the document is declared
in :data:`CONFIGURATION_SCHEMA` using the :mod:`schema` package.
"""

# Standard library modules.
import collections
import re

# External dependencies.
from schema import And, Optional, Or, Schema, Use

# Modules included in our package.
from deby.fields import Architecture, Distribution, Priority, Urgency

# Public identifiers that require documentation.
__all__ = (
    "BinaryControl",
    "CONFIGURATION_SCHEMA",
    "ChangelogSettings",
    "Configuration",
    "ControlSettings",
    "Maintainer",
    "SourceControl",
    "attribute_name",
    "choice_schema",
    "describe_schema_error",
    "parse_configuration",
    "record_schema",
    "relationship_list",
)


class Maintainer(collections.namedtuple('Maintainer', 'name, email')):

    """
    The maintainer of a package (a named tuple).

    .. attribute:: name

       The full name of the maintainer (a string, defaults to an empty string).

    .. attribute:: email

       The e-mail address of the maintainer (a string, defaults to an empty string).
    """

    def __str__(self):
        """Render the maintainer as ``name <email>`` (a string)."""
        return '%s <%s>' % (self.name, self.email)


Maintainer.__new__.__defaults__ = ('', '')


class ChangelogSettings(collections.namedtuple('ChangelogSettings', 'update, package, distribution, urgency, maintainer')):

    """
    The ``changelog`` section of the configuration (a named tuple).

    .. attribute:: update

       :data:`True` to update ``debian/changelog``, :data:`False` (the
       default) to leave the file alone.

    .. attribute:: package

       The name of the source package (a string).

    .. attribute:: distribution

       A :class:`.Distribution` member (defaults to :attr:`~.Distribution.UNSTABLE`).

    .. attribute:: urgency

       An :class:`.Urgency` member (defaults to :attr:`~.Urgency.LOW`).

    .. attribute:: maintainer

       The :class:`Maintainer` that signs the changelog entries.
    """


ChangelogSettings.__new__.__defaults__ = (False, '', Distribution.UNSTABLE, Urgency.LOW, Maintainer())


class SourceControl(collections.namedtuple('SourceControl', (
        'source, maintainer, section, priority, build_depends, standards_version, homepage, vcs_browser'))):

    """
    The source stanza of ``debian/control`` (a named tuple).

    All string fields default to an empty string (which means the field is
    omitted from the control file), :attr:`priority` defaults to
    :attr:`~.Priority.OPTIONAL` and :attr:`build_depends` is a tuple of
    strings (defaults to an empty tuple).
    """


SourceControl.__new__.__defaults__ = ('', Maintainer(), '', Priority.OPTIONAL, (), '', '', '')


class BinaryControl(collections.namedtuple('BinaryControl', (
        'package, description, section, priority, pre_depends, architecture'))):

    """
    The binary stanza of ``debian/control`` (a named tuple).

    All string fields default to an empty string, :attr:`priority` defaults
    to :attr:`~.Priority.OPTIONAL` and :attr:`architecture` defaults to
    :attr:`~.Architecture.ANY`.
    """


BinaryControl.__new__.__defaults__ = ('', '', '', Priority.OPTIONAL, '', Architecture.ANY)


class ControlSettings(collections.namedtuple('ControlSettings', 'update, source_control, binary_control')):

    """The ``control`` section of the configuration (a named tuple)."""


ControlSettings.__new__.__defaults__ = (False, SourceControl(), BinaryControl())


class Configuration(collections.namedtuple('Configuration', 'changelog, control')):

    """The complete configuration (a named tuple with a :class:`ChangelogSettings` and a :class:`ControlSettings`)."""


Configuration.__new__.__defaults__ = (ChangelogSettings(), ControlSettings())


def parse_configuration(document):
    """
    Convert a decoded JSON document into a :class:`Configuration` object.

    :param document: The decoded contents of a ``.debyrc`` file (a dictionary).
    :returns: A :class:`Configuration` object.
    :raises: :exc:`~schema.SchemaError` when the document doesn't have the
             expected shape (see :func:`describe_schema_error()`).
    """
    return CONFIGURATION_SCHEMA.validate(document)


def describe_schema_error(error):
    """
    Summarize a validation error on a single line.

    :param error: A :exc:`~schema.SchemaError` raised by :func:`parse_configuration()`.
    :returns: A string with the dotted path of the offending key (for
              example ``control.sourceControl.priority``) followed by the
              first explanation reported by :mod:`schema`.
    """
    path = []
    details = []
    for message in error.autos:
        if message:
            match = KEY_ERROR_PATTERN.match(message)
            if match:
                path.append(match.group(1))
            else:
                details.append(message)
    summary = details[0] if details else str(error)
    return "%s: %s" % (".".join(path), summary) if path else summary


def record_schema(record_type, section):
    """
    Create a schema that converts a JSON object into a named tuple.

    :param record_type: The named tuple class to create.
    :param section: A dictionary that maps :class:`~schema.Optional` keys
                    (the external key names) to value schemas.
    :returns: A :class:`~schema.And` object. Unknown keys are ignored,
              absent keys get the defaults of their :class:`~schema.Optional`
              key.
    """
    return And(Schema(section, ignore_extra_keys=True), Use(lambda fields: record_type(**{
        attribute_name(key): value for key, value in fields.items()
    })))


def attribute_name(key):
    """Translate an external key name like ``buildDepends`` to the attribute name ``build_depends``."""
    return re.sub(r'([A-Z])', lambda m: '_' + m.group(1).lower(), key)


def choice_schema(choices):
    """Create a schema that accepts the Debian spelling of a member of `choices` (a :class:`.DebianChoice` subclass)."""
    return And(str, Use(choices.parse))


def relationship_list(value):
    """
    Normalize the value of ``buildDepends``.

    :param value: A string or a list of strings.
    :returns: A tuple of non-empty strings.

    A single string is accepted because older configuration files define
    ``buildDepends`` as one string.
    """
    if isinstance(value, str):
        value = [value]
    return tuple(v for v in value if v)


KEY_ERROR_PATTERN = re.compile(r"^Key '(.*)' error:$")
"""Matches the messages that :mod:`schema` uses to report the key of a nested error."""

MAINTAINER_SCHEMA = record_schema(Maintainer, {
    Optional('name', default=''): str,
    Optional('email', default=''): str,
})

CONFIGURATION_SCHEMA = record_schema(Configuration, {
    Optional('changelog', default=ChangelogSettings()): record_schema(ChangelogSettings, {
        Optional('update', default=False): bool,
        Optional('package', default=''): str,
        Optional('distribution', default=Distribution.UNSTABLE): choice_schema(Distribution),
        Optional('urgency', default=Urgency.LOW): choice_schema(Urgency),
        Optional('maintainer', default=Maintainer()): MAINTAINER_SCHEMA,
    }),
    Optional('control', default=ControlSettings()): record_schema(ControlSettings, {
        Optional('update', default=False): bool,
        Optional('sourceControl', default=SourceControl()): record_schema(SourceControl, {
            Optional('source', default=''): str,
            Optional('maintainer', default=Maintainer()): MAINTAINER_SCHEMA,
            Optional('section', default=''): str,
            Optional('priority', default=Priority.OPTIONAL): choice_schema(Priority),
            Optional('buildDepends', default=()): And(Or(str, [str]), Use(relationship_list)),
            Optional('standardsVersion', default=''): str,
            Optional('homepage', default=''): str,
            Optional('vcsBrowser', default=''): str,
        }),
        Optional('binaryControl', default=BinaryControl()): record_schema(BinaryControl, {
            Optional('package', default=''): str,
            Optional('description', default=''): str,
            Optional('section', default=''): str,
            Optional('priority', default=Priority.OPTIONAL): choice_schema(Priority),
            Optional('preDepends', default=''): str,
            Optional('architecture', default=Architecture.ANY): choice_schema(Architecture),
        }),
    }),
})
"""The :class:`~schema.Schema` of ``.debyrc`` files (validates a decoded JSON document and returns a :class:`Configuration`)."""
