# Debian metadata generator: Command line interface
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""
Usage: deby [OPTIONS]

Update the Debian packaging metadata (debian/changelog and debian/control)
of a project based on the .debyrc configuration file in the project
directory. Which of the two files are updated is controlled by the "update"
options in the configuration file.

Supported options:

  -n, --version=VERSION

    The version number of the new changelog entry. Required when
    debian/changelog is updated (see the "changelog.update" option).

  -m, --changes=TEXT

    Notes about the changes in this version. Each line becomes a bullet
    point in the changelog entry. This option can be repeated.

  -f, --field=LINE

    An extra line to add to the control file (syntax: "Name: Value"). The
    line is included as is, so custom fields should include their "X-"
    prefix. This option can be repeated.

  --changelog-only

    Only update debian/changelog.

  --control-only

    Only update debian/control.

  -d, --directory=DIR

    The project directory that contains .debyrc (defaults to the
    current working directory).

  -v, --verbose

    Make more noise! (useful during debugging)

  -q, --quiet

    Make less noise.

  -h, --help

    Show this message and exit.
"""

# Standard library modules.
import getopt
import logging
import os
import sys

# External dependencies.
import coloredlogs
from humanfriendly import parse_path
from humanfriendly.terminal import usage, warning
from humanfriendly.text import format

# Modules included in our package.
from deby import update, update_changelog, update_control
from deby.config import load_config
from deby.exceptions import DebyError

# Initialize a logger.
logger = logging.getLogger(__name__)


def main():
    """Command line interface for the ``deby`` program."""
    # Configure logging output.
    coloredlogs.install()
    # Command line option defaults.
    version = None
    changes = []
    extra_fields = []
    changelog = True
    control = True
    directory = None
    # Parse the command line options.
    try:
        options, arguments = getopt.getopt(sys.argv[1:], 'n:m:f:d:vqh', [
            'version=', 'changes=', 'field=', 'changelog-only', 'control-only',
            'directory=', 'verbose', 'quiet', 'help',
        ])
        for option, value in options:
            if option in ('-n', '--version'):
                version = value.strip()
            elif option in ('-m', '--changes'):
                changes.append(value)
            elif option in ('-f', '--field'):
                extra_fields.append(value)
            elif option == '--changelog-only':
                control = False
            elif option == '--control-only':
                changelog = False
            elif option in ('-d', '--directory'):
                directory = check_directory(value)
            elif option in ('-v', '--verbose'):
                coloredlogs.increase_verbosity()
            elif option in ('-q', '--quiet'):
                coloredlogs.decrease_verbosity()
            elif option in ('-h', '--help'):
                usage(__doc__)
                return
        if arguments:
            raise Exception("Unexpected positional arguments! (%s)" % " ".join(arguments))
        if not (changelog or control):
            raise Exception("The --changelog-only and --control-only options are mutually exclusive!")
    except Exception as e:
        warning("Error: %s", e)
        sys.exit(1)
    # Update the selected files.
    try:
        # The version is only needed when the changelog will be updated.
        if changelog and not version and load_config(directory).changelog.update:
            warning("Error: Please specify the version of the new changelog entry using --version!")
            sys.exit(1)
        changes = "\n".join(changes)
        if changelog and control:
            messages = update(version, changes, extra_fields, directory=directory)
        elif changelog:
            messages = [update_changelog(version, changes, directory=directory)]
        else:
            messages = [update_control(extra_fields, directory=directory)]
        for text in messages:
            say(text)
    except DebyError as e:
        warning("Error: %s", e)
        sys.exit(1)
    except Exception:
        logger.exception("An error occurred! Aborting..")
        sys.exit(1)


def check_directory(argument):
    """
    Make sure a command line argument points to an existing directory.

    :param argument: The original command line argument.
    :returns: The absolute pathname of an existing directory.
    """
    directory = parse_path(argument)
    if not os.path.isdir(directory):
        msg = "Directory doesn't exist! (%s)"
        raise Exception(msg % directory)
    return directory


def say(text, *args, **kw):
    """Print a formatted message to the terminal (standard output stream)."""
    print(format(text, *args, **kw))
