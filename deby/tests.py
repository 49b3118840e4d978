# Debian metadata generator: Automated tests.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026

"""Test suite for the `deby` package."""

# Standard library modules.
import datetime
import errno
import io
import json
import logging
import os
import re

# External dependencies.
from humanfriendly.testing import PatchedAttribute, TemporaryDirectory, TestCase, run_cli, touch
from schema import SchemaError

# Modules included in our package.
from deby import changelog as changelog_module
from deby import utils as utils_module
from deby import update, update_changelog, update_control
from deby.changelog import (
    format_changelog_entry,
    format_changes,
    format_contents,
    format_date,
    render_changelog,
)
from deby.cli import main
from deby.config import CONFIG_FILE, load_config, parse_config
from deby.control import (
    format_binary_stanza,
    format_build_depends,
    format_control_file,
    format_extra_fields,
    format_source_stanza,
    render_control,
)
from deby.deb822 import Deb822, dump_field
from deby.exceptions import (
    ChangelogOpenError,
    ChangelogReadError,
    ChangelogWriteError,
    ConfigError,
    ConfigReadError,
    ControlOpenError,
    ControlWriteError,
    DebianDirError,
    DeserializeError,
    UpdateError,
)
from deby.fields import Architecture, Distribution, Priority, Urgency
from deby.settings import (
    BinaryControl,
    ChangelogSettings,
    Configuration,
    ControlSettings,
    Maintainer,
    SourceControl,
)
from deby.utils import makedirs

# Initialize a logger.
logger = logging.getLogger(__name__)

# Configuration defaults.
TEST_MAINTAINER = dict(name='A', email='a@x.com')
TEST_CONFIG = {
    'changelog': {
        'update': True,
        'package': 'foo',
        'distribution': 'unstable',
        'urgency': 'low',
        'maintainer': TEST_MAINTAINER,
    },
    'control': {
        'update': True,
        'sourceControl': {
            'source': 'foo',
            'maintainer': TEST_MAINTAINER,
            'section': 'utils',
            'priority': 'optional',
            'buildDepends': ['debhelper (>= 9)', 'python3'],
            'standardsVersion': '4.5.0',
            'homepage': 'http://x',
            'vcsBrowser': 'https://git.example.com/foo',
        },
        'binaryControl': {
            'package': 'foo',
            'description': 'Frobnicates the bar',
            'section': 'utils',
            'priority': 'extra',
            'preDepends': 'dpkg (>= 1.15.6)',
            'architecture': 'all',
        },
    },
}
TEST_DATE = 'Tue, 1 Jul 2003 08:52:37 +0000'
DATE_PATTERN = r'[A-Z][a-z]{2}, \d{1,2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} \+0000'


class DebyTestCase(TestCase):

    """Container for the `deby` test suite."""

    def test_makedirs(self):
        """Test that makedirs() can deal with existing directories."""
        with TemporaryDirectory() as parent:
            child = os.path.join(parent, 'nested')
            # This will create the directory.
            assert makedirs(child) is True
            # This should not complain that the directory already exists.
            assert makedirs(child) is False

    def test_makedirs_file_conflict(self):
        """Test that makedirs() doesn't mistake a file for a directory."""
        with TemporaryDirectory() as parent:
            pathname = os.path.join(parent, 'debian')
            touch(pathname)
            self.assertRaises(OSError, makedirs, pathname)

    def test_enumerations(self):
        """Make sure every enumeration member round trips through its Debian spelling."""
        for enumeration in (Architecture, Distribution, Priority, Urgency):
            for member in enumeration:
                assert str(member) == member.value
                assert str(member) == str(member).lower()
                assert enumeration.parse(str(member)) is member
        assert str(Priority.OPTIONAL) == 'optional'
        assert str(Architecture.ANY) == 'any'
        assert str(Urgency.EMERGENCY) == 'emergency'
        assert str(Distribution.EXPERIMENTAL) == 'experimental'

    def test_enumeration_parsing_is_strict(self):
        """Make sure enumerations reject anything except the exact lowercase spelling."""
        self.assertRaises(ValueError, Priority.parse, 'Optional')
        self.assertRaises(ValueError, Priority.parse, 'OPTIONAL')
        self.assertRaises(ValueError, Architecture.parse, 'amd64')
        self.assertRaises(ValueError, Urgency.parse, '')
        self.assertRaises(ValueError, Distribution.parse, 'stable')
        with self.assertRaises(ValueError) as context:
            Architecture.parse('amd64')
        assert str(context.exception) == "Invalid architecture 'amd64'! (expected 'all' or 'any')"
        assert isinstance(context.exception.__cause__, ValueError)

    def test_config_defaults(self):
        """Test that absent configuration keys are replaced by defaults."""
        config = parse_config('{}')
        assert config == Configuration()
        assert config.changelog.update is False
        assert config.changelog.package == ''
        assert config.changelog.distribution is Distribution.UNSTABLE
        assert config.changelog.urgency is Urgency.LOW
        assert config.changelog.maintainer == Maintainer(name='', email='')
        assert config.control.update is False
        assert config.control.source_control.priority is Priority.OPTIONAL
        assert config.control.source_control.build_depends == ()
        assert config.control.binary_control.priority is Priority.OPTIONAL
        assert config.control.binary_control.architecture is Architecture.ANY
        assert config.control.binary_control.description == ''

    def test_config_partial_sections(self):
        """Test that defaults are applied to individual keys inside sections."""
        config = parse_config(json.dumps({'changelog': {'update': True, 'package': 'foo'}}))
        assert config.changelog.update is True
        assert config.changelog.package == 'foo'
        assert config.changelog.distribution is Distribution.UNSTABLE
        assert config.changelog.urgency is Urgency.LOW
        assert config.control == ControlSettings()

    def test_config_parsing(self):
        """Test that the external key names are mapped to the right attributes."""
        config = parse_config(json.dumps(TEST_CONFIG))
        assert config.changelog == ChangelogSettings(
            update=True,
            package='foo',
            distribution=Distribution.UNSTABLE,
            urgency=Urgency.LOW,
            maintainer=Maintainer(name='A', email='a@x.com'),
        )
        source = config.control.source_control
        assert source.source == 'foo'
        assert source.build_depends == ('debhelper (>= 9)', 'python3')
        assert source.standards_version == '4.5.0'
        assert source.vcs_browser == 'https://git.example.com/foo'
        binary = config.control.binary_control
        assert binary.pre_depends == 'dpkg (>= 1.15.6)'
        assert binary.priority is Priority.EXTRA
        assert binary.architecture is Architecture.ALL

    def test_config_build_depends_string(self):
        """Test compatibility with configuration files that define Build-Depends as a single string."""
        config = parse_config('{"control": {"sourceControl": {"buildDepends": "debhelper (>= 9)"}}}')
        assert config.control.source_control.build_depends == ('debhelper (>= 9)',)
        config = parse_config('{"control": {"sourceControl": {"buildDepends": ""}}}')
        assert config.control.source_control.build_depends == ()

    def test_config_unknown_keys(self):
        """Test that unknown keys are ignored."""
        config = parse_config('{"maintainer": {"name": "A"}, "changelog": {"colour": "blue"}}')
        assert config == Configuration()

    def test_config_invalid_enumeration(self):
        """Test that invalid enumeration values are rejected."""
        with self.assertRaises(DeserializeError) as context:
            parse_config('{"control": {"sourceControl": {"priority": "Optional"}}}')
        assert 'control.sourceControl.priority' in str(context.exception)
        self.assertRaises(DeserializeError, parse_config, '{"changelog": {"urgency": "whenever"}}')
        self.assertRaises(DeserializeError, parse_config, '{"control": {"binaryControl": {"architecture": 1}}}')

    def test_config_invalid_types(self):
        """Test that values of the wrong type are rejected."""
        with self.assertRaises(DeserializeError) as context:
            parse_config('{"changelog": {"update": "yes"}}')
        assert 'changelog.update' in str(context.exception)
        assert isinstance(context.exception.__cause__, SchemaError)
        self.assertRaises(DeserializeError, parse_config, '[]')
        self.assertRaises(DeserializeError, parse_config, '{"changelog": null}')
        self.assertRaises(DeserializeError, parse_config, '{"changelog": {"package": 42}}')
        self.assertRaises(DeserializeError, parse_config, '{"changelog": {"maintainer": "A <a@x.com>"}}')
        self.assertRaises(DeserializeError, parse_config, '{"control": {"sourceControl": {"buildDepends": [1]}}}')

    def test_config_malformed_json(self):
        """Test that malformed JSON is reported as a deserialization error."""
        with self.assertRaises(DeserializeError) as context:
            parse_config('{"changelog": ', filename='/tmp/.debyrc')
        assert context.exception.filename == '/tmp/.debyrc'
        assert isinstance(context.exception, ConfigError)
        assert isinstance(context.exception.__cause__, ValueError)

    def test_load_config(self):
        """Test loading of the configuration file from a project directory."""
        with TemporaryDirectory() as directory:
            create_project(directory, TEST_CONFIG)
            config = load_config(directory)
            assert config.changelog.package == 'foo'

    def test_load_config_missing(self):
        """Test that a missing configuration file is reported as a read error."""
        with TemporaryDirectory() as directory:
            with self.assertRaises(ConfigReadError) as context:
                load_config(directory)
            assert context.exception.filename == os.path.join(directory, CONFIG_FILE)
            assert isinstance(context.exception.__cause__, OSError)

    def test_format_changes(self):
        """Test the formatting of change notes as a bullet list."""
        assert format_changes('change1\nchange2\nchange3\n') == '  * change1\n  * change2\n  * change3'
        assert format_changes('fix bug') == '  * fix bug'
        assert format_changes('one\n\n  \ntwo') == '  * one\n  * two'
        assert format_changes('') == ''
        assert format_changes('\n\n') == ''

    def test_format_date(self):
        """Test the RFC 2822 formatting of changelog dates."""
        timezone = datetime.timezone(datetime.timedelta(hours=2))
        assert format_date(datetime.datetime(2003, 7, 1, 10, 52, 37, tzinfo=timezone)) == TEST_DATE
        assert format_date(datetime.datetime(2003, 7, 1, 8, 52, 37)) == TEST_DATE
        assert format_date(datetime.datetime(2020, 12, 24, 23, 5, 0)) == 'Thu, 24 Dec 2020 23:05:00 +0000'
        assert re.match('^%s$' % DATE_PATTERN, format_date())

    def test_format_changelog_entry(self):
        """Test the formatting of a single changelog entry."""
        settings = parse_config(json.dumps(TEST_CONFIG)).changelog
        entry = format_changelog_entry(settings, '1.2.3', format_changes('fix bug'), date=TEST_DATE)
        assert entry == 'foo (1.2.3) unstable; urgency=low\n\n  * fix bug\n\n -- A <a@x.com>  %s' % TEST_DATE
        # The date defaults to the current time.
        entry = format_changelog_entry(settings, '1.2.3', format_changes('fix bug'))
        assert re.match(r'^foo \(1\.2\.3\) unstable; urgency=low\n\n  \* fix bug\n\n -- A <a@x\.com>  %s$'
                        % DATE_PATTERN, entry)

    def test_format_changelog_entry_options(self):
        """Test that the distribution and urgency are included in changelog entries."""
        settings = ChangelogSettings(
            update=True,
            package='bar',
            distribution=Distribution.EXPERIMENTAL,
            urgency=Urgency.CRITICAL,
            maintainer=Maintainer(name='B', email='b@y.org'),
        )
        entry = format_changelog_entry(settings, '2.0', '', date=TEST_DATE)
        assert entry.startswith('bar (2.0) experimental; urgency=critical\n')
        assert entry.endswith('\n -- B <b@y.org>  %s' % TEST_DATE)

    def test_format_contents(self):
        """Test that new changelog entries are prepended to the existing entries."""
        assert format_contents('entry', 'current file contents') == 'entry\n\ncurrent file contents\n'
        assert format_contents('entry', '') == 'entry\n'
        assert format_contents('\nentry', 'OLD\n\n\n') == 'entry\n\nOLD\n'

    def test_changelog_disabled(self):
        """Make sure disabled changelog updates don't touch the file system."""
        with TemporaryDirectory() as directory:
            config = parse_config('{"changelog": {"update": false, "package": "foo"}}')
            # The debian/ directory doesn't exist so any write would fail.
            assert render_changelog(config, '1.0', 'fix bug', directory) == \
                'debian/changelog file not updated due to config file setting'
            assert os.listdir(directory) == []

    def test_changelog_creation(self):
        """Test the creation of a new changelog."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(changelog_module, 'format_date', lambda: TEST_DATE):
                message = render_changelog(config, '1.2.3', 'fix bug', directory)
            assert message == 'Successfully created a new entry in debian/changelog file'
            assert read_file(directory, 'debian', 'changelog') == \
                'foo (1.2.3) unstable; urgency=low\n\n  * fix bug\n\n -- A <a@x.com>  %s\n' % TEST_DATE

    def test_changelog_prepend(self):
        """Test that changelog entries are added in front of the existing entries."""
        with TemporaryDirectory() as directory:
            write_file('OLD', directory, 'debian', 'changelog')
            config = parse_config(json.dumps(TEST_CONFIG))
            render_changelog(config, '1.2.3', 'fix bug', directory)
            contents = read_file(directory, 'debian', 'changelog')
            assert contents.startswith('foo (1.2.3) unstable; urgency=low\n')
            assert contents.endswith('\n\nOLD\n')
            assert not contents.endswith('\n\n')
            # Newer entries come first.
            render_changelog(config, '1.2.4', 'another fix', directory)
            contents = read_file(directory, 'debian', 'changelog')
            assert contents.index('(1.2.4)') < contents.index('(1.2.3)') < contents.index('OLD')
            assert contents.count(' -- A <a@x.com>  ') == 2

    def test_changelog_read_error(self):
        """Test that an unreadable changelog is reported as a read error."""
        with TemporaryDirectory() as directory:
            # A directory can't be read as a file.
            makedirs(os.path.join(directory, 'debian', 'changelog'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with self.assertRaises(ChangelogReadError) as context:
                render_changelog(config, '1.0', 'fix bug', directory)
            assert isinstance(context.exception, UpdateError)
            assert context.exception.filename == os.path.join(directory, 'debian', 'changelog')

    def test_changelog_open_error(self):
        """Test that a changelog that can't be opened for writing is reported as such."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(utils_module, 'open', read_only_open):
                self.assertRaises(ChangelogOpenError, render_changelog, config, '1.0', 'fix bug', directory)

    def test_changelog_write_error(self):
        """Test that a failure to write the changelog is reported as such."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(utils_module, 'open', disk_full_open):
                self.assertRaises(ChangelogWriteError, render_changelog, config, '1.0', 'fix bug', directory)

    def test_changelog_write_error_keeps_history(self):
        """Make sure existing changelog entries survive a failure to write the changelog."""
        with TemporaryDirectory() as directory:
            write_file('OLD HISTORY\n', directory, 'debian', 'changelog')
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(utils_module, 'open', disk_full_open):
                self.assertRaises(ChangelogWriteError, render_changelog, config, '1.0', 'fix bug', directory)
            assert read_file(directory, 'debian', 'changelog') == 'OLD HISTORY\n'
            assert os.listdir(os.path.join(directory, 'debian')) == ['changelog']

    def test_changelog_empty_changes(self):
        """Test the changelog entry that is written when there are no change notes."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(changelog_module, 'format_date', lambda: TEST_DATE):
                render_changelog(config, '1.0', '', directory)
            assert read_file(directory, 'debian', 'changelog') == \
                'foo (1.0) unstable; urgency=low\n\n\n\n -- A <a@x.com>  %s\n' % TEST_DATE

    def test_dump_field(self):
        """Test the formatting of individual control fields."""
        assert dump_field('Source', 'foo') == 'Source: foo'
        assert dump_field('Build-Depends', ('python3',)) == 'Build-Depends: python3'
        assert dump_field('Build-Depends', ['a', 'b']) == 'Build-Depends:\n a,\n b'
        assert dump_field('Description', 'summary\nfirst line\n\nsecond line') == \
            'Description: summary\n first line\n .\n second line'

    def test_deb822_order(self):
        """Make sure control fields are dumped in the order they were added."""
        fields = Deb822()
        fields['Source'] = 'foo'
        fields['Priority'] = 'optional'
        fields['Maintainer'] = 'A <a@x.com>'
        assert fields.dump() == 'Source: foo\nPriority: optional\nMaintainer: A <a@x.com>'

    def test_format_build_depends(self):
        """Test the formatting of the Build-Depends field."""
        assert format_build_depends([]) == ''
        assert format_build_depends(['debhelper (>= 9)']) == 'Build-Depends: debhelper (>= 9)'
        assert format_build_depends(['debhelper (>= 9)', 'python3', 'dh-python']) == \
            'Build-Depends:\n debhelper (>= 9),\n python3,\n dh-python'
        for count in range(2, 6):
            rendered = format_build_depends(['pkg%i' % i for i in range(count)])
            assert rendered.startswith('Build-Depends:\n ')
            assert not rendered.endswith(',')
            assert rendered.count(',') == count - 1
            assert all(line.startswith(' ') and not line.startswith('  ') for line in rendered.splitlines()[1:])

    def test_format_source_stanza(self):
        """Test the formatting of the source stanza."""
        config = parse_config(json.dumps(TEST_CONFIG))
        assert format_source_stanza(config.control.source_control) == '\n'.join([
            'Source: foo',
            'Section: utils',
            'Priority: optional',
            'Maintainer: A <a@x.com>',
            'Build-Depends:',
            ' debhelper (>= 9),',
            ' python3',
            'Standards-Version: 4.5.0',
            'Homepage: http://x',
            'Vcs-Browser: https://git.example.com/foo',
        ])

    def test_format_source_stanza_omissions(self):
        """Test that empty source fields are omitted (except Priority and Maintainer)."""
        assert format_source_stanza(SourceControl()) == 'Priority: optional\nMaintainer:  <>'
        stanza = format_source_stanza(SourceControl(source='foo', build_depends=('python3',)))
        assert stanza == 'Source: foo\nPriority: optional\nMaintainer:  <>\nBuild-Depends: python3'

    def test_homepage_omission(self):
        """Test that the Homepage field is only included when it has a value."""
        lines = format_source_stanza(SourceControl(homepage='')).splitlines()
        assert not any(line.startswith('Homepage:') for line in lines)
        lines = format_source_stanza(SourceControl(homepage='http://x')).splitlines()
        assert [line for line in lines if line.startswith('Homepage:')] == ['Homepage: http://x']

    def test_format_binary_stanza(self):
        """Test the formatting of the binary stanza."""
        config = parse_config(json.dumps(TEST_CONFIG))
        assert format_binary_stanza(config.control.binary_control) == '\n'.join([
            'Package: foo',
            'Section: utils',
            'Priority: extra',
            'Pre-Depends: dpkg (>= 1.15.6)',
            'Architecture: all',
            'Description: Frobnicates the bar',
        ])
        # Priority and Architecture are always included.
        assert format_binary_stanza(BinaryControl()) == 'Priority: optional\nArchitecture: any'

    def test_format_extra_fields(self):
        """Test that extra fields are included verbatim and in order."""
        assert format_extra_fields([]) == ''
        assert format_extra_fields(['X-Custom: value', 'Y-Other: 42']) == 'X-Custom: value\nY-Other: 42'
        # Empty lines would end the paragraph so they are skipped.
        assert format_extra_fields(['', 'X-A: 1', '  ', 'X-B: 2']) == 'X-A: 1\nX-B: 2'

    def test_format_control_file(self):
        """Test the formatting of a complete control file."""
        config = parse_config(json.dumps(TEST_CONFIG))
        contents = format_control_file(config.control, ['X-Custom: value'])
        source, binary, extras = contents.split('\n\n')
        assert source.startswith('Source: foo\n')
        assert binary.startswith('Package: foo\n')
        assert extras == 'X-Custom: value\n'
        # Without extra fields the file ends after the binary stanza.
        contents = format_control_file(config.control, [])
        assert contents.endswith('Description: Frobnicates the bar\n')
        assert contents.count('\n\n') == 1
        # Blank extra fields don't add empty lines.
        contents = format_control_file(config.control, ['', 'X-A: 1'])
        assert contents.endswith('Description: Frobnicates the bar\n\nX-A: 1\n')

    def test_control_disabled(self):
        """Make sure disabled control file updates don't touch the file system."""
        with TemporaryDirectory() as directory:
            config = parse_config('{"control": {"update": false}}')
            assert render_control(config, ['X-Custom: value'], directory) == \
                'debian/control file not updated due to config file setting'
            assert os.listdir(directory) == []

    def test_control_generation(self):
        """Test that the control file is generated and replaces the existing file."""
        with TemporaryDirectory() as directory:
            write_file('Source: something-else\n' * 100, directory, 'debian', 'control')
            config = parse_config(json.dumps(TEST_CONFIG))
            message = render_control(config, ['X-Custom: value'], directory)
            assert message == 'Successfully created a new entry in debian/control file'
            contents = read_file(directory, 'debian', 'control')
            assert 'something-else' not in contents
            assert contents == format_control_file(config.control, ['X-Custom: value'])
            lines = contents.splitlines()
            assert lines[-1] == 'X-Custom: value'
            assert lines.index('X-Custom: value') > lines.index('Description: Frobnicates the bar')
            assert contents.endswith('X-Custom: value\n')
            # Running the same update again produces the same file.
            render_control(config, ['X-Custom: value'], directory)
            assert read_file(directory, 'debian', 'control') == contents

    def test_control_open_error(self):
        """Test that a control file that can't be opened is reported as such."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(utils_module, 'open', read_only_open):
                with self.assertRaises(ControlOpenError) as context:
                    render_control(config, [], directory)
            assert isinstance(context.exception.__cause__, OSError)
            assert os.listdir(os.path.join(directory, 'debian')) == []

    def test_control_replace_error(self):
        """Test that a control file that can't be replaced is reported as a write error."""
        with TemporaryDirectory() as directory:
            # A directory can't be replaced by a file.
            makedirs(os.path.join(directory, 'debian', 'control'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with self.assertRaises(ControlWriteError) as context:
                render_control(config, [], directory)
            assert isinstance(context.exception.__cause__, OSError)
            assert context.exception.filename == os.path.join(directory, 'debian', 'control')
            # The temporary file was cleaned up.
            assert os.listdir(os.path.join(directory, 'debian')) == ['control']

    def test_control_write_error(self):
        """Test that a failure to write the control file is reported as such."""
        with TemporaryDirectory() as directory:
            makedirs(os.path.join(directory, 'debian'))
            config = parse_config(json.dumps(TEST_CONFIG))
            with PatchedAttribute(utils_module, 'open', disk_full_open):
                self.assertRaises(ControlWriteError, render_control, config, [], directory)

    def test_update(self):
        """Test updating both files using the top level entry point."""
        with TemporaryDirectory() as directory:
            create_project(directory, TEST_CONFIG)
            messages = update('1.2.3', 'fix bug\nadd feature', ['X-Custom: value'], directory=directory)
            assert messages == (
                'Successfully created a new entry in debian/changelog file',
                'Successfully created a new entry in debian/control file',
            )
            changelog = read_file(directory, 'debian', 'changelog')
            assert changelog.startswith('foo (1.2.3) unstable; urgency=low\n\n  * fix bug\n  * add feature\n\n')
            control = read_file(directory, 'debian', 'control')
            assert 'X-Custom: value\n' in control

    def test_update_disabled(self):
        """Test the top level entry point with both updates disabled."""
        with TemporaryDirectory() as directory:
            create_project(directory, {})
            assert update('1.0', 'fix bug', [], directory=directory) == (
                'debian/changelog file not updated due to config file setting',
                'debian/control file not updated due to config file setting',
            )
            assert os.listdir(os.path.join(directory, 'debian')) == []

    def test_update_single_files(self):
        """Test the entry points that update only one of the two files."""
        with TemporaryDirectory() as directory:
            create_project(directory, TEST_CONFIG)
            assert update_changelog('0.1', 'initial release', directory=directory) == \
                'Successfully created a new entry in debian/changelog file'
            assert os.listdir(os.path.join(directory, 'debian')) == ['changelog']
            assert update_control(['X-Custom: value'], directory=directory) == \
                'Successfully created a new entry in debian/control file'
            assert sorted(os.listdir(os.path.join(directory, 'debian'))) == ['changelog', 'control']

    def test_update_errors(self):
        """Test that the top level entry points raise typed errors."""
        with TemporaryDirectory() as directory:
            # The configuration file is missing.
            self.assertRaises(ConfigReadError, update, '1.0', 'fix bug', [], directory=directory)
            self.assertRaises(ConfigReadError, update_control, [], directory=directory)
            # The debian/ directory can't be created.
            create_project(directory, TEST_CONFIG)
            touch(os.path.join(directory, 'debian'))
            self.assertRaises(DebianDirError, update, '1.0', 'fix bug', [], directory=directory)
            self.assertRaises(DebianDirError, update_changelog, '1.0', 'fix bug', directory=directory)

    def test_cli_update(self):
        """Test updating both files using the command line interface."""
        with TemporaryDirectory() as directory:
            create_project(directory, TEST_CONFIG)
            returncode, output = run_cli(
                main, '--directory=%s' % directory,
                '--version=1.2.3',
                '--changes=fix bug',
                '--changes=add feature',
                '--field=X-Custom: value',
            )
            assert returncode == 0
            assert 'Successfully created a new entry in debian/changelog file' in output
            assert 'Successfully created a new entry in debian/control file' in output
            changelog = read_file(directory, 'debian', 'changelog')
            assert '  * fix bug\n  * add feature\n' in changelog
            assert read_file(directory, 'debian', 'control').endswith('\n\nX-Custom: value\n')

    def test_cli_single_files(self):
        """Test the command line options that update a single file."""
        with TemporaryDirectory() as directory:
            create_project(directory, TEST_CONFIG)
            returncode, output = run_cli(main, '--control-only', '-d', directory)
            assert returncode == 0
            assert output.strip() == 'Successfully created a new entry in debian/control file'
            assert os.listdir(os.path.join(directory, 'debian')) == ['control']
            returncode, output = run_cli(main, '--changelog-only', '-n', '2.0', '-m', 'bump', '-d', directory)
            assert returncode == 0
            assert output.strip() == 'Successfully created a new entry in debian/changelog file'

    def test_cli_version_optional(self):
        """Test that the version isn't required when the changelog isn't updated."""
        with TemporaryDirectory() as directory:
            config = json.loads(json.dumps(TEST_CONFIG))
            config['changelog']['update'] = False
            create_project(directory, config)
            returncode, output = run_cli(main, '--field=X-A: 1', '--directory=%s' % directory)
            assert returncode == 0
            assert 'debian/changelog file not updated due to config file setting' in output
            assert 'Successfully created a new entry in debian/control file' in output
            assert os.listdir(os.path.join(directory, 'debian')) == ['control']

    def test_cli_errors(self):
        """Test that the command line interface reports errors using its exit status."""
        with TemporaryDirectory() as directory:
            # The configuration file doesn't exist.
            returncode, output = run_cli(main, '--version=1.0', '--directory=%s' % directory)
            assert returncode == 1
            create_project(directory, TEST_CONFIG)
            # The version is required to update the changelog.
            returncode, output = run_cli(main, '--directory=%s' % directory)
            assert returncode == 1
            # The project directory must exist.
            returncode, output = run_cli(main, '--version=1.0', '--directory=%s' % os.path.join(directory, 'nope'))
            assert returncode == 1
            # The two --*-only options can't be combined.
            returncode, output = run_cli(main, '--changelog-only', '--control-only', '--directory=%s' % directory)
            assert returncode == 1
            # Nothing was written.
            assert not os.path.exists(os.path.join(directory, 'debian'))

    def test_cli_usage(self):
        """Test the usage message of the command line interface."""
        returncode, output = run_cli(main, '--help')
        assert returncode == 0
        assert 'Usage: deby' in output


def create_project(directory, config):
    """Create a ``.debyrc`` file in the given directory."""
    with open(os.path.join(directory, CONFIG_FILE), 'w', encoding='UTF-8') as handle:
        json.dump(config, handle)


def read_file(*args):
    """Read a UTF-8 encoded text file."""
    with open(os.path.join(*args), encoding='UTF-8') as handle:
        return handle.read()


def write_file(contents, *args):
    """Write a UTF-8 encoded text file (creating missing directories)."""
    filename = os.path.join(*args)
    makedirs(os.path.dirname(filename))
    with open(filename, 'w', encoding='UTF-8') as handle:
        handle.write(contents)


def read_only_open(filename, mode='r', **kw):
    """Replacement for :func:`open()` that refuses to open files for writing."""
    if 'w' in mode:
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), filename)
    return io.open(filename, mode, **kw)


def disk_full_open(filename, mode='r', **kw):
    """Replacement for :func:`open()` that simulates a full disk."""
    if 'w' in mode:
        return DiskFullHandle()
    return io.open(filename, mode, **kw)


class DiskFullHandle(object):

    """File-like object whose :func:`write()` method always fails."""

    def __enter__(self):
        """Enter the context."""
        return self

    def __exit__(self, exc_type=None, exc_value=None, traceback=None):
        """Leave the context."""

    def write(self, text):
        """Fail to write the text."""
        raise OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))
