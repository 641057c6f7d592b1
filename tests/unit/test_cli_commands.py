"""
Unit tests for CLI commands.
"""

import pytest
import os
import sys
import tempfile
import shutil
from argparse import Namespace
from unittest.mock import patch

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from office_toolkit.cli import convert
from helpers import FakeEngineRun

ENGINE_RUN = 'office_toolkit.engine.subprocess.run'


def make_args(**overrides):
    defaults = dict(
        input_paths=['/docs/report.docx'], to='pdf', output=None, output_dir=None,
        text=False, thumbnail=False, filter=None, binary='soffice', timeout=60,
        temp_dir=None, list_formats=False, verbose=False, quiet=False,
    )
    defaults.update(overrides)
    return Namespace(**defaults)


class TestConvertParser:
    """Test cases for argument parsing and validation."""

    def test_create_parser(self):
        parser = convert.create_parser()
        assert parser is not None
        assert parser.prog == 'office-convert'

    def test_parse_defaults(self):
        args = convert.create_parser().parse_args(['a.docx', '--to', 'pdf'])
        assert args.input_paths == ['a.docx']
        assert args.to == 'pdf'
        assert args.timeout == 2000
        assert args.binary is None

    def test_help_functionality(self):
        parser = convert.create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(['--help'])
        assert exc_info.value.code == 0

    def test_validate_list_formats(self):
        assert convert.validate_arguments(make_args(list_formats=True, input_paths=[])) is True

    def test_validate_no_input(self):
        assert convert.validate_arguments(make_args(input_paths=[])) is False

    def test_validate_needs_target(self):
        assert convert.validate_arguments(make_args(to=None)) is False

    def test_validate_output_with_many_inputs(self):
        args = make_args(input_paths=['a.docx', 'b.docx'], output='x.pdf')
        assert convert.validate_arguments(args) is False

    def test_validate_output_and_output_dir(self):
        assert convert.validate_arguments(make_args(output='x.pdf', output_dir='out')) is False

    def test_validate_text_and_thumbnail(self):
        assert convert.validate_arguments(make_args(text=True, thumbnail=True)) is False

    def test_validate_verbose_and_quiet(self):
        assert convert.validate_arguments(make_args(verbose=True, quiet=True)) is False

    def test_validate_bad_timeout(self):
        assert convert.validate_arguments(make_args(timeout=0)) is False

    def test_validate_text_needs_no_target(self):
        assert convert.validate_arguments(make_args(to=None, text=True)) is True

    def test_list_supported_formats(self, capsys):
        convert.list_supported_formats()
        captured = capsys.readouterr()
        assert "Writer:" in captured.out
        assert "docx" in captured.out
        assert "Total supported input formats" in captured.out


class TestDestinationPath:
    """Test cases for get_destination_path()."""

    def test_explicit_output(self):
        assert convert.get_destination_path('/docs/a.docx', make_args(output='/x/b.pdf')) == '/x/b.pdf'

    def test_output_dir(self):
        path = convert.get_destination_path('/docs/a.docx', make_args(output_dir='/exports'))
        assert path == os.path.join('/exports', 'a.pdf')

    def test_next_to_source(self):
        assert convert.get_destination_path('/docs/a.docx', make_args()) == os.path.join('/docs', 'a.pdf')


class TestConvertMain:
    """Test cases for the office-convert entry point."""

    def setup_method(self):
        self.test_dir = tempfile.mkdtemp()
        self.docx = os.path.join(self.test_dir, "report.docx")
        with open(self.docx, 'wb') as f:
            f.write(b"docx")

    def teardown_method(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_convert_single_file(self):
        fake = FakeEngineRun(content=b"%PDF")

        with patch(ENGINE_RUN, side_effect=fake):
            convert.main([self.docx, '--to', 'pdf', '--binary', 'soffice', '-q'])

        assert os.path.isfile(os.path.join(self.test_dir, "report.pdf"))
        assert fake.last_call[0] == 'soffice'

    def test_convert_to_output_path(self):
        destination = os.path.join(self.test_dir, "out", "final.pdf")
        fake = FakeEngineRun()

        with patch(ENGINE_RUN, side_effect=fake):
            convert.main([self.docx, '--output', destination, '--binary', 'soffice', '-q'])

        assert os.path.isfile(destination)

    def test_text_is_printed(self, capsys):
        fake = FakeEngineRun(content=b"  Hello world \n")

        with patch(ENGINE_RUN, side_effect=fake):
            convert.main([self.docx, '--text', '--binary', 'soffice', '--temp-dir', self.test_dir])

        assert "Hello world" in capsys.readouterr().out

    def test_failure_exits_with_error(self, capsys):
        fake = FakeEngineRun(returncode=1, stdout="boom")

        with patch(ENGINE_RUN, side_effect=fake):
            with pytest.raises(SystemExit) as exc_info:
                convert.main([self.docx, '--to', 'pdf', '--binary', 'soffice'])

        assert exc_info.value.code == 1
        assert "report.docx" in capsys.readouterr().out

    def test_invalid_conversion_exits_with_error(self):
        with patch(ENGINE_RUN) as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                convert.main([self.docx, '--to', 'xlsx', '--binary', 'soffice', '-q'])

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_missing_input_exits_with_error(self):
        with pytest.raises(SystemExit) as exc_info:
            convert.main([os.path.join(self.test_dir, "missing.docx"), '--to', 'pdf', '--binary', 'soffice', '-q'])
        assert exc_info.value.code == 1

    def test_unwritable_output_dir_is_reported_as_failure(self, capsys):
        blocker = os.path.join(self.test_dir, "not-a-directory")
        with open(blocker, 'w') as f:
            f.write("x")
        xlsx = os.path.join(self.test_dir, "budget.xlsx")
        with open(xlsx, 'wb') as f:
            f.write(b"xlsx")

        with patch(ENGINE_RUN) as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                convert.main([self.docx, xlsx, '--to', 'pdf', '--binary', 'soffice',
                              '--output-dir', os.path.join(blocker, 'sub')])

        assert exc_info.value.code == 1
        mock_run.assert_not_called()
        out = capsys.readouterr().out
        assert "report.docx" in out
        assert "budget.xlsx" in out

    def test_invalid_arguments_exit(self):
        with pytest.raises(SystemExit) as exc_info:
            convert.main([self.docx])
        assert exc_info.value.code == 1

    def test_thumbnail_batch(self):
        xlsx = os.path.join(self.test_dir, "budget.xlsx")
        with open(xlsx, 'wb') as f:
            f.write(b"xlsx")
        fake = FakeEngineRun()

        with patch(ENGINE_RUN, side_effect=fake):
            convert.main([self.docx, xlsx, '--thumbnail', '--binary', 'soffice', '-q'])

        assert os.path.isfile(os.path.join(self.test_dir, "report.jpg"))
        assert os.path.isfile(os.path.join(self.test_dir, "budget.jpg"))
        assert len(fake.calls) == 2

    @patch('office_toolkit.cli.convert.find_engine_binary', return_value='/usr/bin/soffice')
    def test_binary_defaults_to_detected_engine(self, mock_find):
        fake = FakeEngineRun()

        with patch(ENGINE_RUN, side_effect=fake):
            convert.main([self.docx, '--to', 'pdf', '-q'])

        assert fake.last_call[0] == '/usr/bin/soffice'
