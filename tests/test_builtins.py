"""
Tests for the built-in commands: exit, cd and path.
"""

import os

import pytest

from wish_shell.builtins import BUILTINS, get_builtin
from wish_shell.exceptions import BuiltinUsageError, CommandNotFoundError
from wish_shell.process import Process


def run_builtin(context, name, *operands):
    process = Process(command=name, args=list(operands), context=context,
                      executor=get_builtin(name))
    return process.execute()


class TestRegistry:
    """Test the built-in lookup."""

    def test_known_builtins(self):
        assert set(BUILTINS) == {'exit', 'cd', 'path'}

    def test_lookup_is_case_sensitive(self):
        assert get_builtin('cd') is not None
        assert get_builtin('CD') is None
        assert get_builtin('Exit') is None

    def test_unknown(self):
        assert get_builtin('ls') is None

    def test_process_without_executor(self, context):
        process = Process(command='ls', args=[], context=context)
        with pytest.raises(CommandNotFoundError):
            process.execute()


class TestExit:
    """Test the exit built-in."""

    def test_exit_requests_termination(self, context):
        assert run_builtin(context, 'exit') == 0
        assert context.exit_requested is True

    def test_exit_with_operand_fails(self, context):
        with pytest.raises(BuiltinUsageError):
            run_builtin(context, 'exit', '0')
        assert context.exit_requested is False


class TestCd:
    """Test the cd built-in."""

    def test_cd_to_directory(self, context, tmp_path):
        assert run_builtin(context, 'cd', str(tmp_path)) == 0
        assert os.path.samefile(os.getcwd(), tmp_path)

    def test_cd_without_operand(self, context, workdir):
        with pytest.raises(BuiltinUsageError):
            run_builtin(context, 'cd')
        assert os.path.samefile(os.getcwd(), workdir)

    def test_cd_with_two_operands(self, context, tmp_path, workdir):
        with pytest.raises(BuiltinUsageError):
            run_builtin(context, 'cd', str(tmp_path), str(tmp_path))
        assert os.path.samefile(os.getcwd(), workdir)

    def test_cd_to_missing_directory(self, context):
        with pytest.raises(BuiltinUsageError):
            run_builtin(context, 'cd', 'no-such-dir')

    def test_cd_with_nul_byte(self, context, workdir):
        with pytest.raises(BuiltinUsageError):
            run_builtin(context, 'cd', 'bad\x00dir')
        assert os.path.samefile(os.getcwd(), workdir)


class TestPath:
    """Test the path built-in."""

    def test_path_replaces(self, context):
        run_builtin(context, 'path', '/a', '/b', '/c')
        assert context.path_manager.get_search_path() == ['/a', '/b', '/c']

    def test_path_without_operands_empties(self, context):
        run_builtin(context, 'path')
        assert context.path_manager.is_empty()

    def test_path_never_fails(self, context):
        assert run_builtin(context, 'path', 'relative', '/does/not/exist') == 0
