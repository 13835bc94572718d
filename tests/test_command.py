import io
import sys

import pytest

from dxtool.command import Command, CommandError, DefaultCommandRunner


def _python(code):
    return Command(name=sys.executable, args=["-c", code])


def test_run_returns_trimmed_output():
    command = _python("print('  hello  ')")
    assert DefaultCommandRunner().run_without_retry(command) == "hello"
    assert command.attempts == 1
    assert command.did_error() is False
    assert command.last_error() is None


def test_run_failure_records_error():
    command = _python("import sys; print('bad'); sys.exit(3)")
    with pytest.raises(CommandError) as info:
        DefaultCommandRunner().run_without_retry(command)
    assert info.value.output == "bad"
    assert command.attempts == 1
    assert command.did_error() is True
    assert command.did_fail() is True
    assert command.last_error() is info.value


def test_missing_program_raises_command_error(tmp_path):
    command = Command(name=str(tmp_path / "no-such-program"))
    with pytest.raises(CommandError):
        DefaultCommandRunner().run_without_retry(command)
    assert len(command.errors) == 1


def test_env_is_passed_to_child():
    command = _python("import os; print(os.environ['DX_TEST_VALUE'])")
    command.set_env_variable("DX_TEST_VALUE", "abc")
    assert DefaultCommandRunner().run_without_retry(command) == "abc"


def test_out_stream_receives_output():
    out = io.StringIO()
    command = _python("print('streamed')")
    command.out = out
    assert DefaultCommandRunner().run_without_retry(command) == ""
    assert out.getvalue().strip() == "streamed"


def test_stdin_stream_is_read():
    command = _python("import sys; print(sys.stdin.read().upper())")
    command.stdin = io.StringIO("piped")
    assert DefaultCommandRunner().run_without_retry(command) == "PIPED"


def test_dir_is_used(tmp_path):
    command = _python("import os; print(os.getcwd())")
    command.dir = str(tmp_path)
    result = DefaultCommandRunner().run_without_retry(command)
    assert result.endswith(tmp_path.name)


def test_did_fail_false_after_mixed_attempts():
    runner = DefaultCommandRunner()
    command = _python("import os, sys; sys.exit(0 if os.environ.get('OK') else 1)")
    with pytest.raises(CommandError):
        runner.run_without_retry(command)
    command.set_env_variable("OK", "1")
    runner.run_without_retry(command)
    assert command.attempts == 2
    assert command.did_error() is True
    assert command.did_fail() is False


def test_command_str_includes_env_and_args():
    command = Command(name="git", args=["status", "-s"])
    command.set_env_variable("A", "1")
    assert str(command) == "A=1 git status -s"


def test_command_error_sanitises_password():
    command = Command(name="git", args=["--password", "hunter"], dir="/tmp")
    error = CommandError(command, "out")
    assert str(error) == "failed to run 'git --password *****' command in directory '/tmp', output: 'out'"
    assert command.args == ["--password", "hunter"]


def test_command_error_password_last_arg_kept():
    command = Command(name="tool", args=["--password"])
    assert "--password" in str(CommandError(command))
    assert "*****" not in str(CommandError(command))