import shlex
import sys

import pytest

from softraster.process import CommandError, CommandProcess


def python_command(code):
    return shlex.join([sys.executable, "-c", code])


def run_to_end(process):
    output = []
    for _ in range(100000):
        result = process.update()
        output.extend(result.output)
        if result.exit_code is not None:
            return result.exit_code, "".join(output)
    raise AssertionError("command did not finish")


def test_default_process_is_not_running():
    assert CommandProcess().is_running() is False


def test_update_on_idle_process_raises():
    with pytest.raises(CommandError):
        CommandProcess().update()


def test_successful_command_output_and_exit_code():
    process = CommandProcess.run(python_command("print('hello')"))
    assert process.is_running() is True
    exit_code, output = run_to_end(process)
    assert exit_code == 0
    assert "hello" in output
    assert process.is_running() is False


def test_failing_command_reports_exit_code():
    process = CommandProcess.run(python_command("import sys; sys.exit(3)"))
    exit_code, _ = run_to_end(process)
    assert exit_code == 3


def test_stderr_is_captured():
    process = CommandProcess.run(python_command("import sys; sys.stderr.write('oops')"))
    _, output = run_to_end(process)
    assert "oops" in output


def test_update_after_exit_raises():
    process = CommandProcess.run(python_command("pass"))
    run_to_end(process)
    with pytest.raises(CommandError):
        process.update()


def test_missing_program_raises():
    with pytest.raises(CommandError):
        CommandProcess.run("definitely-not-a-real-program-name-xyz")


def test_empty_command_raises():
    with pytest.raises(CommandError):
        CommandProcess.run("")