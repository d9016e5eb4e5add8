## cliskel — CLI integration tests

import os, sys
import subprocess
from pathlib import Path

from click.testing import CliRunner

from cliskel.__main__ import cli, dispatch, RuntimeConfig
from cliskel.parser import parse_arguments


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def run_cli(*cli_args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "cliskel", *cli_args]
    merged_env = os.environ.copy()
    merged_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(repo_root() / "src"), merged_env.get("PYTHONPATH")]))
    merged_env["CLISKEL_PLAIN"] = "1"
    merged_env.pop("CLISKEL_DEBUG", None)
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def _strip_output_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_cli_operation_reports_all_values():
    result = run_cli("-x", "-o", "5", "--long-option-with-argument", "hi")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == [
        "option-x: yes", "short argument: 5", "long argument: hi", "arguments:",
    ]
    assert result.stderr == ""


def test_cli_combined_options_and_end_marker():
    result = run_cli("-xo5", "--long-option-with-argument=a=b", "--", "-h", "--c")
    assert result.returncode == 0
    lines = _strip_output_lines(result.stdout)
    assert "short argument: 5" in lines
    assert "long argument: a=b" in lines
    assert "arguments: -h --c" in lines


def test_cli_help_skips_operation():
    result = run_cli("-h", "-x")
    assert result.returncode == 0
    assert result.stdout.startswith("cliskel [OPTION]...")
    assert "option-x:" not in result.stdout


def test_cli_long_help():
    result = run_cli("--help")
    assert result.returncode == 0
    assert "--long-option-with-argument" in result.stdout


def test_cli_unexpected_option_fails():
    result = run_cli("-z")
    assert result.returncode == 1
    assert result.stdout == ""
    assert [line.strip() for line in _strip_output_lines(result.stderr)] == ["ERROR.  Unexpected option `-z`."]


def test_cli_missing_argument_fails():
    result = run_cli("-x", "-o")
    assert result.returncode == 1
    assert "Option `-o` requires an argument." in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_debug_flag_writes_to_stderr():
    result = run_cli("--debug", "-x")
    assert result.returncode == 0
    assert "DEBUG." in result.stderr
    assert "'option_x': True" in result.stderr
    assert "DEBUG." not in result.stdout


def test_cli_debug_from_environment():
    result = run_cli("-x", env={"CLISKEL_DEBUG": "1"})
    assert result.returncode == 0
    assert "Running operation." in result.stderr


def test_cli_runner_keeps_double_dash_tokens():
    result = CliRunner().invoke(cli, ["--", "--", "-x"], env={"CLISKEL_PLAIN": "1"})
    assert result.exit_code == 0
    assert "option-x: no" in result.output
    assert "arguments: -x" in result.output


def test_cli_runner_reports_parse_errors():
    result = CliRunner().invoke(cli, ["--", "--bogus"], env={"CLISKEL_PLAIN": "1"})
    assert result.exit_code == 1
    assert "Unexpected option `--bogus`." in result.output


def test_dispatch_prefers_help(capsys):
    parsed = parse_arguments(["-x", "-h"])
    assert dispatch(parsed, RuntimeConfig(debug=False, plain=True, prog="tool")) == 0
    out = capsys.readouterr().out
    assert out.startswith("tool [OPTION]...")
    assert "option-x:" not in out


def test_runtime_config_from_environ():
    parsed = parse_arguments([])
    config = RuntimeConfig.from_environ(parsed, {"NO_COLOR": "1"})
    assert config == RuntimeConfig(debug=False, plain=True, prog="cliskel")
    config = RuntimeConfig.from_environ(parse_arguments(["--debug"]), {})
    assert config.debug and not config.plain
