## commander — CLI integration tests

import os, sys
import json
import subprocess
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def run_cli(*tokens: str, extra_args: list[str] | None = None, env: dict | None = None,
            separator: bool = True) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "commander"]
    if separator:
        args.extend(["--plain", *(extra_args or []), "--"])
    args.extend(tokens)
    merged_env = os.environ.copy()
    merged_env["PYTHONPATH"] = os.pathsep.join(p for p in (str(repo_root() / "src"), merged_env.get("PYTHONPATH")) if p)
    merged_env.setdefault("PYTHONIOENCODING", "utf-8")
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, encoding="utf-8", env=merged_env)


def _strip_output_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_cli_prints_configuration():
    result = run_cli("test", "-test", "--newtest=test", "--doubledash")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == [
        "arguments",
        '  0\t"test"',
        "options",
        "  test\ttrue",
        '  newtest\t"test"',
        "  doubledash\ttrue",
    ]


def test_cli_json_output_with_aliases():
    result = run_cli("x", "-t=test", "-v", extra_args=["--json", "-a", "t=trythisone", "--alias", "v=verbose"])
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"arguments": ["x"], "options": {"trythisone": "test", "verbose": True}}


def test_cli_without_separator_parses_every_argument():
    result = run_cli("--plain", "--json", separator=False)
    assert result.returncode == 0
    assert "options" in result.stdout
    assert "plain" in result.stdout and "json" in result.stdout


def test_cli_verbose_shows_normalized_tokens():
    result = run_cli("arg", "-t=1", extra_args=["-v", "-a", "t=trythisone"])
    assert result.returncode == 0
    assert "-t=1 → trythisone=1" in result.stdout


def test_cli_rejects_malformed_alias():
    result = run_cli("-t", extra_args=["--alias", "nodelimiter"])
    assert result.returncode == 2
    assert "Expected alias as `SHORT=LONG`" in result.stderr


def test_cli_debug_environment_traces_tokens():
    result = run_cli("-x", env={"COMMANDER_DEBUG": "1"})
    assert result.returncode == 0
    assert "'-x' → 'x'" in result.stdout
