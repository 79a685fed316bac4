#!/usr/bin/env python3
"""
Run the CI checks for namedial in the active virtual environment.

Steps:
  1) uv sync --active --all-extras [--frozen when uv.lock exists]
  2) black --check on the package, scripts and tests (line length 120)
  3) mypy on the package
  4) pytest with coverage

Pass step names to run a subset, e.g. ``run_ci_locally.py black pytest``.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

PACKAGE = "namedial"
BLACK_VERSION = "24.8.0"
LINE_LENGTH = "120"
COVERAGE_FLOOR = "85"


def find_repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in [here] + list(here.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here.parent


REPO = find_repo_root()


def uv_command() -> List[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found on PATH. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: List[str], env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def step_sync() -> None:
    args = ["sync", "--active", "--all-extras"]
    if (REPO / "uv.lock").exists():
        args.append("--frozen")
    run(uv_command() + args)


def step_black() -> None:
    targets = [PACKAGE, "scripts", "tests"]
    uvx_path = shutil.which("uvx")
    if uvx_path:
        run([uvx_path, "--from", f"black=={BLACK_VERSION}", "black", *targets, "--check", "--line-length", LINE_LENGTH])
    else:
        run(uv_command() + ["run", "--active", "black", *targets, "--check", "--line-length", LINE_LENGTH])


def step_mypy() -> None:
    run(uv_command() + ["run", "--active", "mypy", PACKAGE, "--ignore-missing-imports"])


def step_pytest() -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv_command()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            f"--cov={PACKAGE}",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
        ],
        env=env,
    )


STEPS = {
    "sync": step_sync,
    "black": step_black,
    "mypy": step_mypy,
    "pytest": step_pytest,
}


def main(argv: List[str]) -> None:
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(f"Unknown steps: {', '.join(unknown)}. Choose from: {', '.join(STEPS)}", file=sys.stderr)
        sys.exit(2)
    for name in selected:
        STEPS[name]()
    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
