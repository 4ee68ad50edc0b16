"""
Invoke tasks for setting up and testing the character sheet.
"""

import os
import shutil
import sys
from pathlib import Path
from invoke import task, Context

# Directory structure
PROJECT_ROOT = Path(__file__).parent.resolve()
DATA_PATH = Path(os.environ.get("CHARSHEET_DATA_DIR", PROJECT_ROOT / "data"))


def print_header(message: str) -> None:
    """Print a formatted header message."""
    print("\n" + "=" * 60)
    print(f"  {message}")
    print("=" * 60 + "\n")


@task
def setup(c: Context) -> None:
    """
    Initial setup - write the sample races, armor and characters.
    """
    print_header("Setting up character sheet data")

    setup_script = PROJECT_ROOT / "setup_sample_data.py"
    c.run(f"{sys.executable} {setup_script} {DATA_PATH}", pty=True)

    print("\n✅ Setup complete!")
    print(f"📁 Data: {DATA_PATH}")
    for document in sorted(DATA_PATH.glob("*.json")):
        print(f"  - {document.name}")


@task(help={
    'verbose': 'Show each test name',
    'coverage': 'Report coverage for the charsheet package'
})
def test(c: Context, verbose: bool = False, coverage: bool = False) -> None:
    """
    Run the test suite.
    """
    print_header("Running tests")

    pytest_cmd = f"{sys.executable} -m pytest"
    if verbose:
        pytest_cmd += " -v"
    if coverage:
        pytest_cmd += " --cov=charsheet --cov-report=term-missing --cov-report=html"

    print(f"Running: {pytest_cmd}")
    result = c.run(pytest_cmd, pty=True, warn=True)
    if result.exited != 0:
        sys.exit(result.exited)
    print("\n✅ All tests passed!")


@task
def clean(c: Context) -> None:
    """
    Remove generated data, caches and coverage reports.
    """
    print_header("Cleaning up")

    for path in (DATA_PATH, PROJECT_ROOT / "htmlcov", PROJECT_ROOT / ".pytest_cache"):
        if path.exists():
            shutil.rmtree(path)
            print(f"🗑️  Removed {path}")

    coverage_file = PROJECT_ROOT / ".coverage"
    if coverage_file.exists():
        coverage_file.unlink()
        print(f"🗑️  Removed {coverage_file}")

    print("\n✅ Clean complete!")
