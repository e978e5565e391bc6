"""Development script to run checks (formatting, linting, tests) and a CLI smoke run."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally the CLI smoke run."""
    parser = argparse.ArgumentParser(
        description="Run development checks and the docpaths CLI."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping the CLI"
    )
    args = parser.parse_args()

    if not args.ci:
        # Auto-formatting and fixing
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(["uv", "run", "pytest"], "Tests")

    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping the CLI run.")
        return

    run_command(
        ["uv", "run", "python", "-m", "docpaths.describe_paths", "dev.py"],
        "CLI Smoke Run",
    )

    print("\n✅ All development checks and the CLI run passed successfully.")


if __name__ == "__main__":
    main()
