# ABOUTME: Child script behind sst test
# ABOUTME: Replaces itself with pytest so signals and exit codes reach the parent

"""Run the app's tests with pytest."""

import importlib.util
import os
import sys


def main(argv: list[str]) -> None:
    if importlib.util.find_spec("pytest") is None:
        print("Could not find pytest. Install it with: pip install pytest", file=sys.stderr)
        sys.exit(1)

    os.execv(sys.executable, [sys.executable, "-m", "pytest", *argv])


if __name__ == "__main__":
    main(sys.argv[1:])
