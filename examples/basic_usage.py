#!/usr/bin/env python3
"""Basic toolpath usage: resolve once, reuse, then launch claude."""

import subprocess
import sys
from pathlib import Path

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from toolpath.runtime import PathResolver, UnsupportedPlatformError


def main():
    resolver = PathResolver()

    try:
        paths = resolver.resolve()
    except UnsupportedPlatformError as e:
        print(e)
        return 1

    print(paths)

    # Second call is served from the cache
    assert resolver.resolve() is paths

    # A user-supplied location bypasses the cache entirely
    custom = resolver.resolve(node_override="/opt/node/bin/node")
    print(f"With override: {custom.interpreter_path}")

    # After settings change, drop the cache
    resolver.invalidate()

    command = paths.tool_command("--version")
    print("Running:", " ".join(command))
    try:
        completed = subprocess.run(command, capture_output=True, text=True)
    except FileNotFoundError:
        print(f"{paths.tool_path} is not installed or not on PATH")
        return 1
    print(completed.stdout or completed.stderr)
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
