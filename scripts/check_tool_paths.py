#!/usr/bin/env python3
"""Check where node and claude resolve on this machine."""

from pathlib import Path

from toolpath.config import load_config
from toolpath.runtime import PathResolver, UnsupportedPlatformError
from toolpath.utils import configure_logging


def main():
    """Print the resolved paths and how each was found."""
    config = load_config(Path.cwd())
    configure_logging(config.logging.debug)

    resolver = PathResolver(
        timeout=config.probe_timeout,
        launcher=config.resolver.subsystem_launcher,
    )
    try:
        paths = resolver.resolve(config.node_override, config.claude_override)
    except UnsupportedPlatformError as e:
        print(f"❌ {e}")
        return 1

    print(f"node   → {paths.interpreter_path}  ({paths.interpreter_source.value})")
    print(f"claude → {paths.tool_path}  ({paths.tool_source.value})")
    if paths.uses_subsystem:
        print(f"Launch through: {' '.join(paths.subsystem_prefix)}")
    print()

    degraded = [
        name for name, tool in (("node", "interpreter"), ("claude", "tool"))
        if paths.is_degraded(tool)
    ]
    if degraded:
        print(f"⚠️  Not found, using bare command: {', '.join(degraded)}")
        print("Set node_location / claude_location in .toolpath.toml if they live elsewhere.")
        return 1

    print("✅ Both executables located!")
    print("Run claude with:", " ".join(paths.tool_command("--version")))
    return 0


if __name__ == "__main__":
    exit(main())
