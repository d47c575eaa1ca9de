#!/usr/bin/env python3

import argparse
import re
import sys
from pathlib import Path

import semver


def get_version_from_pyproject(pyproject_path: Path) -> str:
    with open(pyproject_path) as f:
        content = f.read()
        match = re.search(r'\[project\].*?version\s*=\s*"([^"]+)"', content, re.DOTALL)
        if not match:
            raise ValueError(f"Could not find version in {pyproject_path}")
        return match.group(1)


def update_version_in_pyproject(pyproject_path: Path, new_version: str) -> None:
    with open(pyproject_path) as f:
        content = f.read()

    new_content = re.sub(
        r'(\[project\].*?)version\s*=\s*"[^"]+"', f'\\1version = "{new_version}"', content, count=1, flags=re.DOTALL
    )

    with open(pyproject_path, "w") as f:
        f.write(new_content)


def main() -> None:
    parser = argparse.ArgumentParser(description="Bump the toolpath package version")
    parser.add_argument(
        "bump_type", choices=["patch", "minor", "major", "prerelease"], help="Type of version bump to perform"
    )
    parser.add_argument("--pyproject", default="pyproject.toml", help="Path to pyproject.toml")
    parser.add_argument("--dry-run", action="store_true", help="Print the new version without writing it")
    args = parser.parse_args()

    project_toml = Path(args.pyproject)
    if not project_toml.exists():
        print(f"Error: Could not find {project_toml}")
        sys.exit(1)

    current_version = get_version_from_pyproject(project_toml)
    new_version = semver.Version.parse(current_version).next_version(args.bump_type)
    print(f"Bumping version from {current_version} to {new_version}")

    if args.dry_run:
        return

    update_version_in_pyproject(project_toml, str(new_version))
    print(f"Updated version in {project_toml} to {new_version}")


if __name__ == "__main__":
    main()
