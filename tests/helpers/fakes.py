"""Fakes for probe commands and the local filesystem."""

import os
import re
import shlex
from typing import Dict, Iterable, List, Optional, Sequence

_TEST_RE = re.compile(r"test (-[fd]) (.+) && echo exists")
_LS_RE = re.compile(r"ls -1 (.+) 2>/dev/null")


def _unquote(rendered: str) -> str:
    """Turn a path rendered by shell_path() back into its ~ form."""
    if rendered == '"$HOME"':
        return "~"
    if rendered.startswith('"$HOME"/'):
        return "~/" + shlex.split(rendered[len('"$HOME"/'):])[0]
    return shlex.split(rendered)[0]


class FakeWsl:
    """Scripted stand-in for `wsl` invocations.

    Simulates a Linux filesystem (files, directories with listings), `which`
    answers and the npm global prefix. Every call is recorded.
    """

    def __init__(
        self,
        files: Iterable[str] = (),
        listings: Optional[Dict[str, List[str]]] = None,
        which: Optional[Dict[str, str]] = None,
        npm_prefix: Optional[str] = None,
        launcher: str = "wsl",
    ):
        self.files = set(files)
        self.listings = dict(listings or {})
        self.which = dict(which or {})
        self.npm_prefix = npm_prefix
        self.launcher = launcher
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str], timeout: float) -> Optional[str]:
        args = list(args)
        self.calls.append(args)
        assert args[0] == self.launcher

        if args[1] == "--":
            command = args[2:]
            if command[0] == "which":
                return self.which.get(command[1])
            if command == ["npm", "config", "get", "prefix"]:
                return self.npm_prefix
            return None

        assert args[1:4] == ["-e", "sh", "-c"]
        script = args[4]

        match = _TEST_RE.fullmatch(script)
        if match:
            flag, path = match.group(1), _unquote(match.group(2))
            exists = path in self.files if flag == "-f" else path in self.listings
            return "exists" if exists else None

        match = _LS_RE.fullmatch(script)
        if match:
            entries = self.listings.get(_unquote(match.group(1)))
            return "\n".join(entries) if entries else None

        return None

    def count(self, *command: str) -> int:
        """Number of calls whose tokens after the launcher start with command."""
        return sum(1 for call in self.calls if call[1:1 + len(command)] == list(command))


class FakeLocalFs:
    """Pretend set of existing local files and directories for LocalProber."""

    def __init__(self, files: Iterable[str] = (), dirs: Optional[Dict[str, List[str]]] = None):
        self.files = {os.path.expanduser(f) for f in files}
        self.dirs = {os.path.expanduser(d): list(v) for d, v in (dirs or {}).items()}

    def is_file(self, prober, path: str) -> bool:
        return os.path.expanduser(path) in self.files

    def is_dir(self, prober, path: str) -> bool:
        return os.path.expanduser(path) in self.dirs

    def list_dirs(self, prober, path: str) -> List[str]:
        return list(self.dirs.get(os.path.expanduser(path), []))


class RecordingRunner:
    """Runner returning canned output per command, recording every call."""

    def __init__(self, outputs: Optional[Dict[tuple, str]] = None):
        self.outputs = dict(outputs or {})
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str], timeout: float) -> Optional[str]:
        self.calls.append(list(args))
        return self.outputs.get(tuple(args))


def always_ok(args: Sequence[str], timeout: float) -> bool:
    return True


def never_ok(args: Sequence[str], timeout: float) -> bool:
    return False
