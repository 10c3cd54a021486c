"""Pytest configuration and fixtures for minibuild tests."""

import stat
import sys
import textwrap
from pathlib import Path

import pytest

from minibuild import output

STUB_COMPILER = '''\
#!{python}
"""Stub compiler: writes an empty <name>.out per source into the -d directory."""
import sys
from pathlib import Path

args = sys.argv[1:]
exit_code = {exit_code}
if exit_code:
    print("stubc: failing on purpose", file=sys.stderr)
    sys.exit(exit_code)
dest = Path(args[args.index("-d") + 1])
dest.mkdir(parents=True, exist_ok=True)
for source in args[: args.index("-d")]:
    (dest / (Path(source).name + ".out")).write_text("")
'''


@pytest.fixture(autouse=True)
def _reset_output():
    """Restore stdio and the output module state after each test."""
    yield

    output.set_output_stream(None)
    output.set_verbose(False)
    if sys.stdout.closed:
        sys.stdout = sys.__stdout__
    if sys.stderr.closed:
        sys.stderr = sys.__stderr__


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch):
    """Keep rich from forcing ANSI styling into captured stderr."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


def _write_stub(path: Path, exit_code: int) -> Path:
    if sys.platform == "win32":
        pytest.skip("stub compiler relies on a shebang line")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(STUB_COMPILER).format(python=sys.executable, exit_code=exit_code))
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def stub_compiler(tmp_path):
    """Executable that succeeds and emits one placeholder per source file."""
    return _write_stub(tmp_path / "bin" / "stubc", exit_code=0)


@pytest.fixture
def failing_compiler(tmp_path):
    """Executable that exits with status 2 for any arguments."""
    return _write_stub(tmp_path / "bin" / "failc", exit_code=2)


@pytest.fixture
def project(tmp_path):
    """Project with framework/src/A.src and app/src/B.src."""
    root = tmp_path / "project"
    (root / "framework" / "src").mkdir(parents=True)
    (root / "app" / "src").mkdir(parents=True)
    (root / "framework" / "src" / "A.src").write_text("framework source")
    (root / "app" / "src" / "B.src").write_text("app source")
    return root
