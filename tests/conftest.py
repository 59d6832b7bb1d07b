import os
import platform

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch, mocker):
    """Isolate every test from the real home directory, environment and cwd.

    The working directory is a fresh ``work`` folder and ``HOME`` points at a
    sibling ``home`` folder, so no real ``.project-renamer.conf.yml`` or
    ``.env`` file can leak into a test.
    """
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    work = tmp_path / "work"
    work.mkdir()

    clean_env = {key: value for key, value in os.environ.items() if key in ("PATH", "SYSTEMROOT")}
    if platform.system() == "Windows":
        clean_env["USERPROFILE"] = str(fake_home)
    else:
        clean_env["HOME"] = str(fake_home)

    mocker.patch.dict(os.environ, clean_env, clear=True)
    monkeypatch.chdir(work)

    yield work


@pytest.fixture
def sample_project(isolated_env):
    """Generate a test project with this layout

    test-project
    ├── test-dir-1
    │   ├── test-dir-test-project
    │   │   └── test-file-test-project.txt
    │   └── test-file-2.txt
    └── test-file-1.txt
    """
    root = isolated_env / "test-project"
    (root / "test-dir-1" / "test-dir-test-project").mkdir(parents=True)
    (root / "test-dir-1" / "test-file-2.txt").write_text("Test Project")
    (root / "test-file-1.txt").write_text("test-project")
    (root / "test-dir-1" / "test-dir-test-project" / "test-file-test-project.txt").write_text(
        "test_project"
    )
    return root


def snapshot(root):
    """Map every relative path under root to its bytes (None for directories)."""
    result = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for dname in dirnames:
            result[os.path.relpath(os.path.join(dirpath, dname), root)] = None
        for fname in filenames:
            path = os.path.join(dirpath, fname)
            with open(path, "rb") as f:
                result[os.path.relpath(path, root)] = f.read()
    return result


@pytest.fixture
def tree_snapshot():
    return snapshot
