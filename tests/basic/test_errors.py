from pathlib import Path

import pytest

from project_renamer.errors import AlreadyExists, InvalidArgument, RenameError, TreeIOError


@pytest.mark.parametrize(
    "cls,kind",
    [
        (InvalidArgument, "InvalidArgument"),
        (AlreadyExists, "AlreadyExists"),
        (TreeIOError, "IOError"),
    ],
)
def test_kinds(cls, kind):
    err = cls("Something failed")
    assert isinstance(err, RenameError)
    assert err.kind == kind
    assert err.path is None
    assert str(err) == "Something failed"


def test_path_is_part_of_message():
    err = AlreadyExists("Destination already exists", Path("/tmp/copied-project"))
    assert str(err) == f"Destination already exists: {Path('/tmp/copied-project')}"
