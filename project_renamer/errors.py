"""Failure kinds reported by project-renamer.

Every error raised while renaming a tree is a ``RenameError``. The ``kind``
attribute is the name shown to the user, and ``path`` is the offending
filesystem entry when there is one.
"""


class RenameError(Exception):
    kind = "RenameError"

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message


class InvalidArgument(RenameError):
    """Malformed or missing input: empty name, missing path, illegal characters."""

    kind = "InvalidArgument"


class AlreadyExists(RenameError):
    """A destination entry is already present."""

    kind = "AlreadyExists"


class TreeIOError(RenameError):
    """Any read, write, create or permission failure during the walk."""

    kind = "IOError"
