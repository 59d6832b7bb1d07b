"""
Copy a project tree to a renamed sibling.

The walk is depth-first and pre-order: a directory's renamed copy is created
before any of its children are written into it. Every directory and file
name is passed through the ``VariantMap``, and so is the content of every
file that decodes as text. Files that don't decode are copied byte for byte.

There is no rollback. The first failure stops the walk and whatever was
already written stays on disk.
"""

import codecs
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from project_renamer.errors import AlreadyExists, InvalidArgument, TreeIOError

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    directories: int = 0
    text_files: int = 0
    binary_files: int = 0
    substitutions: int = 0

    @property
    def files(self):
        return self.text_files + self.binary_files

    def summary(self):
        return (
            f"{self.directories} directories, {self.text_files} text files,"
            f" {self.binary_files} binary files, {self.substitutions} replacements"
        )


def os_error(message, path, err):
    if isinstance(err, FileExistsError):
        return AlreadyExists("Destination already exists", path)
    reason = err.strerror or str(err)
    return TreeIOError(f"{message} ({reason})", path)


class TreeCopier:
    def __init__(self, variant_map, io=None, encoding="utf-8", dry_run=False):
        try:
            codecs.lookup(encoding)
        except LookupError as err:
            raise InvalidArgument(f"Unknown encoding: {encoding}") from err

        self.variant_map = variant_map
        self.io = io
        self.encoding = encoding
        self.dry_run = dry_run

    def destination_for(self, source_root):
        source_root = Path(os.path.abspath(source_root))
        return source_root.parent / self.variant_map.apply(source_root.name)

    def copy_tree(self, source_root):
        """
        Copy ``source_root`` to its renamed sibling.

        Returns the destination root and a ``CopyReport``. Raises
        ``InvalidArgument`` if the source is not a directory and
        ``AlreadyExists`` if the destination root is already present, in both
        cases before anything is written.
        """
        source_root = Path(os.path.abspath(source_root))
        if not source_root.name:
            raise InvalidArgument("The input can't be a filesystem root", source_root)
        if not source_root.exists():
            raise InvalidArgument("Input directory does not exist", source_root)
        if not source_root.is_dir():
            raise InvalidArgument("Input is not a directory", source_root)

        destination = self.destination_for(source_root)
        if destination == source_root or os.path.lexists(destination):
            raise AlreadyExists("Destination already exists", destination)

        logger.debug("Copying %s to %s", source_root, destination)

        report = CopyReport()
        report.substitutions += self.variant_map.count(source_root.name)
        self._make_dir(destination, report)
        self._copy_children(source_root, destination, report)
        return destination, report

    def _announce(self, message):
        logger.debug(message)
        if self.io and (self.io.verbose or self.dry_run):
            self.io.tool_output(message)

    def _copy_children(self, source_dir, destination_dir, report):
        try:
            with os.scandir(source_dir) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as err:
            raise os_error("Unable to list directory", source_dir, err) from err

        for entry in entries:
            new_name = self.variant_map.apply(entry.name)
            report.substitutions += self.variant_map.count(entry.name)
            self._copy_entry(Path(entry.path), destination_dir / new_name, report)

    def _copy_entry(self, source, destination, report):
        try:
            mode = os.lstat(source).st_mode
        except OSError as err:
            raise os_error("Unable to stat", source, err) from err

        if stat.S_ISLNK(mode):
            raise TreeIOError("Symbolic links are not supported", source)
        if stat.S_ISDIR(mode):
            self._make_dir(destination, report)
            self._copy_children(source, destination, report)
        elif stat.S_ISREG(mode):
            self._copy_file(source, destination, report)
        else:
            raise TreeIOError("Special files are not supported", source)

    def _make_dir(self, destination, report):
        self._announce(f"Creating directory: {destination}")
        report.directories += 1
        if self.dry_run:
            return

        try:
            destination.mkdir()
        except OSError as err:
            raise os_error("Unable to create directory", destination, err) from err

    def _copy_file(self, source, destination, report):
        try:
            content = source.read_bytes()
        except OSError as err:
            raise os_error("Unable to read file", source, err) from err

        try:
            text = content.decode(self.encoding)
        except UnicodeDecodeError:
            text = None

        if text is None:
            self._announce(f"Copying binary file: {destination}")
            report.binary_files += 1
        else:
            self._announce(f"Creating file: {destination}")
            report.text_files += 1
            report.substitutions += self.variant_map.count(text)
            try:
                content = self.variant_map.apply(text).encode(self.encoding)
            except UnicodeEncodeError as err:
                raise TreeIOError(
                    f"Unable to encode renamed content as {self.encoding}", source
                ) from err

        if self.dry_run:
            return

        try:
            with open(destination, "xb") as f:
                f.write(content)
        except OSError as err:
            raise os_error("Unable to write file", destination, err) from err
