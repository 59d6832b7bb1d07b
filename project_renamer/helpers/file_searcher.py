"""
Search paths for project-renamer's own configuration files.

Config and ``.env`` files may live in the home directory, at the root of the
git repo the command runs in, or in the current directory. Later locations
take precedence over earlier ones.
"""

from pathlib import Path
from typing import List, Optional


def generate_search_path_list(
    default_file: str, git_root: Optional[str], command_line_file: Optional[str]
) -> List[str]:
    """
    List the places to look for ``default_file``, lowest precedence first.

    The order is:
    1. Home directory (~/default_file)
    2. Git root directory (git_root/default_file) if git_root is provided
    3. Current directory (default_file)
    4. The file named on the command line, if any

    Paths are resolved and duplicates dropped, keeping the last (highest
    precedence) occurrence, so running from the home directory or the git
    root doesn't list the same file twice.
    """
    candidates = [Path.home() / default_file]
    if git_root:
        candidates.append(Path(git_root) / default_file)
    candidates.append(Path(default_file))
    if command_line_file:
        candidates.append(Path(command_line_file))

    resolved = []
    for fn in candidates:
        try:
            resolved.append(str(fn.expanduser().resolve()))
        except OSError:
            pass

    files = []
    for fn in reversed(resolved):
        if fn not in files:
            files.append(fn)
    files.reverse()
    return files
