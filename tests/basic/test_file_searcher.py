from pathlib import Path

from project_renamer.helpers.file_searcher import generate_search_path_list


def test_search_order(isolated_env, tmp_path):
    git_root = tmp_path / "repo"

    files = generate_search_path_list(".project-renamer.conf.yml", str(git_root), "custom.yml")

    assert files == [
        str((Path.home() / ".project-renamer.conf.yml").resolve()),
        str((git_root / ".project-renamer.conf.yml").resolve()),
        str((isolated_env / ".project-renamer.conf.yml").resolve()),
        str((isolated_env / "custom.yml").resolve()),
    ]


def test_without_git_root_or_command_line_file(isolated_env):
    files = generate_search_path_list(".env", None, None)

    assert files == [
        str((Path.home() / ".env").resolve()),
        str((isolated_env / ".env").resolve()),
    ]


def test_duplicates_keep_highest_precedence(isolated_env):
    # running from the git root lists the file once, in the cwd slot
    files = generate_search_path_list(".env", str(isolated_env), ".env")

    assert files == [
        str((Path.home() / ".env").resolve()),
        str((isolated_env / ".env").resolve()),
    ]


def test_expands_user(isolated_env):
    files = generate_search_path_list(".env", None, "~/other.env")

    assert files[-1] == str((Path.home() / "other.env").resolve())
