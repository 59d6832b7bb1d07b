import codecs
import logging
import os
import sys
from pathlib import Path

try:
    import git
except ImportError:
    git = None
import shtab
from dotenv import load_dotenv

from project_renamer.args import get_parser
from project_renamer.copier import TreeCopier
from project_renamer.errors import InvalidArgument, RenameError
from project_renamer.helpers.file_searcher import generate_search_path_list
from project_renamer.io import InputOutput
from project_renamer.variants import build_variant_map

CONF_FNAME = ".project-renamer.conf.yml"


def get_git_root():
    """Try and guess the git repo, since the conf.yml can be at the repo root"""
    if git is None:
        return None
    try:
        repo = git.Repo(search_parent_directories=True)
        return repo.working_tree_dir
    except (git.InvalidGitRepositoryError, FileNotFoundError):
        return None


def load_dotenv_files(git_root, dotenv_fname, encoding="utf-8"):
    dotenv_files = generate_search_path_list(".env", git_root, dotenv_fname)
    loaded = []
    for fname in dotenv_files:
        try:
            if Path(fname).exists():
                load_dotenv(fname, override=True, encoding=encoding)
                loaded.append(fname)
        except OSError as e:
            print(f"OSError loading {fname}: {e}")
        except Exception as e:
            print(f"Error loading {fname}: {e}")
    return loaded


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def rename_project(args, io):
    if not args.input:
        raise InvalidArgument("Missing input directory, use --input PATH")
    if args.name is None:
        raise InvalidArgument("Missing new project name, use --name NAME")

    source = Path(os.path.abspath(Path(args.input).expanduser()))
    if not source.is_dir():
        raise InvalidArgument("Input is not an existing directory", source)

    old_name = args.old_name if args.old_name is not None else source.name
    variant_map = build_variant_map(old_name, args.name)

    if args.verbose:
        io.tool_output(f"Replacing {len(variant_map)} name variants:")
        for old, new in variant_map:
            io.tool_output(f"  - {old!r} -> {new!r}")

    copier = TreeCopier(variant_map, io=io, encoding=args.encoding, dry_run=args.dry_run)
    destination, report = copier.copy_tree(source)

    if args.dry_run:
        io.tool_output(f"Dry run, would copy {source} to {destination}")
    else:
        io.tool_output(f"Copied {source} to {destination}", bold=True)
    io.tool_output(report.summary())
    return destination, report


def main(argv=None, output=None, force_git_root=None):
    if argv is None:
        argv = sys.argv[1:]

    if force_git_root:
        git_root = force_git_root
    else:
        git_root = get_git_root()

    default_config_files = generate_search_path_list(CONF_FNAME, git_root, None)
    parser = get_parser(default_config_files)
    args, unknown = parser.parse_known_args(argv)

    try:
        codecs.lookup(args.encoding)
    except LookupError:
        io = InputOutput(pretty=args.pretty, tool_error_color=args.tool_error_color, output=output)
        err = InvalidArgument(f"Unknown encoding: {args.encoding}")
        io.tool_error(f"{err.kind}: {err}")
        return 1

    # .env files can set PROJECT_RENAMER_* variables, so parse again once they're loaded
    loaded_dotenvs = load_dotenv_files(git_root, args.env_file, args.encoding)
    args, unknown = parser.parse_known_args(argv)

    setup_logging(args.verbose)

    if args.shell_completions:
        parser.prog = "project-renamer"
        print(shtab.complete(parser, shell=args.shell_completions))
        return 0

    io = InputOutput(
        pretty=args.pretty,
        tool_output_color=args.tool_output_color,
        tool_error_color=args.tool_error_color,
        tool_warning_color=args.tool_warning_color,
        verbose=args.verbose,
        output=output,
    )

    if unknown:
        io.tool_warning(f"Unknown args: {' '.join(unknown)}")

    if args.verbose:
        io.tool_output("Config files search order, if no --config:")
        for file in reversed(default_config_files):
            exists = "(exists)" if Path(file).exists() else ""
            io.tool_output(f"  - {file} {exists}")
        for fname in loaded_dotenvs:
            io.tool_output(f"Loaded {fname}")

    try:
        rename_project(args, io)
    except RenameError as err:
        io.tool_error(f"{err.kind}: {err}")
        return 1

    return 0


if __name__ == "__main__":
    status = main()
    sys.exit(status)
