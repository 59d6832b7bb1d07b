import argparse

import configargparse
import shtab

from project_renamer import __version__

ENV_VAR_PREFIX = "PROJECT_RENAMER_"


def get_parser(default_config_files):
    parser = configargparse.ArgumentParser(
        description=(
            "project-renamer copies a project directory to a renamed sibling, replacing the"
            " project name in file names, directory names and file contents."
        ),
        add_config_file_help=True,
        default_config_files=default_config_files,
        config_file_parser_class=configargparse.YAMLConfigFileParser,
        auto_env_var_prefix=ENV_VAR_PREFIX,
    )

    ##########
    group = parser.add_argument_group("Main")
    group.add_argument(
        "-i",
        "--input",
        metavar="INPUT",
        help="Path of the project directory to copy (example: path/to/old-project)",
    ).complete = shtab.DIRECTORY
    group.add_argument(
        "-n",
        "--name",
        metavar="NAME",
        help="New name of the project (example: new-project)",
    )
    group.add_argument(
        "--old-name",
        metavar="OLD_NAME",
        default=None,
        help="Name to replace (default: the base name of the input directory)",
    )
    group.add_argument(
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show what would be created without writing anything (default: False)",
    )

    ##########
    group = parser.add_argument_group("Output settings")
    group.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Enable/disable pretty, colorized output (default: True)",
    )
    group.add_argument(
        "--tool-output-color",
        default=None,
        help="Set the color for tool output (default: None)",
    )
    group.add_argument(
        "--tool-error-color",
        default="#FF2222",
        help="Set the color for tool error messages (default: #FF2222)",
    )
    group.add_argument(
        "--tool-warning-color",
        default="#FFA500",
        help="Set the color for tool warning messages (default: #FFA500)",
    )

    ##########
    group = parser.add_argument_group("Other settings")
    group.add_argument(
        "-c",
        "--config",
        is_config_file=True,
        metavar="CONFIG_FILE",
        help=(
            "Specify the config file (default: search for .project-renamer.conf.yml in git"
            " root, cwd or home directory)"
        ),
    ).complete = shtab.FILE
    group.add_argument(
        "--env-file",
        metavar="ENV_FILE",
        default=".env",
        help="Specify the .env file to load (default: .env in git root)",
    ).complete = shtab.FILE
    group.add_argument(
        "--encoding",
        default="utf-8",
        help="Specify the encoding for file contents and .env files (default: utf-8)",
    )
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
        default=False,
    )
    group.add_argument(
        "--shell-completions",
        metavar="SHELL",
        choices=shtab.SUPPORTED_SHELLS,
        help=(
            "Print shell completion script for the specified SHELL and exit. Supported shells:"
            f" {', '.join(shtab.SUPPORTED_SHELLS)}. Example: project-renamer"
            " --shell-completions bash"
        ),
    )
    group.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version number and exit",
    )

    return parser
