"""Command-line argument parsing for GitHub Reports."""

import argparse


def build_parser():
    """Build the argument parser with one sub-command per report.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(description="Reports on GitHub users and repositories")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default: INFO, or LOG_LEVEL from the environment)"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON configuration file"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file holding GITHUB_TOKEN (default: ./.env)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    activity = subparsers.add_parser("activity", help="Summarize a user's public events")
    activity.add_argument("username", help="GitHub login")

    repositories = subparsers.add_parser("repositories", help="List a user's public repositories and their languages")
    repositories.add_argument("username", help="GitHub login")
    repositories.add_argument(
        "--forks",
        action="store_true",
        help="Include forked repositories"
    )

    gist = subparsers.add_parser("gist", help="Create a private gist from a file")
    gist.add_argument("file", help="File to upload")
    gist.add_argument(
        "--description", "-d",
        default="",
        help="Gist description"
    )

    for name, help_text in (
        ("starred", "Check whether a repository is starred"),
        ("star", "Star a repository"),
        ("unstar", "Remove the star from a repository"),
    ):
        star_parser = subparsers.add_parser(name, help=help_text)
        star_parser.add_argument("repo", help="Repository as owner/name")

    return parser


def parse_args(argv=None):
    """Parse command-line arguments for GitHub Reports.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Namespace containing the parsed arguments.
    """
    return build_parser().parse_args(argv)
