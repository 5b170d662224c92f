"""
Command-line interface for the git mirror tool.
"""

from typing import List, Optional

from git_mirror.cli.base_command import BaseCommand
from git_mirror.cli.commands.list_command import list_command


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI tool."""
    command = BaseCommand(
        description="List the repository mirrors described by a GitLab group",
        epilog="Each project description is read as YAML with an `origin` key "
        "and an optional `skip` flag.",
    )
    command.add_group_args()
    command.add_output_arg()

    args = command.parse_args(argv)

    command.run_command(
        list_command,
        url=args.url,
        group=args.group,
        use_http=args.http,
        private_token=args.private_token,
        timeout=args.timeout,
        output=args.output,
    )


if __name__ == "__main__":
    main()
