"""
Base command utilities for standardizing CLI interfaces.
"""

import argparse
import logging
import sys
import traceback
from typing import Any, Callable, List, Optional

from dotenv import load_dotenv

from git_mirror.core.config import DEFAULT_GITLAB_URL, get_env_variable, parse_bool
from git_mirror.core.exceptions import ConfigError, MirrorError


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure logging for the application with a standardized format.

    Args:
        level: Logging level (default: INFO)
    """
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=level,
        force=True,
    )


class BaseCommand:
    """Base class for standardizing command-line interfaces."""

    def __init__(
        self,
        description: str,
        epilog: Optional[str] = None,
        formatter_class: Any = argparse.RawDescriptionHelpFormatter,
    ):
        """
        Initialize the base command.

        Args:
            description: Command description for help text
            epilog: Optional epilog text for help output
            formatter_class: Argument parser formatter class
        """
        # Setup logging
        setup_logging()

        # Load environment variables
        load_dotenv()

        # Create parser
        self.parser = argparse.ArgumentParser(
            description=description, epilog=epilog, formatter_class=formatter_class
        )

        # Add common argument groups
        self.connection_group = self.parser.add_argument_group("GitLab Connection")
        self.behavior_group = self.parser.add_argument_group("Behavior")
        self.debug_group = self.parser.add_argument_group("Debug Options")

        # Add standard arguments
        self._add_standard_arguments()

    def _add_standard_arguments(self) -> None:
        """Add standard arguments that apply to most commands."""
        self.connection_group.add_argument(
            "--url",
            help="GitLab URL (default: from GITLAB_URL env var or %s)" % DEFAULT_GITLAB_URL,
            default=get_env_variable("GITLAB_URL") or DEFAULT_GITLAB_URL,
        )
        self.connection_group.add_argument(
            "--private-token",
            help="GitLab private token (default: from GITLAB_PRIVATE_TOKEN env var)",
            default=get_env_variable("GITLAB_PRIVATE_TOKEN"),
        )
        self.connection_group.add_argument(
            "--timeout",
            help="Request timeout in seconds (default: from GITLAB_TIMEOUT env var or 30)",
            type=float,
            default=get_env_variable("GITLAB_TIMEOUT") or 30.0,
        )

        self.debug_group.add_argument("--debug", help="Enable debug logging", action="store_true")

    def add_group_args(self) -> None:
        """Add the group selection arguments."""
        self.connection_group.add_argument(
            "--group",
            help="Group path or id to scan (default: from GITLAB_GROUP env var)",
            default=get_env_variable("GITLAB_GROUP"),
        )
        self.behavior_group.add_argument(
            "--http",
            help="Use HTTP clone URLs as mirror destinations instead of SSH",
            action="store_true",
            default=parse_bool(get_env_variable("GITLAB_USE_HTTP")),
        )

    def add_output_arg(self) -> None:
        """Add output file argument to the parser."""
        self.behavior_group.add_argument(
            "--output",
            help="Also write the mirrors to this CSV file",
            default=None,
        )

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command line arguments.

        Args:
            argv: Arguments to parse, sys.argv when None

        Returns:
            Parsed command line arguments
        """
        args = self.parser.parse_args(argv)

        # Enable debug logging if requested
        if args.debug:
            setup_logging(logging.DEBUG)

        return args

    def run_command(self, command_func: Callable, *args, **kwargs) -> None:
        """
        Run the command function with standardized error handling.

        Args:
            command_func: Function to run
            *args: Positional arguments for the command function
            **kwargs: Keyword arguments for the command function
        """
        try:
            command_func(*args, **kwargs)
        except ConfigError as e:
            logging.error("Configuration error: %s", e)
            sys.exit(1)
        except MirrorError as e:
            logging.error("Mirror discovery failed: %s", e)
            sys.exit(2)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logging.error("Unexpected error: %s", e)
            traceback.print_exc()
            sys.exit(3)
