#!/usr/bin/env python3
"""
Entry point for the Smart Stock Management stack setup.

Run without a command to perform the full setup: create the backend and
frontend projects, configure them for the compose services, build and
start the containers, wait, migrate, and print the service summary.
"""

import argparse
import logging
import sys
from typing import List, Optional

from common.container_utils import ContainerRuntimeUnavailableError
from common.logging_config import setup_logging
from stack_setup import __version__
from stack_setup.config_loader import load_app_settings
from stack_setup.health import check_endpoints
from stack_setup.orchestrator import SetupOrchestrator
from stack_setup.summary import print_summary


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments. If None, sys.argv[1:] is used.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Set up the Smart Stock Management backend, frontend and services"
    )

    # General options
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to the configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "--project-dir",
        dest="project_dir",
        help="Directory holding the compose file and the subprojects (default: current directory)",
    )
    parser.add_argument(
        "--container-runtime",
        dest="container_runtime",
        help="Container runtime command (default: docker)",
    )
    parser.add_argument(
        "--warmup-seconds",
        dest="warmup_seconds",
        type=int,
        help="Seconds to wait between starting containers and migrating (default: 10)",
    )
    parser.add_argument(
        "--log-file", dest="log_file", help="Also write JSON log lines to this file"
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        dest="command", help="Command to execute (default: run)"
    )

    run_parser = subparsers.add_parser(
        "run", help="Run the setup (all steps by default)"
    )
    run_parser.add_argument(
        "steps", nargs="*", help="Steps to run, with their dependencies"
    )
    run_parser.add_argument(
        "--no-deps",
        action="store_true",
        help="Run only the named steps, not their dependencies",
    )

    subparsers.add_parser("list", help="List setup steps")
    subparsers.add_parser("summary", help="Print service endpoints and credentials")
    subparsers.add_parser("health", help="Check that the HTTP endpoints answer")

    logs_parser = subparsers.add_parser("logs", help="Follow service logs")
    logs_parser.add_argument("service", nargs="?", help="Only this service")

    subparsers.add_parser("down", help="Stop the services")

    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the stack setup.

    Args:
        args: Command-line arguments. If None, sys.argv[1:] is used.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parsed_args = parse_args(args)
    logger = setup_logging(
        "stack_setup",
        verbose=parsed_args.verbose,
        log_file_path=parsed_args.log_file,
    )
    command = parsed_args.command or "run"

    try:
        app_settings = load_app_settings(
            cli_args=parsed_args,
            config_file_path=parsed_args.config,
            current_logger=logger,
        )
        # Reconfigure now that the prefix is known
        logger = setup_logging(
            "stack_setup",
            verbose=parsed_args.verbose,
            log_file_path=parsed_args.log_file,
            log_prefix=app_settings.log_prefix,
        )
        orchestrator = SetupOrchestrator(app_settings, logger)

        if command == "run":
            steps = getattr(parsed_args, "steps", None) or None
            no_deps = getattr(parsed_args, "no_deps", False)
            success = orchestrator.run(steps, with_dependencies=not no_deps)
            return 0 if success else 1

        elif command == "list":
            for name, step_class in orchestrator.get_available_steps().items():
                description = getattr(step_class, "metadata", {}).get(
                    "description", ""
                )
                print(f"  {name.ljust(22)}{description}")
            return 0

        elif command == "summary":
            print_summary(app_settings, completed=False)
            return 0

        elif command == "health":
            results = check_endpoints(app_settings, logger)
            return 0 if all(status is not None for status in results.values()) else 1

        elif command == "logs":
            orchestrator.follow_logs(parsed_args.service)
            return 0

        elif command == "down":
            orchestrator.stop_services()
            return 0

        logger.error(f"Unknown command '{command}'. Use --help for usage information.")
        return 1

    except ContainerRuntimeUnavailableError:
        # Already reported by ensure_container_runtime
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130
    except Exception as e:
        logger.exception(f"Error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
