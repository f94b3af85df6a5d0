"""Main entry point for rendering virtual gateway configuration."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from mesh_gateway.config.loader import build_gateway, load_config


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the application.

    Logs go to stderr so rendered output on stdout stays machine readable.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Render virtual gateway listener configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -c config/gateway.yaml
  %(prog)s -c config/gateway.yaml --format yaml
  %(prog)s -c config/gateway.yaml --log-level DEBUG
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default="config/gateway.yaml",
        help="Path to configuration file (default: config/gateway.yaml)",
    )

    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    logger = logging.getLogger(__name__)

    try:
        config_path = Path(args.config)
        config = load_config(config_path)
        gateway = build_gateway(config)
        rendered = gateway.render()

    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        return 1

    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1

    if args.format == "yaml":
        sys.stdout.write(yaml.safe_dump(rendered, default_flow_style=False, sort_keys=False))
    else:
        sys.stdout.write(json.dumps(rendered, indent=2) + "\n")

    return 0


def run() -> None:
    """
    Entry point wrapper for running the application.

    This function is used as the console script entry point.
    """
    sys.exit(main())


if __name__ == "__main__":
    run()
