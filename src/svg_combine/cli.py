"""Command line interface for svg-combine.

Parses command line arguments, loads the optional configuration file, sets up
logging and runs one sprite build. Returns a process exit code instead of
calling sys.exit so that it can be driven from tests.
"""

import argparse
from collections.abc import Sequence

import yaml
from pydantic import ValidationError

from svg_combine.constants import (
    DEFAULT_CONFIG_FILENAME,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    LOGGER_NAME,
    PROG_NAME,
    VERSION,
)
from svg_combine.exceptions import ConfigurationError, InvalidConfigError, SvgCombineError
from svg_combine.models.config import AppConfig, LoggingConfig
from svg_combine.sprite.builder import SpriteBuilder
from svg_combine.utils.early_error_handler import (
    handle_configuration_error,
    handle_keyboard_interrupt,
)
from svg_combine.utils.logging import setup_logging
from svg_combine.utils.path_utils import validate_config_path

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        The parser for the ``svgcombine`` command.
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Combine SVG files into a single <symbol> sprite",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="SVG files to combine")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="file to write the resulting svg to (default: stdout)",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        type=str,
        default=None,
        help="prefix each symbol's id with this string",
    )
    parser.add_argument(
        "-s",
        "--svgtag",
        type=str,
        default=None,
        help="opening <svg> tag to use for the sprite",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="display version number and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help=f"path to configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: WARNING or config value)",
    )
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load the configuration file and apply command line overrides.

    Args:
        args: Parsed command line arguments.

    Returns:
        The configuration for this run.

    Raises:
        ConfigFileNotFoundError: If an explicitly requested file does not exist.
        InvalidConfigError: If the file cannot be read or fails validation, or
            an override is invalid.
    """
    config_path = validate_config_path(args.config)

    try:
        config = AppConfig.from_yaml(config_path) if config_path else AppConfig()
        config = config.with_overrides(
            prefix=args.prefix,
            output=args.output,
            svg_tag=args.svgtag,
        )
        if args.log_level:
            logging_config = LoggingConfig.model_validate(
                {**config.logging.model_dump(), "level": args.log_level}
            )
            config = config.model_copy(update={"logging": logging_config})
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise InvalidConfigError(
            "Invalid configuration",
            {"path": str(config_path) if config_path else None, "error": str(e)},
        ) from e

    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the ``svgcombine`` command.

    Args:
        argv: Command line arguments without the program name; sys.argv when None.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    # No configuration and no file access for --version
    if args.version:
        print(VERSION)
        return EXIT_SUCCESS

    try:
        config = load_config(args)
    except ConfigurationError as e:
        return handle_configuration_error(e)

    logger = setup_logging(config.logging, LOGGER_NAME)

    try:
        SpriteBuilder(config.sprite).run(args.files)
    except SvgCombineError as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return handle_keyboard_interrupt()

    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
