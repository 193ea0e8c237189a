import argparse
import dataclasses
from pathlib import Path

from tomledit.utils.logger import LoggerConfig


def add_logger_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    logger_group = parser.add_argument_group("logging options")

    logger_group.add_argument(
        "--log-output",
        nargs="+",
        choices=["stdout", "stderr", "file"],
        default=None,
        help="Logger output destinations",
    )

    logger_group.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to log file (required if 'file' is in --log-output)",
    )

    logger_group.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level",
    )

    logger_group.add_argument(
        "--log-format", type=str, default=None, help="Custom log format string"
    )

    return parser


def get_logger_config_from_args(
    args: argparse.Namespace, base: LoggerConfig | None = None
) -> LoggerConfig:
    """Overlay the logging options given on the command line onto *base*."""
    config = base if base is not None else LoggerConfig()
    overrides = {}

    if args.log_output is not None:
        overrides["output"] = list(args.log_output)
    if args.log_file is not None:
        overrides["file"] = Path(args.log_file)
    if args.log_level is not None:
        overrides["level"] = args.log_level
    if args.log_format is not None:
        overrides["format_string"] = args.log_format

    return dataclasses.replace(config, **overrides)
