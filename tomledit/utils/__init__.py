from tomledit.utils.argparse_logger import add_logger_arguments, get_logger_config_from_args
from tomledit.utils.logger import LoggerConfig, setup_root_logger

__all__ = [
    "LoggerConfig",
    "setup_root_logger",
    "add_logger_arguments",
    "get_logger_config_from_args",
]
