import argparse
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Sequence


SERVICE_NAME = "log_chain"
DEFAULT_ERROR_LOG = Path("error_log.txt")
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ChainConfig:
    error_log_path: Path = DEFAULT_ERROR_LOG
    log_level: str = "WARNING"


def parse_args(argv: Optional[Sequence[str]] = None) -> ChainConfig:
    parser = argparse.ArgumentParser(
        description="Dispatch one message of each category through the log handler chain."
    )
    parser.add_argument(
        "--error-log",
        type=Path,
        default=DEFAULT_ERROR_LOG,
        help="File that error messages are appended to.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Level of the internal diagnostic logger (written to stderr).",
    )
    args = parser.parse_args(argv)

    return ChainConfig(
        error_log_path=args.error_log,
        log_level=args.log_level,
    )
