"""Runtime configuration from command-line flags and the environment."""

import argparse
import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from alice_chess.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENVIRONMENT = {
    "log_file": "ALICE_CHESS_LOG_FILE",
    "log_level": "ALICE_CHESS_LOG_LEVEL",
    "turns": "ALICE_CHESS_TURNS",
    "delay": "ALICE_CHESS_DELAY",
    "seed": "ALICE_CHESS_SEED",
}


class AppConfig(BaseModel):
    """
    Settings for one run of the demo.

    :param log_file: Diagnostic log path, overwritten on startup
    :type log_file: str
    :param log_level: Minimum level written to the log
    :type log_level: str
    :param turns: Random half-moves played per start
    :type turns: int
    :param delay: Seconds between random half-moves
    :type delay: float
    :param origin_x: Column of board 1's origin
    :type origin_x: int
    :param origin_y: Row of board 1's origin
    :type origin_y: int
    :param x_scale: Display columns per square
    :type x_scale: int
    :param y_scale: Display rows per square
    :type y_scale: int
    :param seed: Seed for move selection, random when unset
    :type seed: Optional[int]
    """

    model_config = ConfigDict(frozen=True)

    log_file: str = "text.log"
    log_level: str = "DEBUG"
    turns: int = Field(default=2, ge=0)
    delay: float = Field(default=1.0, ge=0.0)
    origin_x: int = Field(default=2, ge=0)
    origin_y: int = Field(default=1, ge=0)
    x_scale: int = Field(default=2, ge=1)
    y_scale: int = Field(default=1, ge=1)
    seed: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Flags left out default to None so load_config can fall back to the
    environment and then to the AppConfig defaults.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(description="Alice Chess terminal demo")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Diagnostic log file (default: text.log)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Log level (default: DEBUG)")
    parser.add_argument("--turns", type=int, default=None,
                        help="Random half-moves played after each start (default: 2)")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds between random half-moves (default: 1.0)")
    parser.add_argument("--origin", type=int, nargs=2, metavar=("X", "Y"), default=[2, 1],
                        help="Origin of the first board (default: 2 1)")
    parser.add_argument("--scale", type=int, nargs=2, metavar=("X", "Y"), default=[2, 1],
                        help="Display cells per square (default: 2 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random move selection")
    return parser


def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    """
    Parse flags and validate them into an AppConfig.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :type argv: Optional[List[str]]
    :return: Validated configuration
    :rtype: AppConfig
    :raises ConfigurationError: If a value, from a flag or the environment, fails validation
    """
    args = build_parser().parse_args(argv)
    values: Dict[str, Any] = {
        "origin_x": args.origin[0],
        "origin_y": args.origin[1],
        "x_scale": args.scale[0],
        "y_scale": args.scale[1],
    }
    for field, env_name in ENVIRONMENT.items():
        flag_value = getattr(args, field)
        if flag_value is not None:
            values[field] = flag_value
        elif env_name in os.environ:
            # Raw strings; pydantic does the conversion and reports failures
            values[field] = os.environ[env_name]
    try:
        return AppConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
