"""Configuration from environment variables (.env.local / .env supported)"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .file_reader import MAX_FILE_SIZE as DEFAULT_MAX_FILE_SIZE
from .stemmer.tokenizer import MAX_WORD_LENGTH as DEFAULT_MAX_WORD_LENGTH

PROJECT_ROOT = Path(__file__).parent.parent

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StemmerSettings:
    """Runtime settings shared by the CLI and the HTTP service"""
    verb_pass: bool = True
    max_word_length: Optional[int] = DEFAULT_MAX_WORD_LENGTH  # None = no truncation
    encoding: str = "utf-8"
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    log_level: str = "INFO"
    log_file: str = "logs/porter-lab.log"
    port: int = 8080


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (highest priority) or .env into os.environ.

    Returns:
        Path of the loaded file, or None if neither exists
    """
    for env_file in (root / ".env.local", root / ".env"):
        if env_file.exists():
            load_dotenv(env_file, override=True)
            return env_file
    return None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid {name}={value!r}. "
        f"Valid options: {', '.join(sorted(TRUE_VALUES | FALSE_VALUES))}"
    )


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if number < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {number}")
    return number


def get_settings() -> StemmerSettings:
    """
    Read settings from the environment.

    Config (env vars):
        STEMMER_VERB_PASS: "false" for the canonical six-step algorithm (default: true)
        STEMMER_MAX_WORD_LENGTH: letter-run truncation, 0 disables it (default: 500)
        STEMMER_ENCODING: encoding of input files (default: utf-8)
        STEMMER_MAX_FILE_SIZE: largest readable file in bytes (default: 100MB)
        LOG_LEVEL: console log level (default: INFO)
        LOG_FILE: base path of the rotating log file (default: logs/porter-lab.log)
        PORT: HTTP service port (default: 8080)

    Raises:
        ValueError: If a variable has an invalid value
    """
    max_word_length = _env_int("STEMMER_MAX_WORD_LENGTH", DEFAULT_MAX_WORD_LENGTH)

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(
            f"Invalid LOG_LEVEL={log_level!r}. "
            f"Valid options: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    return StemmerSettings(
        verb_pass=_env_flag("STEMMER_VERB_PASS", True),
        max_word_length=max_word_length or None,
        encoding=os.getenv("STEMMER_ENCODING", "utf-8"),
        max_file_size=_env_int("STEMMER_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE, minimum=1),
        log_level=log_level,
        log_file=os.getenv("LOG_FILE", "logs/porter-lab.log"),
        port=_env_int("PORT", 8080, minimum=1),
    )
