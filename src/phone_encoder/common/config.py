from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

WORDS_ENV = "PHONE_ENCODER_WORDS"
NUMBERS_ENV = "PHONE_ENCODER_NUMBERS"


def get_config_paths() -> dict[str, Path]:
    """Return the conventional sample input locations (relative to the cwd)."""

    tests_dir = Path("tests")
    return {
        "words": tests_dir / "words.txt",
        "numbers": tests_dir / "numbers.txt",
    }


class EncoderSettings(BaseModel):
    words_path: Path
    numbers_path: Path

    @field_validator("words_path", "numbers_path", mode="before")
    def normalize_path(cls, v: object) -> Path:
        raw = str(v).strip() if v is not None else ""
        if not raw:
            raise ValueError("input path must be a non-empty string")
        return Path(raw).expanduser()


def load_settings(
    words_path: Optional[str | Path] = None,
    numbers_path: Optional[str | Path] = None,
    *,
    env_file: str = ".env",
) -> EncoderSettings:
    """Resolve input locations from arguments, environment, then defaults.

    Explicit arguments win. Otherwise ``PHONE_ENCODER_WORDS`` /
    ``PHONE_ENCODER_NUMBERS`` are consulted after loading an optional
    ``.env`` file (existing environment variables are not overridden).
    """
    dotenv_path = find_dotenv(env_file, usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
        logger.debug("Loaded environment file", extra={"path": dotenv_path})

    defaults = get_config_paths()
    words = words_path if words_path is not None else os.environ.get(WORDS_ENV)
    numbers = numbers_path if numbers_path is not None else os.environ.get(NUMBERS_ENV)
    return EncoderSettings(
        words_path=words if words is not None else defaults["words"],
        numbers_path=numbers if numbers is not None else defaults["numbers"],
    )
