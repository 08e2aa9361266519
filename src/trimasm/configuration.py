import re
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

from trimasm.constants import (
    DEFAULT_LEADING,
    DEFAULT_MIN_LENGTH,
    DEFAULT_PHRED,
    DEFAULT_SLIDING_WINDOW,
    DEFAULT_THREADS,
    DEFAULT_TRAILING,
    FASTP_EXECUTABLE,
    FASTQC_EXECUTABLE,
    SPADES_EXECUTABLE,
    TRIMMOMATIC_EXECUTABLE,
    VALID_PHRED_OFFSETS,
)
from trimasm.logging_config import logger


class ConfigurationError(ValueError):
    pass


class Trimmer(str, Enum):
    TRIMMOMATIC = "trimmomatic"
    FASTP = "fastp"


@dataclass(frozen=True)
class TrimConfig:
    trimmer: Trimmer = Trimmer.TRIMMOMATIC

    # Trimmomatic only
    phred: int = DEFAULT_PHRED
    sliding_window: str = DEFAULT_SLIDING_WINDOW
    leading: int = DEFAULT_LEADING
    trailing: int = DEFAULT_TRAILING
    min_length: int = DEFAULT_MIN_LENGTH
    adapters: Path | None = None

    # fastp only
    detect_adapters: bool = False


@dataclass(frozen=True)
class RunConfig:
    input_dir: Path
    base_dir: Path
    threads: int = DEFAULT_THREADS
    trim: TrimConfig = field(default_factory=TrimConfig)


def is_sliding_window_valid(sliding_window: str) -> bool:
    return re.fullmatch(r"\d+:\d+", sliding_window) is not None


def get_trim_config_errors(config: TrimConfig) -> List[str]:
    errors = []

    if not isinstance(config.trimmer, Trimmer):
        errors.append(f"Trimmer must be trimmomatic or fastp (not {config.trimmer})")

    # Phred offset is only passed to trimmomatic
    if config.trimmer == Trimmer.TRIMMOMATIC and config.phred not in VALID_PHRED_OFFSETS:
        errors.append(f"Phred must be 33 or 64 (not {config.phred})")

    if not is_sliding_window_valid(config.sliding_window):
        errors.append(f"Sliding window must be given as W:Q, e.g. 5:30 (not {config.sliding_window})")

    for name, value in [("Leading", config.leading), ("Trailing", config.trailing), ("Minimum length", config.min_length)]:
        if value < 0:
            errors.append(f"{name} must be zero or positive (not {value})")

    if config.adapters is not None and not config.adapters.is_file():
        errors.append(f"Adapters file not found: {config.adapters}")

    return errors


def validate_run_config(config: RunConfig) -> None:
    errors = []

    if not config.input_dir.is_dir():
        errors.append(f"Input folder not found: {config.input_dir}")

    if config.threads < 1:
        errors.append(f"Threads must be at least 1 (not {config.threads})")

    if config.base_dir.exists() and not config.base_dir.is_dir():
        errors.append(f"Base directory is not a directory: {config.base_dir}")

    errors.extend(get_trim_config_errors(config.trim))

    if errors:
        for error in errors:
            logger.error(error)
        raise ConfigurationError("; ".join(errors))


def get_required_executables(trim_config: TrimConfig) -> List[str]:
    # FastQC is skipped when fastp writes its own QC report
    if trim_config.trimmer == Trimmer.FASTP:
        return [FASTP_EXECUTABLE, SPADES_EXECUTABLE]
    return [FASTQC_EXECUTABLE, TRIMMOMATIC_EXECUTABLE, SPADES_EXECUTABLE]


def check_executables(trim_config: TrimConfig) -> None:
    missing = [x for x in get_required_executables(trim_config) if shutil.which(x) is None]
    if missing:
        logger.error("Required executables not found on PATH: %s", ", ".join(missing))
        raise ConfigurationError(f"Required executables not found on PATH: {', '.join(missing)}")
