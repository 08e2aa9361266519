import subprocess
from pathlib import Path
from typing import List

from trimasm.logging_config import logger
from trimasm.stages import Stage, StageError


def run_command(
    cmd: List[str],
    stdout_log: Path,
    stderr_log: Path,
    stage: Stage,
) -> None:
    # Tool output is kept out of the console and written to per-sample logs
    logger.info("Running: %s", " ".join(cmd))
    try:
        stdout_log.parent.mkdir(parents=True, exist_ok=True)
        stderr_log.parent.mkdir(parents=True, exist_ok=True)
        with open(stdout_log, "w", encoding="utf-8") as out, open(stderr_log, "w", encoding="utf-8") as err:
            subprocess.run(cmd, stdout=out, stderr=err, check=True)
    except subprocess.CalledProcessError as e:
        raise StageError(stage, f"{cmd[0]} exited with code {e.returncode} (see {stderr_log})") from e
    except OSError as e:
        # Executable not found or log directory not writable
        raise StageError(stage, f"could not run {cmd[0]}: {e}") from e


def is_non_empty_file(path: Path) -> bool:
    return path.is_file() and path.stat().st_size > 0


def remove_files(files: List[Path], stage: Stage) -> None:
    for file in files:
        try:
            file.unlink(missing_ok=True)
        except OSError as e:
            raise StageError(stage, f"could not remove {file}: {e}") from e
