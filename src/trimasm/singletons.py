import shutil
from pathlib import Path

from trimasm.logging_config import logger
from trimasm.stages import Stage, StageError
from trimasm.trimming import TrimResult
from trimasm.utils import is_non_empty_file, remove_files


def merge_singletons(trim_result: TrimResult, singletons: Path) -> Path:
    """
    Fold the unpaired reads of both mates into one singleton file.

    An empty singleton file means there were no unpaired reads. The unpaired
    files are deleted afterwards. If writing the singleton file fails, the
    unpaired files are left in place and the partial singleton file is removed.
    """
    try:
        if any(is_non_empty_file(x) for x in trim_result.unpaired):
            # Concatenated gzip members form a valid gzip stream
            with open(singletons, "wb") as out:
                for unpaired in trim_result.unpaired:
                    if unpaired.is_file():
                        with open(unpaired, "rb") as f:
                            shutil.copyfileobj(f, out)
        else:
            singletons.write_bytes(b"")
    except OSError as e:
        singletons.unlink(missing_ok=True)
        raise StageError(Stage.MERGE, f"could not write {singletons}: {e}") from e

    remove_files(trim_result.unpaired, Stage.MERGE)

    logger.info("Wrote singletons to %s (%d bytes)", str(singletons), singletons.stat().st_size)
    return singletons
