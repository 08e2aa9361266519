from pathlib import Path
from typing import List

from trimasm.constants import SPADES_EXECUTABLE
from trimasm.logging_config import logger
from trimasm.samples import SampleWorkspace
from trimasm.stages import Stage
from trimasm.trimming import TrimResult
from trimasm.utils import is_non_empty_file, run_command


def build_spades_command(
    trim_result: TrimResult,
    singletons: Path,
    output_dir: Path,
    threads: int,
) -> List[str]:
    cmd = [
        SPADES_EXECUTABLE,
        "-1",
        str(trim_result.paired_r1),
        "-2",
        str(trim_result.paired_r2),
        "-o",
        str(output_dir),
        "--only-assembler",
        "-t",
        str(threads),
    ]

    # An empty singleton file is never passed on
    if is_non_empty_file(singletons):
        cmd.extend(["-s", str(singletons)])

    return cmd


def run_spades(
    trim_result: TrimResult,
    singletons: Path,
    workspace: SampleWorkspace,
    threads: int,
) -> Path:
    logger.info("Assembling %s with SPAdes", workspace.sample.sample_id)
    cmd = build_spades_command(trim_result, singletons, workspace.spades_dir, threads)
    run_command(cmd, workspace.spades_stdout, workspace.spades_stderr, Stage.ASSEMBLY)
    return workspace.contigs
