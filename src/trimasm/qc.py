from typing import List

from trimasm.constants import FASTQC_EXECUTABLE
from trimasm.logging_config import logger
from trimasm.samples import Sample, SampleWorkspace
from trimasm.stages import Stage
from trimasm.utils import run_command


def build_fastqc_command(sample: Sample, workspace: SampleWorkspace, threads: int) -> List[str]:
    return [
        FASTQC_EXECUTABLE,
        "--threads",
        str(threads),
        "--outdir",
        str(workspace.qc_dir),
        str(sample.read1),
        str(sample.read2),
    ]


def run_fastqc(sample: Sample, workspace: SampleWorkspace, threads: int) -> None:
    logger.info("Running FastQC for %s", sample.sample_id)
    cmd = build_fastqc_command(sample, workspace, threads)
    run_command(cmd, workspace.fastqc_stdout, workspace.fastqc_stderr, Stage.QC)
