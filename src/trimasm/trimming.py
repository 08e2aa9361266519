from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from trimasm.configuration import TrimConfig, Trimmer
from trimasm.constants import FASTP_EXECUTABLE, ILLUMINACLIP_THRESHOLDS, TRIMMOMATIC_EXECUTABLE
from trimasm.logging_config import logger
from trimasm.samples import Sample, SampleWorkspace
from trimasm.stages import Stage, StageError
from trimasm.utils import remove_files, run_command


@dataclass(frozen=True)
class TrimResult:
    paired_r1: Path
    paired_r2: Path
    unpaired_r1: Path
    unpaired_r2: Path

    @property
    def unpaired(self) -> List[Path]:
        return [self.unpaired_r1, self.unpaired_r2]


class TrimmingBackend(ABC):
    """
    Adapter and quality trimming of one sample.

    Subclasses only construct the command line and name their log files. Both
    backends write the same four outputs (paired and unpaired reads for each
    mate), so the stages after trimming do not depend on the backend.
    """

    name: str
    # Whether the separate FastQC report should run for each sample
    runs_quality_report: bool

    def __init__(self, config: TrimConfig):
        self.config = config

    @abstractmethod
    def build_command(self, sample: Sample, workspace: SampleWorkspace, threads: int) -> List[str]:
        pass

    @abstractmethod
    def log_files(self, workspace: SampleWorkspace) -> Tuple[Path, Path]:
        pass

    def trim(self, sample: Sample, workspace: SampleWorkspace, threads: int) -> TrimResult:
        result = TrimResult(
            paired_r1=workspace.paired_r1,
            paired_r2=workspace.paired_r2,
            unpaired_r1=workspace.unpaired_r1,
            unpaired_r2=workspace.unpaired_r2,
        )

        for read_file in [sample.read1, sample.read2]:
            if not read_file.is_file():
                raise StageError(Stage.TRIM, f"input reads not found: {read_file}")

        cmd = self.build_command(sample, workspace, threads)
        stdout_log, stderr_log = self.log_files(workspace)

        logger.info("Trimming %s with %s", sample.sample_id, self.name)
        try:
            run_command(cmd, stdout_log, stderr_log, Stage.TRIM)
        except StageError:
            # Partial unpaired outputs are never handed on
            remove_files(result.unpaired, Stage.TRIM)
            raise

        missing = [x for x in [result.paired_r1, result.paired_r2] if not x.is_file()]
        if missing:
            remove_files(result.unpaired, Stage.TRIM)
            raise StageError(Stage.TRIM, f"{self.name} did not write {', '.join(str(x) for x in missing)}")

        return result


class TrimmomaticBackend(TrimmingBackend):
    name = "trimmomatic"
    runs_quality_report = True

    def build_command(self, sample: Sample, workspace: SampleWorkspace, threads: int) -> List[str]:
        return [
            TRIMMOMATIC_EXECUTABLE,
            "PE",
            "-threads",
            str(threads),
            f"-phred{self.config.phred}",
            str(sample.read1),
            str(sample.read2),
            str(workspace.paired_r1),
            str(workspace.unpaired_r1),
            str(workspace.paired_r2),
            str(workspace.unpaired_r2),
            *build_trimming_steps(self.config),
        ]

    def log_files(self, workspace: SampleWorkspace) -> Tuple[Path, Path]:
        return workspace.trimmomatic_stdout, workspace.trimmomatic_stderr


class FastpBackend(TrimmingBackend):
    name = "fastp"
    # fastp writes its own JSON/HTML QC report
    runs_quality_report = False

    def build_command(self, sample: Sample, workspace: SampleWorkspace, threads: int) -> List[str]:
        cmd = [
            FASTP_EXECUTABLE,
            "-i",
            str(sample.read1),
            "-I",
            str(sample.read2),
            "-o",
            str(workspace.paired_r1),
            "-O",
            str(workspace.paired_r2),
            "--unpaired1",
            str(workspace.unpaired_r1),
            "--unpaired2",
            str(workspace.unpaired_r2),
            "--json",
            str(workspace.fastp_json),
            "--html",
            str(workspace.fastp_html),
            "-w",
            str(threads),
        ]
        if self.config.detect_adapters:
            cmd.append("--detect_adapter_for_pe")
        return cmd

    def log_files(self, workspace: SampleWorkspace) -> Tuple[Path, Path]:
        return workspace.fastp_stdout, workspace.fastp_stderr


def build_trimming_steps(config: TrimConfig) -> List[str]:
    steps = [
        f"SLIDINGWINDOW:{config.sliding_window}",
        f"LEADING:{config.leading}",
        f"TRAILING:{config.trailing}",
        f"MINLEN:{config.min_length}",
    ]

    # Adapter clipping always comes first
    if config.adapters is not None:
        steps.insert(0, f"ILLUMINACLIP:{config.adapters}:{ILLUMINACLIP_THRESHOLDS}")

    return steps


def get_trimming_backend(config: TrimConfig) -> TrimmingBackend:
    if config.trimmer == Trimmer.TRIMMOMATIC:
        return TrimmomaticBackend(config)
    if config.trimmer == Trimmer.FASTP:
        return FastpBackend(config)
    raise ValueError(f"Unknown trimmer {config.trimmer}")
