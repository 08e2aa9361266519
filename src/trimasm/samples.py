from dataclasses import dataclass, field
from pathlib import Path
from typing import Generator, List

import trimasm.filenames as fn
from trimasm.constants import READ1_TAG, READ2_TAG, READ_EXTENSIONS
from trimasm.logging_config import logger


@dataclass(frozen=True)
class Sample:
    sample_id: str
    read1: Path
    read2: Path


@dataclass
class SampleWorkspace:
    # Input attributes
    sample: Sample
    base_dir: Path

    # Derived attributes
    # General
    output_dir: Path = field(init=False)

    # Quality report
    qc_dir: Path = field(init=False)
    fastqc_stdout: Path = field(init=False)
    fastqc_stderr: Path = field(init=False)

    # Trimming
    trim_dir: Path = field(init=False)
    paired_r1: Path = field(init=False)
    paired_r2: Path = field(init=False)
    unpaired_r1: Path = field(init=False)
    unpaired_r2: Path = field(init=False)
    singletons: Path = field(init=False)
    trimmomatic_stdout: Path = field(init=False)
    trimmomatic_stderr: Path = field(init=False)
    fastp_stdout: Path = field(init=False)
    fastp_stderr: Path = field(init=False)
    fastp_json: Path = field(init=False)
    fastp_html: Path = field(init=False)

    # Assembly
    asm_dir: Path = field(init=False)
    spades_dir: Path = field(init=False)
    spades_stdout: Path = field(init=False)
    spades_stderr: Path = field(init=False)
    contigs: Path = field(init=False)

    def __post_init__(self):
        # General
        self.output_dir = self.base_dir / self.sample.sample_id

        # Quality report
        self.qc_dir = self.output_dir / fn.QC_DIR
        self.fastqc_stdout = self.qc_dir / fn.FASTQC_STDOUT
        self.fastqc_stderr = self.qc_dir / fn.FASTQC_STDERR

        # Trimming
        self.trim_dir = self.output_dir / fn.TRIM_DIR
        self.paired_r1 = self.trim_dir / fn.PAIRED_R1
        self.paired_r2 = self.trim_dir / fn.PAIRED_R2
        self.unpaired_r1 = self.trim_dir / fn.UNPAIRED_R1
        self.unpaired_r2 = self.trim_dir / fn.UNPAIRED_R2
        self.singletons = self.trim_dir / fn.SINGLETONS
        self.trimmomatic_stdout = self.trim_dir / fn.TRIMMOMATIC_STDOUT
        self.trimmomatic_stderr = self.trim_dir / fn.TRIMMOMATIC_STDERR
        self.fastp_stdout = self.trim_dir / fn.FASTP_STDOUT
        self.fastp_stderr = self.trim_dir / fn.FASTP_STDERR
        self.fastp_json = self.trim_dir / fn.FASTP_JSON
        self.fastp_html = self.trim_dir / fn.FASTP_HTML

        # Assembly
        self.asm_dir = self.output_dir / fn.ASM_DIR
        self.spades_dir = self.asm_dir / fn.SPADES_DIR
        self.spades_stdout = self.asm_dir / fn.SPADES_STDOUT
        self.spades_stderr = self.asm_dir / fn.SPADES_STDERR
        self.contigs = self.spades_dir / fn.CONTIGS

    def setup(self, with_qc_dir: bool) -> None:
        directories = [self.trim_dir, self.asm_dir]
        if with_qc_dir:
            directories.append(self.qc_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)


def get_read_extension(path: Path) -> str | None:
    return next((ext for ext in READ_EXTENSIONS if path.name.endswith(READ1_TAG + ext)), None)


def get_sample_id(read1: Path) -> str:
    ext = get_read_extension(read1)
    if ext is None:
        raise ValueError(f"{read1} does not follow the <sample_id>{READ1_TAG}.<ext> naming convention")
    return read1.name[: -len(READ1_TAG + ext)]


def get_mate_path(read1: Path) -> Path:
    sample_id = get_sample_id(read1)
    ext = get_read_extension(read1)
    return read1.parent / f"{sample_id}{READ2_TAG}{ext}"


def get_read1_files(input_dir: Path) -> List[Path]:
    read1_files = [path for path in input_dir.iterdir() if path.is_file() and get_read_extension(path) is not None]
    return sorted(read1_files)


def find_samples(input_dir: Path) -> Generator[Sample, None, None]:
    found_ids = set()
    for read1 in get_read1_files(input_dir):
        read2 = get_mate_path(read1)
        sample_id = get_sample_id(read1)

        # Samples that cannot get a working directory of their own are skipped, discovery continues
        if not sample_id:
            logger.warning("Skipping %s: empty sample id", read1.name)
            continue

        if sample_id in found_ids:
            logger.warning("Skipping %s: duplicate sample id (%s)", sample_id, str(read1))
            continue

        if not read2.is_file():
            logger.warning("Skipping %s: mate not found (%s)", sample_id, str(read2))
            continue

        found_ids.add(sample_id)
        yield Sample(sample_id=sample_id, read1=read1, read2=read2)
