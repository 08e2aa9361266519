from dataclasses import dataclass
from enum import Enum
from typing import List

from trimasm.assembly import run_spades
from trimasm.configuration import RunConfig
from trimasm.logging_config import logger
from trimasm.qc import run_fastqc
from trimasm.report import report_contigs
from trimasm.samples import Sample, SampleWorkspace, find_samples
from trimasm.singletons import merge_singletons
from trimasm.stages import Stage, StageError
from trimasm.trimming import TrimmingBackend, get_trimming_backend


class SampleState(str, Enum):
    DISCOVERED = "discovered"
    TRIMMED = "trimmed"
    MERGED = "merged"
    ASSEMBLED = "assembled"
    REPORTED = "reported"
    FAILED = "failed"


# Samples move strictly forward; any non-terminal state may fail
TRANSITIONS = {
    SampleState.DISCOVERED: (SampleState.TRIMMED, SampleState.FAILED),
    SampleState.TRIMMED: (SampleState.MERGED, SampleState.FAILED),
    SampleState.MERGED: (SampleState.ASSEMBLED, SampleState.FAILED),
    SampleState.ASSEMBLED: (SampleState.REPORTED, SampleState.FAILED),
}


@dataclass
class SampleOutcome:
    sample_id: str
    state: SampleState = SampleState.DISCOVERED
    failed_stage: Stage | None = None
    contig_count: int | None = None
    message: str = ""

    def advance(self, state: SampleState) -> None:
        if state not in TRANSITIONS.get(self.state, ()):
            raise ValueError(f"Invalid transition for {self.sample_id}: {self.state.value} -> {state.value}")
        self.state = state

    def fail(self, error: StageError) -> None:
        self.advance(SampleState.FAILED)
        self.failed_stage = error.stage
        self.message = error.message


def process_sample(
    sample: Sample,
    config: RunConfig,
    backend: TrimmingBackend,
) -> SampleOutcome:
    logger.info("Processing %s ...", sample.sample_id)

    outcome = SampleOutcome(sample.sample_id)
    workspace = SampleWorkspace(sample, config.base_dir)

    try:
        # Setup output directories
        try:
            workspace.setup(with_qc_dir=backend.runs_quality_report)
        except OSError as e:
            raise StageError(Stage.TRIM, f"could not create {workspace.output_dir}: {e}") from e

        # Quality report (skipped when fastp reports QC itself)
        if backend.runs_quality_report:
            run_fastqc(sample, workspace, config.threads)

        # Trimming
        trim_result = backend.trim(sample, workspace, config.threads)
        outcome.advance(SampleState.TRIMMED)

        # Singletons
        singletons = merge_singletons(trim_result, workspace.singletons)
        outcome.advance(SampleState.MERGED)

        # Assembly
        contigs = run_spades(trim_result, singletons, workspace, config.threads)
        outcome.advance(SampleState.ASSEMBLED)

    except StageError as e:
        logger.warning("Sample %s failed: %s. Continuing with next sample.", sample.sample_id, str(e))
        outcome.fail(e)
        return outcome

    # Post-assembly
    outcome.contig_count = report_contigs(sample.sample_id, contigs)
    outcome.advance(SampleState.REPORTED)

    return outcome


def run_pipeline(config: RunConfig) -> List[SampleOutcome]:
    config.base_dir.mkdir(parents=True, exist_ok=True)

    # One backend for the whole run
    backend = get_trimming_backend(config.trim)

    outcomes = []
    for sample in find_samples(config.input_dir):
        outcome = process_sample(sample, config, backend)
        outcomes.append(outcome)

    if not outcomes:
        logger.warning("No sample pairs found in %s", str(config.input_dir))

    return outcomes
