from pathlib import Path
from typing import TYPE_CHECKING, List

from rich.console import Console
from rich.table import Table

from trimasm.configuration import RunConfig, Trimmer
from trimasm.logging_config import logger

if TYPE_CHECKING:
    from trimasm.pipeline import SampleOutcome

console = Console()


def count_contigs(contigs: Path) -> int:
    with open(contigs, "r", encoding="utf-8") as f:
        return sum(1 for line in f if line.startswith(">"))


def report_contigs(sample_id: str, contigs: Path) -> int | None:
    # Diagnostic only, a missing assembly does not fail the sample
    if not contigs.is_file():
        logger.warning("%s not found for %s", contigs.name, sample_id)
        return None

    try:
        n_contigs = count_contigs(contigs)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s for %s: %s", str(contigs), sample_id, e)
        return None

    logger.info("Contigs: %d", n_contigs)
    return n_contigs


def print_settings(config: RunConfig) -> None:
    table = Table(title="Settings", show_header=False, title_justify="left")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("Base dir", str(config.base_dir))
    table.add_row("Input folder", str(config.input_dir))
    table.add_row("Threads", str(config.threads))
    table.add_row("Trimmer", config.trim.trimmer.value)

    if config.trim.trimmer == Trimmer.TRIMMOMATIC:
        trimmomatic_settings = (
            f"-phred{config.trim.phred} SLIDINGWINDOW:{config.trim.sliding_window} "
            f"LEADING:{config.trim.leading} TRAILING:{config.trim.trailing} MINLEN:{config.trim.min_length}"
        )
        table.add_row("Trimmomatic", trimmomatic_settings)
        if config.trim.adapters is not None:
            table.add_row("Adapters", str(config.trim.adapters))
    else:
        table.add_row("fastp", f"detect_adapters={str(config.trim.detect_adapters).lower()} (FastQC skipped)")

    console.print(table)


def print_summary(outcomes: List["SampleOutcome"]) -> None:
    table = Table(title="Summary", title_justify="left")
    table.add_column("Sample")
    table.add_column("State")
    table.add_column("Failed stage")
    table.add_column("Contigs", justify="right")

    for outcome in outcomes:
        table.add_row(
            outcome.sample_id,
            outcome.state.value,
            outcome.failed_stage.value if outcome.failed_stage is not None else "",
            str(outcome.contig_count) if outcome.contig_count is not None else "",
        )

    console.print(table)
