import sys
from pathlib import Path

import typer
from typing_extensions import Annotated, Optional

from trimasm.configuration import ConfigurationError, RunConfig, TrimConfig, Trimmer, check_executables, validate_run_config
from trimasm.constants import (
    DEFAULT_LEADING,
    DEFAULT_MIN_LENGTH,
    DEFAULT_PHRED,
    DEFAULT_SLIDING_WINDOW,
    DEFAULT_THREADS,
    DEFAULT_TRAILING,
)
from trimasm.logging_config import logger, set_log_file_handler
from trimasm.pipeline import SampleState, run_pipeline
from trimasm.report import print_settings, print_summary

# Set up the CLI
app = typer.Typer(add_completion=False)

# Exit status typer uses for usage errors
USAGE_ERROR_EXIT_CODE = 2


@app.command(
    epilog="If --trimmer fastp is selected, FastQC is skipped (fastp makes HTML/JSON QC). "
    "All pairs matching *_1.fastq.gz (or .fq.gz, .fastq, .fq) in the input folder are processed."
)
def run(
    raw_data_folder: Annotated[
        Path,
        typer.Argument(
            help="Folder with paired reads named <sample>_1.fastq.gz and <sample>_2.fastq.gz",
            show_default=False,
        ),
    ],
    base_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--base-dir",
            "-b",
            help="Base output directory (default: current directory)",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    threads: Annotated[
        int,
        typer.Option(
            "--threads",
            "-t",
            help="Threads",
        ),
    ] = DEFAULT_THREADS,
    trimmer: Annotated[
        Trimmer,
        typer.Option(
            "--trimmer",
            "-r",
            help="Trimming backend",
            case_sensitive=False,
        ),
    ] = Trimmer.TRIMMOMATIC,
    phred: Annotated[
        int,
        typer.Option(
            "--phred",
            "-p",
            help="Phred offset, 33 or 64 (trimmomatic only)",
        ),
    ] = DEFAULT_PHRED,
    sliding_window: Annotated[
        str,
        typer.Option(
            "--slidingwindow",
            "-w",
            help="Sliding window W:Q (trimmomatic only)",
        ),
    ] = DEFAULT_SLIDING_WINDOW,
    leading: Annotated[
        int,
        typer.Option(
            "--leading",
            "-L",
            help="Leading quality (trimmomatic only)",
        ),
    ] = DEFAULT_LEADING,
    trailing: Annotated[
        int,
        typer.Option(
            "--trailing",
            "-T",
            help="Trailing quality (trimmomatic only)",
        ),
    ] = DEFAULT_TRAILING,
    min_length: Annotated[
        int,
        typer.Option(
            "--minlen",
            "-m",
            help="Minimum read length (trimmomatic only)",
        ),
    ] = DEFAULT_MIN_LENGTH,
    adapters: Annotated[
        Optional[Path],
        typer.Option(
            "--adapters",
            "-A",
            help="ILLUMINACLIP adapters fasta (trimmomatic only)",
            resolve_path=True,
        ),
    ] = None,
    detect_adapters: Annotated[
        bool,
        typer.Option(
            "--detect-adapters",
            "-D",
            help="Enable adapter auto-detection for PE (fastp only)",
        ),
    ] = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option(
            "--log-file",
            "-l",
            help="Path to log file",
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """
    Trim paired-end reads and assemble every sample in RAW_DATA_FOLDER.
    """

    # Setup logging to file
    if log_file is not None:
        set_log_file_handler(logger, log_file)

    # Collect configuration
    config = RunConfig(
        input_dir=raw_data_folder,
        base_dir=base_dir if base_dir is not None else Path.cwd(),
        threads=threads,
        trim=TrimConfig(
            trimmer=trimmer,
            phred=phred,
            sliding_window=sliding_window,
            leading=leading,
            trailing=trailing,
            min_length=min_length,
            adapters=adapters,
            detect_adapters=detect_adapters,
        ),
    )

    # Configuration errors stop the run before any sample is processed
    try:
        validate_run_config(config)
        check_executables(config.trim)
    except ConfigurationError as e:
        raise typer.Exit(code=1) from e

    print_settings(config)

    try:
        outcomes = run_pipeline(config)
    except OSError as e:
        logger.error("Run aborted: %s", e)
        raise typer.Exit(code=1) from e

    print_summary(outcomes)

    # Per-sample failures do not change the exit status
    n_reported = sum(outcome.state == SampleState.REPORTED for outcome in outcomes)
    logger.info("Finished: %d of %d sample(s) reported", n_reported, len(outcomes))


def cli() -> None:
    try:
        app()
    except SystemExit as e:
        # Usage errors (unknown option, missing folder) exit with status 1 instead of 2
        if e.code == USAGE_ERROR_EXIT_CODE:
            sys.exit(1)
        raise


if __name__ == "__main__":
    cli()
