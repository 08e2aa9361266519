from enum import Enum


class Stage(str, Enum):
    QC = "qc"
    TRIM = "trim"
    MERGE = "merge"
    ASSEMBLY = "assembly"


class StageError(Exception):
    """
    A pipeline stage failed for one sample.

    Only the sample's remaining stages are abandoned; the driver moves on to
    the next sample.
    """

    def __init__(self, stage: Stage, message: str):
        super().__init__(f"{stage.value} stage failed: {message}")
        self.stage = stage
        self.message = message
