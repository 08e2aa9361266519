import os
import subprocess

import pytest

from trimasm import configuration, utils
from trimasm.constants import FASTP_EXECUTABLE, SPADES_EXECUTABLE, TRIMMOMATIC_EXECUTABLE


class FakeTools:
    """Stand-in for subprocess.run that writes the outputs each tool would write."""

    def __init__(self):
        self.calls = []
        self.failing = []
        self.unpaired_content = b"@read\nACGT\n+\nIIII\n"
        self.n_contigs = 3

    def fail(self, executable, sample_id=None):
        self.failing.append((executable, sample_id))

    def executables(self):
        return [cmd[0] for cmd in self.calls]

    def calls_for(self, executable):
        return [cmd for cmd in self.calls if cmd[0] == executable]

    def should_fail(self, cmd):
        joined = " ".join(cmd)
        for executable, sample_id in self.failing:
            if cmd[0] == executable and (sample_id is None or f"{os.sep}{sample_id}{os.sep}" in joined):
                return True
        return False

    def run(self, cmd, stdout=None, stderr=None, check=False, **kwargs):
        cmd = [str(x) for x in cmd]
        self.calls.append(cmd)

        if self.should_fail(cmd):
            if check:
                raise subprocess.CalledProcessError(1, cmd)
            return subprocess.CompletedProcess(cmd, 1)

        if cmd[0] == TRIMMOMATIC_EXECUTABLE:
            paired_r1, unpaired_r1, paired_r2, unpaired_r2 = cmd[7:11]
            self.write_trimmed(paired_r1, paired_r2, unpaired_r1, unpaired_r2)
        elif cmd[0] == FASTP_EXECUTABLE:
            self.write_trimmed(
                value_after(cmd, "-o"),
                value_after(cmd, "-O"),
                value_after(cmd, "--unpaired1"),
                value_after(cmd, "--unpaired2"),
            )
        elif cmd[0] == SPADES_EXECUTABLE:
            output_dir = value_after(cmd, "-o")
            os.makedirs(output_dir, exist_ok=True)
            with open(os.path.join(output_dir, "contigs.fasta"), "w", encoding="utf-8") as f:
                for i in range(self.n_contigs):
                    f.write(f">NODE_{i + 1}\nACGT\n")

        return subprocess.CompletedProcess(cmd, 0)

    def write_trimmed(self, paired_r1, paired_r2, unpaired_r1, unpaired_r2):
        for paired in [paired_r1, paired_r2]:
            with open(paired, "wb") as f:
                f.write(b"@read\nACGTACGT\n+\nIIIIIIII\n")
        for unpaired in [unpaired_r1, unpaired_r2]:
            with open(unpaired, "wb") as f:
                f.write(self.unpaired_content)


def value_after(cmd, flag):
    return cmd[cmd.index(flag) + 1]


def create_files(files):
    for file in files:
        file.parent.mkdir(parents=True, exist_ok=True)
        file.touch()


@pytest.fixture
def fake_tools(monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(utils.subprocess, "run", tools.run)
    return tools


@pytest.fixture
def tools_on_path(monkeypatch):
    monkeypatch.setattr(configuration.shutil, "which", lambda name: f"/usr/bin/{name}")


@pytest.fixture
def input_dir(tmp_path):
    path = tmp_path / "raw"
    path.mkdir()
    return path


@pytest.fixture
def make_reads(input_dir):
    def _make_reads(names):
        files = [input_dir / name for name in names]
        create_files(files)
        for file in files:
            file.write_bytes(b"@read\nACGTACGT\n+\nIIIIIIII\n")
        return files

    return _make_reads
