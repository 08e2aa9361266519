# Description: Filenames used in the per-sample output layout.

# Sample directory
QC_DIR = "QC"
TRIM_DIR = "trim"
ASM_DIR = "asm"

# Quality report
FASTQC_STDOUT = "fastqc.stdout.log"
FASTQC_STDERR = "fastqc.stderr.log"

# Trimming
PAIRED_R1 = "r1.paired.fq.gz"
PAIRED_R2 = "r2.paired.fq.gz"
UNPAIRED_R1 = "r1_unpaired.fq.gz"
UNPAIRED_R2 = "r2_unpaired.fq.gz"
SINGLETONS = "singletons.fq.gz"

# Trimmomatic
TRIMMOMATIC_STDOUT = "trimmo.stdout.log"
TRIMMOMATIC_STDERR = "trimmo.stderr.log"

# fastp
FASTP_STDOUT = "fastp.stdout.log"
FASTP_STDERR = "fastp.stderr.log"
FASTP_JSON = "fastp.json"
FASTP_HTML = "fastp.html"

# Assembly
SPADES_DIR = "spades"
SPADES_STDOUT = "spades.stdout.txt"
SPADES_STDERR = "spades.stderr.txt"
CONTIGS = "contigs.fasta"
