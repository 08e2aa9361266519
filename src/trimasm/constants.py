# External tools (looked up on PATH)
FASTQC_EXECUTABLE = "fastqc"
TRIMMOMATIC_EXECUTABLE = "trimmomatic"
FASTP_EXECUTABLE = "fastp"
SPADES_EXECUTABLE = "spades.py"

# Input naming: <sample_id>_1.<ext> and <sample_id>_2.<ext>
READ1_TAG = "_1"
READ2_TAG = "_2"
READ_EXTENSIONS = (".fastq.gz", ".fq.gz", ".fastq", ".fq")

# Defaults
DEFAULT_THREADS = 8
DEFAULT_PHRED = 33
DEFAULT_SLIDING_WINDOW = "5:30"
DEFAULT_LEADING = 5
DEFAULT_TRAILING = 5
DEFAULT_MIN_LENGTH = 50

# Trimmomatic
VALID_PHRED_OFFSETS = (33, 64)
# ILLUMINACLIP seed mismatches : palindrome clip threshold : simple clip threshold
ILLUMINACLIP_THRESHOLDS = "2:30:10"
