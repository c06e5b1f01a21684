"""
config.py

Constants shared by the scorer, the estimator and the command-line tools.
"""

# Letters per word. The optimized scorer in feedback.py is unrolled for 5.
WORD_LENGTH = 5

# One base-3 digit per letter position -> 3^5 distinct feedback scores.
NUM_SCORES = 3 ** WORD_LENGTH

# Every digit == 2 ("GGGGG").
ALL_CORRECT = NUM_SCORES - 1

# Readable feedback alphabet, indexed by digit value.
SCORE_CHARS = (".", "y", "G")

# Word list defaults
DEFAULT_CSV = "word_list.csv"
DEFAULT_COMMON = 5000

# Display defaults for the interactive helper
DEFAULT_TOP_SHOWN = 15
MAX_TARGETS_SHOWN = 10
MAX_CANDIDATES_SHOWN = 200
MAX_WINNING_SHOWN = 4

# Guesses handed to each worker process at a time
DEFAULT_CHUNKSIZE = 64
