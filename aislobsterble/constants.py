"""Game constants shared by the board model, the engine and the bot."""

import string

ALPHABET = string.ascii_uppercase

BINGO_BONUS = 50  # 50 points for placing all 7 rack tiles in one turn
BINGO_TILE_COUNT = 7

# Submission attempts per turn before giving up until the next poll
MAX_PLAY_ATTEMPTS = 10

# Blanks beyond EXHAUSTIVE_BLANK_LIMIT are pre-filled from this rotation
# instead of being searched over all 26 letters.
COMMON_BLANK_LETTERS = ("E", "A", "I", "O", "S")
EXHAUSTIVE_BLANK_LIMIT = 2

