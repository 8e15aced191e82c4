"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Table
NUM_OPPONENTS = int(os.getenv("HOLDEM_NUM_OPPONENTS", "4"))
SMALL_BLIND = int(os.getenv("HOLDEM_SMALL_BLIND", "2"))
BIG_BLIND = int(os.getenv("HOLDEM_BIG_BLIND", "5"))

# Should be 6-8 in a casino shoe, one keeps the simulation simple
NUM_DECKS = int(os.getenv("HOLDEM_NUM_DECKS", "1"))

# Decks in the pool the AI enumerates to estimate its final hand
NUM_SAMPLE_DECKS = int(os.getenv("HOLDEM_NUM_SAMPLE_DECKS", "1"))

# Bankrolls
STARTING_BANK = int(os.getenv("HOLDEM_STARTING_BANK", "100"))
MIN_OPP_BANKROLL = int(os.getenv("HOLDEM_MIN_OPP_BANKROLL", "80"))
MAX_OPP_BANKROLL = int(os.getenv("HOLDEM_MAX_OPP_BANKROLL", "120"))

# AI behaviour: fixed pre-flop raise / bluff size, and how often it bluffs
AI_RAISE = int(os.getenv("HOLDEM_AI_RAISE", "5"))
AI_BLUFF = float(os.getenv("HOLDEM_AI_BLUFF", "0.25"))

# Narration pacing, in milliseconds
CHAR_DELAY_MS = int(os.getenv("HOLDEM_CHAR_DELAY_MS", "0"))
PUNCTUATION_DELAY_MS = int(os.getenv("HOLDEM_PUNCTUATION_DELAY_MS", "0"))
NEW_LINE_DELAY_MS = int(os.getenv("HOLDEM_NEW_LINE_DELAY_MS", "0"))

LOG_LEVEL = os.getenv("HOLDEM_LOG_LEVEL", "WARNING")

# Cards revealed to the community on the flop, turn and river
COMMUNITY_CARDS = (3, 1, 1)
BURN_PER_STREET = 1

# Cards in a scored hand, and opening hand + full community
HAND_SIZE = 5
TOTAL_CARDS = 7
