"""Game wide configuration constants.

Every tweakable number of the bomb passing game lives in this file so that
balancing a round is easier.  The round defaults can be overridden from the
environment, everything else is a plain constant.
"""

import os

# --- Round ---------------------------------------------------------------

# Defaults for the lobby.  ``BOMB_SEED`` left unset means a fresh random
# round every time.
PARTICIPANTS = int(os.environ.get("BOMB_PARTICIPANTS", "4"))
HEALTH = int(os.environ.get("BOMB_HEALTH", "3"))
FUSE_SECONDS = float(os.environ.get("BOMB_FUSE_SECONDS", "10"))
DIFFICULTY_LEVEL = int(os.environ.get("BOMB_DIFFICULTY", "2"))
CHALLENGE_KIND = os.environ.get("BOMB_CHALLENGE", "arithmetic")
SEED = int(os.environ["BOMB_SEED"]) if os.environ.get("BOMB_SEED") else None

HEALTH_UNIT = 1

# Bots think for a third of the fuse, a hair less so they never lose the
# race against the bomb on a normal difficulty.
THINKING_RATIO = 1 / 3
THINKING_MARGIN = 0.1

HUMAN_NAME = "Player"
BOT_NAME = "Bot {}"

# --- Difficulty ----------------------------------------------------------

# accuracy: chance the bot gives the exact solution instead of a guess.
# think: factor applied to the scheduler's thinking delay.
DIFFICULTY = {
    1: {"name": "easy",   "accuracy": 0.55, "think": 1.25},
    2: {"name": "normal", "accuracy": 0.80, "think": 1.0},
    3: {"name": "hard",   "accuracy": 0.95, "think": 0.75},
}

# --- Challenges ----------------------------------------------------------

OPERAND_MIN = 1
OPERAND_MAX = 12
GUESS_SPREAD = 10

FRAGMENT_LENGTH = 2
WORDS = (
    "apple", "banana", "battle", "bomb", "border", "bridge", "candle",
    "castle", "corner", "danger", "dragon", "engine", "falcon", "forest",
    "garden", "hammer", "harbor", "island", "jungle", "kitten", "ladder",
    "lantern", "market", "meadow", "monster", "number", "orange", "pencil",
    "planet", "pocket", "rabbit", "rocket", "silver", "spider", "summer",
    "thunder", "timber", "tunnel", "velvet", "window", "winter", "wonder",
)

# --- Window --------------------------------------------------------------

VIEW_W, VIEW_H = 1280, 720
FPS = 60
SEAT_RADIUS = 240
PARTICIPANT_RADIUS = 28
ANSWER_MAX_LEN = 24

# --- Logging -------------------------------------------------------------

LOG_LEVEL = os.environ.get("BOMB_LOG_LEVEL", "INFO")

# --- Colours -------------------------------------------------------------

WHITE = (255, 255, 255)
BACKGROUND = (51, 51, 51)
PANEL = (16, 16, 18)
PANEL_EDGE = (60, 60, 60)
BLUE = (40, 150, 255)
RED = (235, 60, 60)
GREEN = (70, 200, 100)
YELLOW = (250, 210, 70)
GREY = (170, 170, 170)
DEAD = (60, 60, 60)
BLUE_BOT = (110, 185, 255)
