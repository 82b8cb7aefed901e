"""Constants and default values for the simulator."""


class ConstUtils:
    """Rule constants and text glyphs."""

    # Conway's B3/S23 rule
    BIRTH_COUNTS = frozenset({3})
    """Neighbor tallies that bring a dead cell to life."""

    SURVIVAL_COUNTS = frozenset({2, 3})
    """Neighbor tallies that keep a live cell alive."""

    # Plaintext glyphs
    LIVE_GLYPHS = frozenset("XO*")
    DEAD_GLYPHS = frozenset("_.")
    COMMENT_PREFIX = "!"

    DEFAULT_LIVE_GLYPH = "X"
    DEFAULT_DEAD_GLYPH = "_"


# Board defaults
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100
DEFAULT_PATTERN = "random"

# Seconds of accumulated elapsed time per generation
DEFAULT_TICK_INTERVAL = 0.5

# Probability that a randomly seeded cell starts alive
RANDOM_ALIVE_PROBABILITY = 0.5
