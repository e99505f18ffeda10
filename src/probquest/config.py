"""Global constants for probquest."""

SEED = 1337

# Tolerance for probability sums.
EPSILON = 1e-6

STARTING_POINTS = 1000
HIGH_ROLLER_THRESHOLD = 2000

TOTAL_ADVENTURERS = 10

DETECTIVE_REWARD = 250
DETECTIVE_PENALTY = -50

GOLDEN_BOOT_TARGETS = ("top-left", "top-right")
