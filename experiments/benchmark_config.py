import os

from crucible.vehicles.config import STANDARD_CRUCIBLE, ULTRA_CRUCIBLE


class BenchmarkConfig:
    # --- Experiment Settings ---
    GRID_SIZES = [13, 25, 50, 75, 100, 141]   # Square grid side lengths
    NUM_TRIALS = 5                            # Number of random grids per size
    RANDOM_SEED_BASE = 1000                   # Base seed for reproducibility

    # --- Cost Range ---
    MIN_COST = 1
    MAX_COST = 9

    # --- Crucible Configurations ---
    CONFIGS = {
        'Standard (0,3)': STANDARD_CRUCIBLE,
        'Ultra (4,10)': ULTRA_CRUCIBLE,
    }

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_crucible")
