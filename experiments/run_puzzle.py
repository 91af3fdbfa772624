import argparse
import os

from crucible.config import GlobalConfig
from crucible.puzzle import NoPathError, parse_input, solve_part1, solve_part2


def main():
    parser = argparse.ArgumentParser(description="Minimum heat loss for both crucible types")
    parser.add_argument("input", help="path to the digit grid")
    parser.add_argument("--debug", action="store_true", help="write a search log per part")
    parser.add_argument("--log-dir", default=os.path.join("logs", "planning_debug"))
    args = parser.parse_args()

    with open(args.input, "r", encoding="utf-8") as f:
        grid = parse_input(f.read())

    config = GlobalConfig(debug_mode=args.debug, log_dir=args.log_dir)
    print(f"Grid: {grid.rows} x {grid.cols}")

    for label, solver in [("Part 1", solve_part1), ("Part 2", solve_part2)]:
        try:
            print(f"{label}: {solver(grid, config)}")
        except NoPathError as e:
            print(f"{label}: no path ({e})")


if __name__ == "__main__":
    main()
