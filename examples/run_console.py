import argparse
import logging
import random
import sys
from pathlib import Path

# Ensure local repo package is used even if another "lifesim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifesim import SimulationController, SimulationEngine, create_board, list_available_patterns
from lifesim.utils.config_loader import load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print successive Life generations.")
    parser.add_argument("--config", default=None, help="Path to simulator config YAML")
    parser.add_argument("--pattern", default="glider", choices=list_available_patterns())
    parser.add_argument("--width", type=int, default=12)
    parser.add_argument("--height", type=int, default=12)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--generations",
        type=int,
        default=8,
        help="Number of generations to print",
    )
    parser.add_argument(
        "--frame",
        type=float,
        default=0.1,
        help="Simulated seconds per frame fed to the controller (<= tick interval)",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


class GenerationPrinter:
    """Clock subscriber that prints each new generation."""

    def __init__(self, controller: SimulationController):
        self._controller = controller

    def tick(self, generations: int = 1) -> None:
        board = self._controller.board
        print()
        print(f"generation {self._controller.generation}, population {board.population}")
        print(board.to_text())


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")

    cfg = load_config(args.config)
    interval = cfg.timing.tick_interval
    if args.frame > interval:
        raise SystemExit("--frame must not exceed the configured tick interval")

    board = create_board(args.pattern, args.width, args.height, rng=random.Random(args.seed))
    controller = SimulationController(board, tick_interval=interval)
    controller.clock.subscribe(GenerationPrinter(controller))
    engine = SimulationEngine(frame_seconds=args.frame)

    print(f"generation 0, population {board.population}")
    print(board.to_text())
    # Half an interval of slack absorbs float rounding in the accumulator
    engine.run(controller, (args.generations + 0.5) * interval)


if __name__ == "__main__":
    main()
