"""GUI application entry point."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import replace
from typing import Callable

from PySide6 import QtWidgets

from lifesim.core.board import Board
from lifesim.core.controller import SimulationController
from lifesim.core.patterns import create_board, list_available_patterns
from lifesim.utils.config_loader import SimulatorConfig, load_config
from lifesim_gui.backend import ControllerBackend
from lifesim_gui.config import load_view_config
from lifesim_gui.controller import SimulationPresenter
from lifesim_gui.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Life Board GUI")
    parser.add_argument("--config", default=None, help="Path to simulator config YAML")
    parser.add_argument("--view-config", default=None, help="Path to view config YAML")
    parser.add_argument("--width", type=int, default=None, help="Grid columns")
    parser.add_argument("--height", type=int, default=None, help="Grid rows")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--pattern", default=None, choices=list_available_patterns(), help="Seed pattern"
    )
    parser.add_argument(
        "--tick-interval", type=float, default=None, help="Seconds per generation"
    )
    parser.add_argument("--frame-ms", type=int, default=16, help="GUI frame interval (ms)")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def apply_overrides(config: SimulatorConfig, args: argparse.Namespace) -> SimulatorConfig:
    """Overlay command line values on the loaded configuration."""
    board_overrides = {
        key: value
        for key, value in (
            ("width", args.width),
            ("height", args.height),
            ("seed", args.seed),
            ("pattern", args.pattern),
        )
        if value is not None
    }
    board = replace(config.board, **board_overrides)
    timing = config.timing
    if args.tick_interval is not None:
        timing = replace(timing, tick_interval=args.tick_interval)
    return replace(config, board=board, timing=timing)


def board_factory_for(
    config: SimulatorConfig, controller: SimulationController | None = None
) -> Callable[[], Board]:
    """Reseed function for the presenter.

    Boards match the injected controller's size when there is one, the
    configured size otherwise.
    """
    rng = random.Random(config.board.seed)
    if controller is not None:
        width, height = controller.board.width, controller.board.height
    else:
        width, height = config.board.width, config.board.height

    def factory() -> Board:
        return create_board(config.board.pattern, width, height, rng=rng)

    return factory


def run_gui(
    argv: list[str] | None = None,
    *,
    controller: SimulationController | None = None,
    lock=None,
    external_clock: bool = False,
) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=args.log_level.upper(), format="%(levelname)s: %(message)s"
    )

    config = apply_overrides(load_config(args.config), args)
    board_factory = board_factory_for(config, controller)

    if controller is None:
        controller = SimulationController(
            board_factory(), tick_interval=config.timing.tick_interval
        )
    logger.info(
        "starting %dx%d '%s' board, %.3fs per generation",
        controller.board.width,
        controller.board.height,
        config.board.pattern,
        controller.tick_interval,
    )

    view_config = load_view_config(args.view_config)
    backend = ControllerBackend(controller, lock=lock)
    presenter = SimulationPresenter(backend, board_factory)

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(
        presenter,
        view_config,
        frame_ms=args.frame_ms,
        external_clock=external_clock,
    )
    board = controller.board
    window.resize(
        int(board.width * view_config.cell_size + 2 * view_config.position[0]) + 40,
        int(board.height * view_config.cell_size + 2 * view_config.position[1]) + 100,
    )
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
