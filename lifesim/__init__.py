"""Life Board Simulator.

Conway's Game of Life on a bounded grid, advanced on a fixed time interval.

Architecture:
- Board: immutable-from-outside grid; next() returns a new generation
- SimulationController: turns host-loop elapsed time into generations
- Renderers read the current board through IBoard.cells()

Getting started:
    from lifesim import SimulationController, create_board

    controller = SimulationController(create_board("glider", 20, 20), 0.1)
    controller.update(0.25)
    print(controller.board.to_text())
"""

from lifesim.core.board import NEIGHBOR_OFFSETS, Board
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.controller import SimulationController
from lifesim.core.patterns import create_board, list_available_patterns
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.interfaces.board import CellState, IBoard
from lifesim.utils.config_loader import SimulatorConfig, load_config

__all__ = [
    # Core
    "Board",
    "Cell",
    "CellState",
    "IBoard",
    "NEIGHBOR_OFFSETS",
    "Clock",
    "SimulationController",
    "SimulationEngine",
    # Board creation
    "create_board",
    "list_available_patterns",
    # Configuration
    "SimulatorConfig",
    "load_config",
]
