"""Core modules for the simulator.

- cell: single grid position
- board: bounded grid, neighbor offsets and the generation update
- plaintext: text pattern reading and writing
- patterns: named seed pattern registry
- clock: generation counter with pub/sub notification
- controller: elapsed-time accumulator that advances the board
- simulation_engine: headless host loop
"""

from lifesim.core.board import NEIGHBOR_OFFSETS, Board
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.controller import SimulationController
from lifesim.core.exceptions import (
    ConfigurationError,
    GridBoundsError,
    PatternError,
    SimulatorError,
)
from lifesim.core.patterns import (
    PatternRegistry,
    create_board,
    list_available_patterns,
    register_pattern,
)
from lifesim.core.simulation_engine import SimulationEngine

__all__ = [
    # Grid
    "Board",
    "Cell",
    "NEIGHBOR_OFFSETS",
    # Time
    "Clock",
    "SimulationController",
    "SimulationEngine",
    # Patterns
    "PatternRegistry",
    "create_board",
    "list_available_patterns",
    "register_pattern",
    # Errors
    "SimulatorError",
    "ConfigurationError",
    "GridBoundsError",
    "PatternError",
]
