"""Interfaces (behavioral contracts) for the simulator.

- board: IBoard, the read/advance contract for a single generation
- clock: IClock and ClockSubscriber, generation pub/sub
"""

from lifesim.interfaces.board import CellState, IBoard
from lifesim.interfaces.clock import ClockSubscriber, IClock

__all__ = [
    "CellState",
    "IBoard",
    "ClockSubscriber",
    "IClock",
]
