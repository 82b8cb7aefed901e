"""
Pytest configuration and shared fixtures for the simulator test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'lifesim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifesim.core.board import Board  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


BOARD_CFG = {"width": 40, "height": 30, "seed": 7, "pattern": "glider"}

TIMING_CFG = {"tick_interval": 0.25}


@pytest.fixture
def simulator_config_dict():
    """Complete simulator configuration dictionary."""
    return {"board": dict(BOARD_CFG), "timing": dict(TIMING_CFG)}


BLINKER_HORIZONTAL = """
    _ _ _ _ _
    _ _ _ _ _
    _ X X X _
    _ _ _ _ _
    _ _ _ _ _
"""

BLINKER_VERTICAL = """
    _ _ _ _ _
    _ _ X _ _
    _ _ X _ _
    _ _ X _ _
    _ _ _ _ _
"""


@pytest.fixture
def blinker_board():
    """5x5 board with a horizontal blinker through the middle row."""
    return Board.from_text(BLINKER_HORIZONTAL)


@pytest.fixture
def empty_board():
    return Board(6, 4)


@pytest.fixture
def blinker_vertical_board():
    """The blinker's other phase."""
    return Board.from_text(BLINKER_VERTICAL)
