from lifesim_gui.view.board_canvas import BoardCanvas, BoardItem
from lifesim_gui.view.main_window import MainWindow
from lifesim_gui.view.status_bar import StatusBar
from lifesim_gui.view.top_bar import TopBar

__all__ = [
    "BoardCanvas",
    "BoardItem",
    "MainWindow",
    "StatusBar",
    "TopBar",
]
