"""Main GUI window."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from lifesim_gui.config import ViewConfig
from lifesim_gui.controller import SimulationPresenter
from lifesim_gui.view.board_canvas import BoardCanvas
from lifesim_gui.view.status_bar import StatusBar
from lifesim_gui.view.top_bar import TopBar


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        presenter: SimulationPresenter,
        config: ViewConfig,
        frame_ms: int = 16,
        external_clock: bool = False,
    ):
        super().__init__()
        self._presenter = presenter
        self._config = config

        self.setWindowTitle(config.title)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self._top_bar = TopBar(config.title)
        self._board_canvas = BoardCanvas(config, presenter.snapshot())
        self._status_bar = StatusBar()

        self._top_bar.toggle_requested.connect(self._toggle)
        self._top_bar.step_requested.connect(self._step)
        self._top_bar.reseed_requested.connect(self._reseed)

        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._top_bar)
        layout.addWidget(self._board_canvas, 1)
        layout.addWidget(self._status_bar)

        # Real elapsed time between frames, not the nominal interval
        self._elapsed = QtCore.QElapsedTimer()
        self._elapsed.start()

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(frame_ms)

        if external_clock:
            self._presenter.set_external(True)
        else:
            self._presenter.set_running(True)
        self._top_bar.set_state(self._presenter.state)

    def _tick(self) -> None:
        elapsed = self._elapsed.restart() / 1000.0
        self._presenter.advance(elapsed)
        self._refresh()

    def _refresh(self) -> None:
        self._board_canvas.set_board(self._presenter.snapshot())
        self._status_bar.update_status(self._presenter.status())
        self._top_bar.set_state(self._presenter.state)

    def _toggle(self) -> None:
        self._presenter.toggle_running()
        self._refresh()

    def _step(self) -> None:
        self._presenter.step()
        self._refresh()

    def _reseed(self) -> None:
        self._presenter.reseed()
        self._refresh()

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # type: ignore[override]
        key = event.key()
        if key == QtCore.Qt.Key_Escape:
            self.close()
        elif key == QtCore.Qt.Key_Space:
            self._toggle()
        elif key == QtCore.Qt.Key_N:
            self._step()
        elif key == QtCore.Qt.Key_R:
            self._reseed()
        else:
            super().keyPressEvent(event)
