"""Top bar with title, state and run controls."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from lifesim_gui.controller import SimulationState


class TopBar(QtWidgets.QFrame):
    toggle_requested = QtCore.Signal()
    step_requested = QtCore.Signal()
    reseed_requested = QtCore.Signal()

    def __init__(self, title: str, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._name_label = QtWidgets.QLabel(title)
        self._state_label = QtWidgets.QLabel("Paused")
        self._toggle_button = QtWidgets.QPushButton("Run")
        self._step_button = QtWidgets.QPushButton("Step")
        self._reseed_button = QtWidgets.QPushButton("Reseed")

        self._toggle_button.clicked.connect(self.toggle_requested)
        self._step_button.clicked.connect(self.step_requested)
        self._reseed_button.clicked.connect(self.reseed_requested)
        # Keep keyboard shortcuts on the main window
        for button in (self._toggle_button, self._step_button, self._reseed_button):
            button.setFocusPolicy(QtCore.Qt.NoFocus)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.addWidget(self._name_label)
        layout.addStretch(1)
        layout.addWidget(self._toggle_button)
        layout.addWidget(self._step_button)
        layout.addWidget(self._reseed_button)
        layout.addWidget(self._state_label)

    def set_state(self, state: SimulationState) -> None:
        if state == SimulationState.RUNNING:
            label = "Running"
        elif state == SimulationState.EXTERNAL:
            label = "External"
        else:
            label = "Paused"
        self._state_label.setText(label)

        local = state != SimulationState.EXTERNAL
        self._toggle_button.setText("Pause" if state == SimulationState.RUNNING else "Run")
        self._toggle_button.setEnabled(local)
        self._step_button.setEnabled(state == SimulationState.PAUSED)
        self._reseed_button.setEnabled(local)
