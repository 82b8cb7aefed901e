"""Board canvas: draws every cell of the current generation."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from lifesim.interfaces.board import IBoard
from lifesim_gui.config import Color, ViewConfig


def _qcolor(color: Color) -> QtGui.QColor:
    return QtGui.QColor.fromRgbF(*color)


class BoardItem(QtWidgets.QGraphicsItem):
    """Single scene item that paints the whole grid from a board snapshot."""

    def __init__(self, config: ViewConfig, board: IBoard):
        super().__init__()
        self._config = config
        self._board = board
        self._live_brush = QtGui.QBrush(_qcolor(config.live_color))
        self._dead_brush = QtGui.QBrush(_qcolor(config.dead_color))

    def set_board(self, board: IBoard) -> None:
        if board.width != self._board.width or board.height != self._board.height:
            self.prepareGeometryChange()
        self._board = board
        self.update()

    def boundingRect(self) -> QtCore.QRectF:  # type: ignore[override]
        size = self._config.cell_size
        return QtCore.QRectF(
            self._config.position[0],
            self._config.position[1],
            self._board.width * size,
            self._board.height * size,
        )

    def paint(self, painter, option, widget=None) -> None:  # type: ignore[override]
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(self._dead_brush)
        painter.drawRect(self.boundingRect())

        painter.setBrush(self._live_brush)
        for cell in self._board.cells():
            if cell.alive:
                painter.drawRect(QtCore.QRectF(*self._config.cell_rect(cell.col, cell.row)))

        if self._config.grid_line_width > 0:
            self._paint_grid(painter)

    def _paint_grid(self, painter: QtGui.QPainter) -> None:
        pen = QtGui.QPen(_qcolor(self._config.grid_color))
        pen.setWidthF(self._config.grid_line_width)
        painter.setPen(pen)

        rect = self.boundingRect()
        size = self._config.cell_size
        for col in range(self._board.width + 1):
            x = rect.left() + col * size
            painter.drawLine(QtCore.QLineF(x, rect.top(), x, rect.bottom()))
        for row in range(self._board.height + 1):
            y = rect.top() + row * size
            painter.drawLine(QtCore.QLineF(rect.left(), y, rect.right(), y))


class BoardCanvas(QtWidgets.QGraphicsView):
    def __init__(
        self,
        config: ViewConfig,
        board: IBoard,
        parent: QtWidgets.QWidget | None = None,
    ):
        super().__init__(parent)
        self._config = config
        self._scene = QtWidgets.QGraphicsScene(self)
        self._scene.setBackgroundBrush(QtGui.QBrush(_qcolor(config.background_color)))
        self.setScene(self._scene)
        self.setFocusPolicy(QtCore.Qt.NoFocus)

        self._item = BoardItem(config, board)
        self._scene.addItem(self._item)
        self._update_scene_rect()

    def _update_scene_rect(self) -> None:
        # Keep the same margin on the far side as the configured offset
        rect = self._item.boundingRect()
        self._scene.setSceneRect(
            QtCore.QRectF(
                0,
                0,
                rect.right() + self._config.position[0],
                rect.bottom() + self._config.position[1],
            )
        )

    def set_board(self, board: IBoard) -> None:
        self._item.set_board(board)
        self._update_scene_rect()

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._config.scale_mode == "fit":
            self.fitInView(self._scene.sceneRect(), QtCore.Qt.KeepAspectRatio)
        elif self._config.scale_mode == "stretch":
            self.fitInView(self._scene.sceneRect(), QtCore.Qt.IgnoreAspectRatio)
