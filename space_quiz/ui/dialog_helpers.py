"""Helper functions for common dialog patterns in the quiz UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
        font_point_size: Optional font size for the message and button
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()
