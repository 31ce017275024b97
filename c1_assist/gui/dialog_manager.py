# c1_assist/gui/dialog_manager.py
"""
Dialog management helper.
Centralizes folder picking and alert display for the main window.
"""

from pathlib import Path
from PySide6.QtWidgets import QFileDialog, QMessageBox


class DialogManager:
    """Manages all dialogs for main window."""

    def __init__(self, parent):
        """
        Args:
            parent: Parent widget (main window)
        """
        self.parent = parent

    def select_project_location(self, start_dir: Path | None = None) -> Path | None:
        """
        Show folder selection dialog.

        Returns:
            Selected folder path or None
        """
        start = str(start_dir) if start_dir and start_dir.exists() else ""
        folder = QFileDialog.getExistingDirectory(
            self.parent,
            "Select Project Location",
            start
        )
        return Path(folder) if folder else None

    def show_message(self, title: str, message: str, error: bool = False):
        if error:
            QMessageBox.critical(self.parent, title, message)
        else:
            QMessageBox.information(self.parent, title, message)

    def show_settings(self):
        """Show settings dialog; returns True if settings were saved."""
        from .settings_dialog import SettingsDialog

        dialog = SettingsDialog(self.parent)
        return dialog.exec() == SettingsDialog.Accepted
