# c1_assist/gui/main_window.py
"""
Main application window - UI orchestration only.
Project generation is delegated to ProjectController.

Layout:
1. Title
2. Project name / folder count / location inputs
3. Generate button
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, QTimer, QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
)

from .controllers import ProjectController, describe_error, parse_folder_count
from .dialog_manager import DialogManager
from .window_state import restore_window_state, save_window_state

from ..config import DEFAULT_CONFIG as CFG
from ..errors import InvalidProjectError
from ..utils.log import setup_logger
from ..utils.persistent_config import get_persistent_value, save_persistent_config

log = setup_logger("gui.main_window")

LAST_LOCATION_KEY = "LAST_PROJECT_LOCATION"


class MainWindow(QMainWindow):
    """Project generator window."""

    def __init__(self, controller: Optional[ProjectController] = None):
        super().__init__()
        self.setWindowTitle("C1 Project Generator")
        self.setMinimumSize(500, 400)
        self.resize(500, 400)

        self.dialog_manager = DialogManager(self)
        self.project_controller = controller or ProjectController(log_callback=self._log)

        self.project_location: Optional[Path] = get_persistent_value(LAST_LOCATION_KEY)
        self.is_generating = False

        # Debounce geometry writes while the window is dragged or resized
        self._state_timer = QTimer(self)
        self._state_timer.setSingleShot(True)
        self._state_timer.setInterval(500)
        self._state_timer.timeout.connect(lambda: save_window_state(self))

        self._setup_ui()
        self._connect_signals()
        self._update_location_label()
        self._update_generate_enabled()

        restore_window_state(self)

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        title = QLabel("C1 Project Generator")
        title.setStyleSheet("font-size: 26px; font-weight: 700;")
        layout.addWidget(title)

        # Project name
        layout.addWidget(self._field_label("Project Name:"))
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Enter project name")
        layout.addWidget(self.name_edit)

        # Folder count (digits only)
        layout.addWidget(self._field_label("Folder Count:"))
        self.count_edit = QLineEdit(str(CFG.DEFAULT_FOLDER_COUNT))
        self.count_edit.setPlaceholderText("Enter number of folders")
        self.count_edit.setValidator(QRegularExpressionValidator(QRegularExpression(r"\d*"), self))
        layout.addWidget(self.count_edit)

        # Location
        layout.addWidget(self._field_label("Project Location:"))
        location_layout = QHBoxLayout()
        self.location_label = QLabel()
        self.location_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.location_label.setStyleSheet(
            "padding: 8px 10px; background-color: #E8E8E8; border-radius: 5px;"
        )
        self.browse_btn = QPushButton("Browse")
        location_layout.addWidget(self.location_label, 1)
        location_layout.addWidget(self.browse_btn)
        layout.addLayout(location_layout)

        layout.addStretch()

        btn_layout = QHBoxLayout()
        self.settings_btn = QPushButton("Settings...")
        self.generate_btn = QPushButton("Generate")
        self.generate_btn.setDefault(True)
        self.generate_btn.setStyleSheet("""
            QPushButton {
                background-color: #007AFF;
                color: white;
                padding: 10px 24px;
                font-weight: 600;
                border-radius: 10px;
            }
            QPushButton:disabled {
                background-color: #9CC7FF;
            }
        """)
        btn_layout.addWidget(self.settings_btn)
        btn_layout.addWidget(self.generate_btn, 1)
        layout.addLayout(btn_layout)

    @staticmethod
    def _field_label(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-weight: 600;")
        return label

    def _connect_signals(self):
        self.name_edit.textChanged.connect(self._update_generate_enabled)
        self.count_edit.textChanged.connect(self._update_generate_enabled)
        self.browse_btn.clicked.connect(self._on_browse)
        self.settings_btn.clicked.connect(self._on_settings)
        self.generate_btn.clicked.connect(self._on_generate)

    # --- State ---

    def _update_location_label(self):
        if self.project_location:
            self.location_label.setText(str(self.project_location))
        else:
            self.location_label.setText("No location selected")

    def _update_generate_enabled(self):
        ready = (
            bool(self.name_edit.text())
            and bool(self.count_edit.text())
            and self.project_location is not None
            and not self.is_generating
        )
        self.generate_btn.setEnabled(ready)

    def set_project_location(self, location: Optional[Path]):
        self.project_location = location
        self._update_location_label()
        self._update_generate_enabled()

    # --- Handlers ---

    def _on_browse(self):
        start = self.project_location or CFG.PROJECTS_ROOT
        folder = self.dialog_manager.select_project_location(start)
        if folder:
            self.set_project_location(folder)
            save_persistent_config({LAST_LOCATION_KEY: folder})

    def _on_settings(self):
        if self.dialog_manager.show_settings() and not self.count_edit.text():
            self.count_edit.setText(str(CFG.DEFAULT_FOLDER_COUNT))

    def _on_generate(self):
        try:
            folder_count = parse_folder_count(self.count_edit.text())
        except InvalidProjectError as e:
            self.dialog_manager.show_message("Invalid Input", e.message, error=True)
            return

        if self.project_location is None:
            self.dialog_manager.show_message("Missing Location", "Please select a project location.", error=True)
            return

        name = self.name_edit.text()
        log.info(f"Generate requested: '{name}', {folder_count} folder(s) in {self.project_location}")
        self.is_generating = True
        self._update_generate_enabled()
        self.statusBar().showMessage(f"Generating '{name}'...")

        try:
            result = self.project_controller.create_project(name, folder_count, self.project_location)
        finally:
            self.is_generating = False
            self._update_generate_enabled()

        if result is not None:
            self.statusBar().showMessage(f"Created {result.project_path}", 5000)
            self.dialog_manager.show_message(
                "Success", f"Project '{name}' has been generated successfully."
            )
        else:
            self.statusBar().clearMessage()
            title, message = describe_error(self.project_controller.last_error)
            self.dialog_manager.show_message(title, message, error=True)

    def _log(self, message: str, level: str):
        """Controller progress goes to the status bar; the controller logs to file itself."""
        self.statusBar().showMessage(message, 5000)

    # --- Window state ---

    def moveEvent(self, event):
        super().moveEvent(event)
        self._state_timer.start()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._state_timer.start()

    def closeEvent(self, event):
        self._state_timer.stop()
        save_window_state(self)
        super().closeEvent(event)
