# c1_assist/gui/settings_dialog.py
"""
Settings dialog: default project location, default folder count,
and extra folders searched for the session template.
"""

from __future__ import annotations
from typing import Dict, Any, List
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QSpinBox, QPlainTextEdit,
    QPushButton, QHBoxLayout, QLabel, QSizePolicy, QFileDialog, QMessageBox
)

from ..utils.persistent_config import save_persistent_config, reload_all_config
from ..config import DEFAULT_CONFIG as CFG

FIELD_MIN_WIDTH = 220


def _fix_size(widget):
    widget.setMinimumWidth(FIELD_MIN_WIDTH)
    widget.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)
    return widget


def parse_search_paths(text: str) -> List[Path]:
    """One directory per line; blank lines ignored."""
    return [Path(line.strip()).expanduser() for line in text.splitlines() if line.strip()]


class SettingsDialog(QDialog):

    TOOLTIPS = {
        'PROJECTS_ROOT': 'Folder offered first when choosing where to create a project.',
        'DEFAULT_FOLDER_COUNT': 'Number of capture folders suggested for a new project.',
        'TEMPLATE_SEARCH_PATHS': (
            'Folders searched for the session template before the built-in locations, '
            'one per line.'
        ),
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(560)
        self.setModal(True)

        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignRight | Qt.AlignVCenter)
        form.setFieldGrowthPolicy(QFormLayout.AllNonFixedFieldsGrow)
        form.setSpacing(8)

        root_layout = QHBoxLayout()
        self.projects_root_edit = _fix_size(QLineEdit(str(CFG.PROJECTS_ROOT)))
        self.projects_root_edit.setReadOnly(True)
        self.projects_root_edit.setToolTip(self.TOOLTIPS['PROJECTS_ROOT'])
        browse_btn = QPushButton("Browse...")
        browse_btn.clicked.connect(self._browse_projects_root)
        root_layout.addWidget(self.projects_root_edit)
        root_layout.addWidget(browse_btn)
        form.addRow("Default Location:", root_layout)

        self.folder_count_spin = _fix_size(QSpinBox())
        self.folder_count_spin.setRange(1, 999)
        self.folder_count_spin.setValue(int(CFG.DEFAULT_FOLDER_COUNT))
        self.folder_count_spin.setToolTip(self.TOOLTIPS['DEFAULT_FOLDER_COUNT'])
        form.addRow("Default Folder Count:", self.folder_count_spin)

        self.search_paths_edit = QPlainTextEdit(
            "\n".join(str(p) for p in CFG.TEMPLATE_SEARCH_PATHS)
        )
        self.search_paths_edit.setToolTip(self.TOOLTIPS['TEMPLATE_SEARCH_PATHS'])
        self.search_paths_edit.setPlaceholderText("/path/to/folder/containing/main.db")
        form.addRow("Template Folders:", self.search_paths_edit)

        layout.addLayout(form)

        hint = QLabel(f"The template file must be named {CFG.TEMPLATE_NAME}.")
        hint.setStyleSheet("color: #888; font-size: 11px;")
        layout.addWidget(hint)

        btn_layout = QHBoxLayout()
        save_btn = QPushButton("Save")
        save_btn.clicked.connect(self._on_save)
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        btn_layout.addStretch()
        btn_layout.addWidget(cancel_btn)
        btn_layout.addWidget(save_btn)
        layout.addLayout(btn_layout)

    def _browse_projects_root(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Default Location", self.projects_root_edit.text())
        if folder:
            self.projects_root_edit.setText(folder)

    def collect_overrides(self) -> Dict[str, Any]:
        return {
            'PROJECTS_ROOT': Path(self.projects_root_edit.text()),
            'DEFAULT_FOLDER_COUNT': int(self.folder_count_spin.value()),
            'TEMPLATE_SEARCH_PATHS': parse_search_paths(self.search_paths_edit.toPlainText()),
        }

    def _on_save(self):
        save_persistent_config(self.collect_overrides())

        # Reload config so changes take effect immediately without restart
        reload_all_config()

        QMessageBox.information(self, "Saved", "Settings saved.")
        self.accept()
