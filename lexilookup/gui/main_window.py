"""Editor window with lookup and checking actions."""

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence, QTextCursor
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
)

from lexilookup.config import LookupConfig
from lexilookup.exceptions import LexiLookupException
from lexilookup.models import Diagnostic, LookupKind
from lexilookup.services import CheckerService, HttpContentFetcher
from lexilookup.views import ReplaceCoordinator, ResultView, SurfaceHandle, create_pipeline

from .qt_surface import QtClipboard, QtTextSurface
from .widgets import ResultDialog

logger = logging.getLogger(__name__)


class EditorWindow(QMainWindow):
    """Plain-text editor whose word under the cursor can be looked up."""

    LOOKUP_SHORTCUTS = {
        LookupKind.SYNONYM: "Ctrl+Shift+S",
        LookupKind.DEFINITION: "Ctrl+Shift+D",
        LookupKind.CONJUGATION: "Ctrl+Shift+C",
    }

    def __init__(self, config: LookupConfig):
        super().__init__()
        self.config = config
        self.fetcher = HttpContentFetcher(config)
        self.clipboard = QtClipboard()
        self.coordinator = ReplaceCoordinator(self.clipboard)
        self.current_file: Path | None = None
        self._dialogs: list[ResultDialog] = []

        self.setWindowTitle("lexilookup")
        self.resize(900, 700)

        self.editor = QPlainTextEdit()
        self.setCentralWidget(self.editor)
        self.surface = QtTextSurface(self.editor)

        self._setup_diagnostics_dock()
        self._setup_menus()
        self.statusBar().showMessage("Prêt")

    def _setup_diagnostics_dock(self) -> None:
        self.diagnostics_list = QListWidget()
        self.diagnostics_list.itemActivated.connect(self._on_diagnostic_activated)
        dock = QDockWidget("Diagnostics", self)
        dock.setWidget(self.diagnostics_list)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, dock)

    def _setup_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&Fichier")
        self._add_action(file_menu, "&Ouvrir…", QKeySequence.StandardKey.Open, self.open_file)
        self._add_action(file_menu, "&Enregistrer", QKeySequence.StandardKey.Save, self.save_file)
        self._add_action(file_menu, "&Quitter", QKeySequence.StandardKey.Quit, self.close)

        tools_menu = self.menuBar().addMenu("&Outils")
        for kind, shortcut in self.LOOKUP_SHORTCUTS.items():
            self._add_action(
                tools_menu, kind.label, shortcut, lambda checked=False, k=kind: self.lookup(k)
            )
        tools_menu.addSeparator()
        self._add_action(tools_menu, "&Vérifier le texte", "F7", self.check_text)

    def _add_action(self, menu, label, shortcut, slot) -> QAction:
        action = QAction(label, self)
        action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def lookup(self, kind: LookupKind) -> None:
        """Look up the word (or selection) under the cursor."""
        origin = SurfaceHandle.capture(self.surface)
        word = origin.word().strip()
        if not word:
            self.statusBar().showMessage("Aucun mot sous le curseur", 3000)
            return

        self.statusBar().showMessage(f"Recherche de « {word} »…")
        pipeline = create_pipeline(kind, self.config, fetcher=self.fetcher)
        view = ResultView.open(kind, word, origin=origin, pipeline=pipeline)
        self.statusBar().clearMessage()

        dialog = ResultDialog(view, self.coordinator, self.clipboard, self)
        dialog.finished.connect(lambda _result, d=dialog: self._dialogs.remove(d))
        self._dialogs.append(dialog)
        dialog.show()

    def check_text(self) -> None:
        """Run the external checker and list its diagnostics."""
        try:
            diagnostics = CheckerService(self.config).check_text(self.editor.toPlainText())
        except LexiLookupException as e:
            QMessageBox.warning(self, "Vérification impossible", str(e))
            return

        self.diagnostics_list.clear()
        for diagnostic in diagnostics:
            item = QListWidgetItem(self.diagnostic_label(diagnostic))
            item.setData(Qt.ItemDataRole.UserRole, (diagnostic.line, diagnostic.column))
            self.diagnostics_list.addItem(item)
        self.statusBar().showMessage(f"{len(diagnostics)} diagnostic(s)", 5000)

    @staticmethod
    def diagnostic_label(diagnostic: Diagnostic) -> str:
        """Format a diagnostic for the list ("12:4 [grammaire] message")."""
        return f"{diagnostic.line}:{diagnostic.column} [{diagnostic.kind.value}] {diagnostic.message}"

    def _on_diagnostic_activated(self, item: QListWidgetItem) -> None:
        line, column = item.data(Qt.ItemDataRole.UserRole)
        block = self.editor.document().findBlockByNumber(line - 1)
        cursor = QTextCursor(block)
        cursor.movePosition(
            QTextCursor.MoveOperation.Right, QTextCursor.MoveMode.MoveAnchor, column - 1
        )
        self.editor.setTextCursor(cursor)
        self.editor.setFocus()

    def open_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Ouvrir", "", "Texte (*.txt *.md *.org);;Tous (*)")
        if not path:
            return
        try:
            self.editor.setPlainText(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.warning(self, "Ouverture impossible", str(e))
            return
        self.current_file = Path(path)
        self.setWindowTitle(f"lexilookup - {self.current_file.name}")

    def save_file(self) -> None:
        if self.current_file is None:
            path, _ = QFileDialog.getSaveFileName(self, "Enregistrer")
            if not path:
                return
            self.current_file = Path(path)
        try:
            self.current_file.write_text(self.editor.toPlainText(), encoding="utf-8")
        except OSError as e:
            QMessageBox.warning(self, "Enregistrement impossible", str(e))
            return
        self.statusBar().showMessage(f"Enregistré : {self.current_file}", 3000)
