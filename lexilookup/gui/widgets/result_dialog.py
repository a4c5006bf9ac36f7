"""Dialog hosting a result view."""

from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from lexilookup.exceptions import InactiveViewError, OriginGoneError
from lexilookup.interfaces import Clipboard
from lexilookup.models import ViewState
from lexilookup.views import ReplaceCoordinator, ResultView


class ResultDialog(QDialog):
    """Read-only window showing a lookup result.

    Offers the view's actions: quit (q), refresh (g), copy the token under
    the cursor (c) and replace the original word with it (r).
    """

    STATE_LABELS = {
        ViewState.IDLE: "En attente",
        ViewState.LOADING: "Chargement…",
        ViewState.RENDERED: "",
        ViewState.ERROR: "Erreur",
    }

    def __init__(
        self,
        view: ResultView,
        coordinator: ReplaceCoordinator,
        clipboard: Clipboard,
        parent=None,
    ):
        """Initialize the dialog.

        Args:
            view: Result view to display (already opened)
            coordinator: Coordinator used by the replace action
            clipboard: Target of the copy action
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.view = view
        self.coordinator = coordinator
        self.clipboard = clipboard

        self.setWindowTitle(view.title)
        self.resize(480, 560)

        self._setup_ui()
        self._setup_shortcuts()
        self._update_content()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setFont(QFont("monospace"))
        layout.addWidget(self.text_edit, 1)

        self.status_label = QLabel()
        layout.addWidget(self.status_label)

        buttons = QHBoxLayout()
        self.refresh_button = QPushButton("Actualiser")
        self.refresh_button.clicked.connect(self._on_refresh)
        buttons.addWidget(self.refresh_button)

        self.copy_button = QPushButton("Copier")
        self.copy_button.clicked.connect(self._on_copy)
        buttons.addWidget(self.copy_button)

        self.replace_button = QPushButton("Remplacer")
        self.replace_button.clicked.connect(self._on_replace)
        buttons.addWidget(self.replace_button)

        buttons.addStretch()

        quit_button = QPushButton("Quitter")
        quit_button.clicked.connect(self.reject)
        buttons.addWidget(quit_button)

        layout.addLayout(buttons)
        self.setLayout(layout)

    def _setup_shortcuts(self) -> None:
        QShortcut(QKeySequence("q"), self, activated=self.reject)
        QShortcut(QKeySequence("g"), self, activated=self._on_refresh)
        QShortcut(QKeySequence("c"), self, activated=self._on_copy)
        QShortcut(QKeySequence("r"), self, activated=self._on_replace)

    def _update_content(self) -> None:
        self.text_edit.setPlainText(self.view.text)
        self.status_label.setText(self.STATE_LABELS[self.view.state])

        has_tokens = self.view.state is ViewState.RENDERED and bool(self.view.content.tokens)
        self.copy_button.setEnabled(has_tokens)
        self.replace_button.setEnabled(has_tokens and self.view.session.origin is not None)

    def _position(self) -> int:
        return self.text_edit.textCursor().position()

    def _on_refresh(self) -> None:
        position = self._position()
        if self.view.refresh():
            self._update_content()
            cursor = self.text_edit.textCursor()
            cursor.setPosition(min(position, len(self.view.text)))
            self.text_edit.setTextCursor(cursor)

    def _on_copy(self) -> None:
        token = self.view.copy_token_at(self._position(), self.clipboard)
        if token is None:
            self.status_label.setText("Placez le curseur sur un mot")
        else:
            self.status_label.setText(f"Copié : {token}")

    def _on_replace(self) -> None:
        try:
            token = self.coordinator.apply_at(self.view, self._position())
        except (OriginGoneError, InactiveViewError) as e:
            QMessageBox.warning(self, "Remplacement impossible", str(e))
            return

        if token is None:
            self.status_label.setText("Placez le curseur sur un mot")
            return
        self.accept()

    def reject(self) -> None:
        """Close the view with the dialog."""
        self.view.close()
        super().reject()
