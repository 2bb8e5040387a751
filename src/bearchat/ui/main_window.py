"""Main Window - Source text input, language pickers and live translation display."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from bearchat.core import Language


class MainWindow(QMainWindow):
    """Application shell. The text box stands in for the speech recognizer's transcript."""

    source_text_changed = Signal(str)
    languages_changed = Signal(object, object)  # (source Language, target Language)
    clear_cache_requested = Signal()
    translate_now_requested = Signal()

    def __init__(
        self,
        source_language: Language = Language.ZH,
        target_language: Language = Language.JA,
    ):
        super().__init__()
        self.setWindowTitle("BearChat")
        self.setGeometry(100, 100, 600, 500)

        self._setup_ui(source_language, target_language)
        self._create_menu_bar()

    def _setup_ui(self, source_language: Language, target_language: Language):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        self.translation_label = QLabel("")
        self.translation_label.setWordWrap(True)
        layout.addWidget(self.translation_label, stretch=1)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        language_row = QHBoxLayout()
        self.source_combo = self._language_combo(source_language)
        self.target_combo = self._language_combo(target_language)
        self.swap_button = QPushButton("⇄")
        language_row.addWidget(self.source_combo)
        language_row.addWidget(self.swap_button)
        language_row.addWidget(self.target_combo)
        layout.addLayout(language_row)

        self.source_edit = QPlainTextEdit()
        self.source_edit.setPlaceholderText("Hello, please speak")
        layout.addWidget(self.source_edit, stretch=1)

        self.source_edit.textChanged.connect(
            lambda: self.source_text_changed.emit(self.source_edit.toPlainText())
        )
        self.source_combo.currentIndexChanged.connect(self._emit_languages)
        self.target_combo.currentIndexChanged.connect(self._emit_languages)
        self.swap_button.clicked.connect(self._swap_languages)

    def _create_menu_bar(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")

        self.translate_action = QAction("&Translate Now", self)
        self.translate_action.setShortcut("Ctrl+Return")
        self.translate_action.triggered.connect(self.translate_now_requested.emit)
        file_menu.addAction(self.translate_action)

        clear_action = QAction("&Clear Translation Cache", self)
        clear_action.triggered.connect(self.clear_cache_requested.emit)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    @staticmethod
    def _language_combo(selected: Language) -> QComboBox:
        combo = QComboBox()
        for language in Language:
            combo.addItem(language.display_name, language.value)
        combo.setCurrentIndex(list(Language).index(selected))
        return combo

    def selected_languages(self) -> tuple[Language, Language]:
        return (
            Language(self.source_combo.currentData()),
            Language(self.target_combo.currentData()),
        )

    def _emit_languages(self):
        self.languages_changed.emit(*self.selected_languages())

    def _swap_languages(self):
        source_index = self.source_combo.currentIndex()
        target_index = self.target_combo.currentIndex()
        self.source_combo.blockSignals(True)
        self.source_combo.setCurrentIndex(target_index)
        self.source_combo.blockSignals(False)
        self.target_combo.setCurrentIndex(source_index)

    def show_translation(self, text: str):
        self.translation_label.setText(text)
        self.status_label.setText("")

    def show_translation_error(self, message: str):
        self.status_label.setText(message)

    def set_translating(self, translating: bool):
        self.status_label.setText("Translating…" if translating else "")

    def show_error(self, message: str):
        QMessageBox.warning(self, "Error", message)
