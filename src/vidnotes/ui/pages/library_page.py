"""
Library page

Form for saving a link, search box, and the list of saved videos.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from qfluentwidgets import (
    BodyLabel,
    CaptionLabel,
    CardWidget,
    FluentIcon,
    LineEdit,
    PlainTextEdit,
    PrimaryPushButton,
    SearchLineEdit,
    SubtitleLabel,
    TitleLabel,
)

from ...core.library import VideoLibrary
from ...models.video_record import VideoRecord
from ..components.video_card import VideoCard


class LibraryPage(QWidget):
    """Saved videos page"""

    def __init__(self, library: VideoLibrary, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("libraryPage")
        self.library = library
        self._cards: list[VideoCard] = []
        self._init_ui()

        self.library.subscribe(self._on_library_changed)
        self.library.load()
        self._render()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 16)
        layout.setSpacing(16)

        # --- Header ---
        self.title_label = TitleLabel("Videos to watch later", self)
        layout.addWidget(self.title_label)
        self.subtitle_label = BodyLabel(
            "Save just the link and a short note, then come back to it later.", self
        )
        self.subtitle_label.setTextColor(QColor(96, 96, 96), QColor(180, 180, 180))
        layout.addWidget(self.subtitle_label)

        # --- Form ---
        form_card = CardWidget(self)
        form = QVBoxLayout(form_card)
        form.setContentsMargins(16, 14, 16, 14)
        form.setSpacing(8)

        row = QHBoxLayout()
        row.setSpacing(12)

        self.title_edit = LineEdit(form_card)
        self.title_edit.setPlaceholderText("Title (optional)")
        self.title_edit.setClearButtonEnabled(True)
        row.addWidget(self.title_edit, 1)

        self.url_edit = LineEdit(form_card)
        self.url_edit.setPlaceholderText("Video link *  (YouTube / TikTok / ...)")
        self.url_edit.setClearButtonEnabled(True)
        self.url_edit.returnPressed.connect(self._on_submit)
        self.url_edit.textChanged.connect(self._update_submit_state)
        row.addWidget(self.url_edit, 1)
        form.addLayout(row)

        self.note_edit = PlainTextEdit(form_card)
        self.note_edit.setPlaceholderText("Short note (why you liked it, a timestamp to revisit...)")
        self.note_edit.setFixedHeight(64)
        form.addWidget(self.note_edit)

        self.submit_btn = PrimaryPushButton(FluentIcon.SAVE, "Save this video", form_card)
        self.submit_btn.clicked.connect(self._on_submit)
        self.submit_btn.setEnabled(False)
        form.addWidget(self.submit_btn, 0, Qt.AlignmentFlag.AlignRight)

        layout.addWidget(form_card)

        # --- Toolbar: count + search ---
        toolbar = QHBoxLayout()
        toolbar.setSpacing(8)

        self.stats_label = BodyLabel("", self)
        self.stats_label.setTextColor(QColor(120, 120, 120), QColor(150, 150, 150))
        toolbar.addWidget(self.stats_label)
        toolbar.addStretch(1)

        self.search_box = SearchLineEdit(self)
        self.search_box.setPlaceholderText("Search title / note / link")
        self.search_box.setFixedWidth(280)
        self.search_box.textChanged.connect(self._on_search)
        toolbar.addWidget(self.search_box)

        layout.addLayout(toolbar)

        # --- List ---
        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setStyleSheet("background: transparent;")

        self.scroll_widget = QWidget()
        self.scroll_widget.setStyleSheet("background: transparent;")
        self.scroll_layout = QVBoxLayout(self.scroll_widget)
        self.scroll_layout.setContentsMargins(0, 0, 0, 0)
        self.scroll_layout.setSpacing(8)
        self.scroll_layout.addStretch(1)

        self.scroll_area.setWidget(self.scroll_widget)
        layout.addWidget(self.scroll_area, 1)

        # --- Empty state ---
        self.empty_placeholder = QWidget(self)
        empty_layout = QVBoxLayout(self.empty_placeholder)
        empty_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_layout.setSpacing(12)

        self.empty_icon = QLabel(self.empty_placeholder)
        self.empty_icon.setText("🎬")
        self.empty_icon.setStyleSheet("font-size: 56px; color: rgba(0,0,0,0.1);")
        self.empty_icon.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.empty_title = SubtitleLabel("No saved videos yet", self.empty_placeholder)
        self.empty_title.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.empty_desc = BodyLabel("Paste your first link above to get started 🙂", self.empty_placeholder)
        self.empty_desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_desc.setTextColor(QColor(96, 96, 96), QColor(206, 206, 206))

        empty_layout.addStretch(1)
        empty_layout.addWidget(self.empty_icon)
        empty_layout.addWidget(self.empty_title)
        empty_layout.addWidget(self.empty_desc)
        empty_layout.addStretch(1)

        self.empty_placeholder.setVisible(False)
        layout.addWidget(self.empty_placeholder, 1)

        # --- Footer ---
        self.footer_label = CaptionLabel(
            "Everything is stored on this computer only. "
            "Deleting the data folder or switching machines loses it.",
            self,
        )
        self.footer_label.setTextColor(QColor(130, 130, 130), QColor(120, 120, 120))
        layout.addWidget(self.footer_label)

    # ------ Form ------

    def _update_submit_state(self, text: str) -> None:
        self.submit_btn.setEnabled(bool(text.strip()))

    def _on_submit(self) -> None:
        record = self.library.add(
            self.url_edit.text(),
            title=self.title_edit.text(),
            note=self.note_edit.toPlainText(),
        )
        if record is None:
            self.url_edit.setFocus()
            return
        self.title_edit.clear()
        self.url_edit.clear()
        self.note_edit.clear()

    # ------ Search / render ------

    def _on_search(self, text: str) -> None:
        # Filter existing cards in place; rebuilding would refetch every thumbnail
        for card in self._cards:
            card.setVisible(self.library.query_matches(card.record, text))
        self._update_empty_state()

    def _on_library_changed(self, _records: list[VideoRecord]) -> None:
        self._render()

    def _render(self) -> None:
        for card in self._cards:
            self.scroll_layout.removeWidget(card)
            card.setParent(None)
            card.deleteLater()
        self._cards.clear()

        query = self.search_box.text()
        for rec in self.library.records:
            card = VideoCard(rec, self.scroll_widget)
            card.delete_requested.connect(self.library.delete)
            card.setVisible(self.library.query_matches(rec, query))
            self._cards.append(card)
            # Insert before the trailing stretch
            self.scroll_layout.insertWidget(self.scroll_layout.count() - 1, card)

        self._update_empty_state()
        self._update_stats()

    # ------ State ------

    def _update_empty_state(self) -> None:
        visible = sum(1 for c in self._cards if not c.isHidden())
        self.scroll_area.setVisible(visible > 0)
        self.empty_placeholder.setVisible(visible == 0)

    def _update_stats(self) -> None:
        total = self.library.count
        self.stats_label.setText(f"{total} video{'' if total == 1 else 's'} in total")
