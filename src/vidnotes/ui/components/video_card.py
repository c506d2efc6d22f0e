"""
Saved video card

Thumbnail (or placeholder) + title + link + note + saved time + delete.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QColor, QDesktopServices, QMouseEvent, QPixmap
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from qfluentwidgets import (
    BodyLabel,
    CaptionLabel,
    CardWidget,
    FluentIcon,
    HyperlinkLabel,
    StrongBodyLabel,
    ToolTipFilter,
    ToolTipPosition,
    TransparentToolButton,
)

from ...models.video_record import VideoRecord
from ...utils.image_loader import ImageLoader

THUMB_SIZE = (192, 108)


def _format_saved_at(record: VideoRecord) -> str:
    dt = record.created_datetime
    if dt is None:
        return record.created_at
    return dt.astimezone().strftime("%Y-%m-%d %H:%M")


class _ThumbnailLabel(QLabel):
    """Clickable 16:9 thumbnail slot."""

    clicked = Signal()

    def mouseReleaseEvent(self, e: QMouseEvent) -> None:
        if e.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(e)


class VideoCard(CardWidget):
    """
    One saved video

    Layout:
    [thumbnail] [title]                      [open] [delete]
                [url]
                [note]
                [saved at]
    """

    delete_requested = Signal(str)  # record id

    def __init__(self, record: VideoRecord, parent: QWidget | None = None):
        super().__init__(parent)
        self.record = record

        self.image_loader = ImageLoader(self)
        self.image_loader.loaded.connect(self._on_thumb_loaded)

        h = QHBoxLayout(self)
        h.setContentsMargins(12, 10, 12, 10)
        h.setSpacing(14)

        # 1) Thumbnail
        self.thumb = _ThumbnailLabel(self)
        self.thumb.setFixedSize(*THUMB_SIZE)
        self.thumb.setScaledContents(True)
        self.thumb.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.thumb.setCursor(Qt.CursorShape.PointingHandCursor)
        self.thumb.clicked.connect(self._open_link)
        h.addWidget(self.thumb, 0, Qt.AlignmentFlag.AlignTop)

        # 2) Info
        info = QVBoxLayout()
        info.setSpacing(4)
        info.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.title_label = StrongBodyLabel(record.title, self)
        self.title_label.setWordWrap(True)
        info.addWidget(self.title_label)

        self.url_label = HyperlinkLabel(QUrl(record.url), record.url, self)
        info.addWidget(self.url_label)

        if record.note:
            self.note_label = BodyLabel(record.note, self)
            self.note_label.setWordWrap(True)
            info.addWidget(self.note_label)

        self.time_label = CaptionLabel(f"Saved {_format_saved_at(record)}", self)
        self.time_label.setTextColor(QColor(120, 120, 120), QColor(150, 150, 150))
        info.addWidget(self.time_label)
        h.addLayout(info, 1)

        # 3) Actions
        btn_layout = QHBoxLayout()
        btn_layout.setSpacing(4)
        btn_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.open_btn = TransparentToolButton(FluentIcon.LINK, self)
        self.open_btn.setToolTip("Open link")
        self.open_btn.installEventFilter(ToolTipFilter(self.open_btn, showDelay=300, position=ToolTipPosition.BOTTOM))
        self.open_btn.clicked.connect(self._open_link)

        self.del_btn = TransparentToolButton(FluentIcon.DELETE, self)
        self.del_btn.setToolTip("Delete")
        self.del_btn.installEventFilter(ToolTipFilter(self.del_btn, showDelay=300, position=ToolTipPosition.BOTTOM))
        self.del_btn.clicked.connect(lambda: self.delete_requested.emit(self.record.id))

        btn_layout.addWidget(self.open_btn)
        btn_layout.addWidget(self.del_btn)
        h.addLayout(btn_layout)

        if record.thumbnail_url:
            self._set_placeholder("")
            self.image_loader.load(record.thumbnail_url, target_size=THUMB_SIZE, radius=8)
        else:
            self._set_placeholder("No cover")

    def _set_placeholder(self, text: str) -> None:
        self.thumb.setText(text)
        self.thumb.setStyleSheet(
            "background: rgba(0,0,0,0.03); border-radius: 8px; "
            "border: 1px dashed rgba(128,128,128,0.4); color: rgb(128,128,128); font-size: 11px;"
        )

    def _on_thumb_loaded(self, pixmap: QPixmap) -> None:
        if pixmap and not pixmap.isNull():
            self.thumb.setText("")
            self.thumb.setStyleSheet("border: none;")
            self.thumb.setPixmap(pixmap)

    def _open_link(self) -> None:
        QDesktopServices.openUrl(QUrl(self.record.url))
