from __future__ import annotations

from PySide6.QtCore import QObject, Qt, QUrl, Signal
from PySide6.QtGui import QPainter, QPainterPath, QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from .logger import logger


class ImageLoader(QObject):
    """Asynchronous image loader for thumbnails."""

    loaded = Signal(QPixmap)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.manager = QNetworkAccessManager(self)

    def load(
        self,
        url_str: str,
        target_size: tuple[int, int] | None = None,
        radius: int = 0,
    ) -> None:
        if not url_str:
            return

        logger.debug("[ImageLoader] Fetching {}", url_str)
        request = QNetworkRequest(QUrl(url_str))
        request.setRawHeader(
            b"User-Agent",
            (
                b"Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                b"AppleWebKit/537.36 (KHTML, like Gecko) "
                b"Chrome/120.0.0.0 Safari/537.36"
            ),
        )

        reply = self.manager.get(request)
        reply.finished.connect(lambda: self._on_finished(reply, target_size, radius, url_str))

    def _on_finished(
        self,
        reply,
        target_size: tuple[int, int] | None,
        radius: int,
        original_url: str,
    ) -> None:
        try:
            # PySide6 enums are always truthy, compare explicitly
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.warning(
                    "[ImageLoader] Network error ({}): {}", original_url, reply.errorString()
                )
                return

            data = reply.readAll()
            if data.size() == 0:
                logger.warning("[ImageLoader] Empty response: {}", original_url)
                return

            pixmap = QPixmap()
            if not pixmap.loadFromData(data):
                logger.warning(
                    "[ImageLoader] Could not decode image ({} bytes): {}", data.size(), original_url
                )
                return

            if target_size:
                w, h = target_size
                pixmap = pixmap.scaled(
                    w,
                    h,
                    Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                    Qt.TransformationMode.SmoothTransformation,
                )

            if radius > 0:
                pixmap = self._round_corners(pixmap, radius)

            self.loaded.emit(pixmap)
        finally:
            reply.deleteLater()

    @staticmethod
    def _round_corners(source: QPixmap, radius: int) -> QPixmap:
        if source.isNull():
            return source
        target = QPixmap(source.size())
        target.fill(Qt.GlobalColor.transparent)
        painter = QPainter(target)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        path = QPainterPath()
        path.addRoundedRect(0, 0, source.width(), source.height(), radius, radius)
        painter.setClipPath(path)
        painter.drawPixmap(0, 0, source)
        painter.end()
        return target
