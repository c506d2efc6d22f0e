from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QIcon
from qfluentwidgets import FluentIcon, FluentWindow, NavigationItemPosition

from ..core.config_manager import config_manager
from ..core.library import VideoLibrary
from ..storage.kv_store import JsonFileStore
from ..storage.record_store import RecordStore
from ..utils.logger import logger
from ..utils.paths import resource_path
from .pages.library_page import LibraryPage


class MainWindow(FluentWindow):
    def __init__(self, library: VideoLibrary | None = None):
        super().__init__()

        if library is None:
            storage_file = config_manager.storage_file()
            logger.info(f"[App] Storage file: {storage_file}")
            store = RecordStore(JsonFileStore(storage_file), key=config_manager.get("storage_key"))
            library = VideoLibrary(store)
        self.library = library

        self.library_page = LibraryPage(self.library, self)
        self.addSubInterface(
            self.library_page, FluentIcon.VIDEO, "Saved videos", NavigationItemPosition.TOP
        )
        self.navigationInterface.setExpandWidth(200)

        self._init_window()

    def _init_window(self) -> None:
        self.setWindowTitle("VidNotes")
        icon_path = resource_path("assets", "logo.png")
        if icon_path.exists():
            self.setWindowIcon(QIcon(str(icon_path)))
        self.resize(
            int(config_manager.get("window_width", 960)),
            int(config_manager.get("window_height", 760)),
        )
        self.setMinimumSize(QSize(640, 480))

    def closeEvent(self, e) -> None:
        # Remember the window size for next launch
        size = self.size()
        config_manager.config["window_width"] = size.width()
        config_manager.config["window_height"] = size.height()
        config_manager.save()
        super().closeEvent(e)
