from __future__ import annotations

import os
import sys
from pathlib import Path

# Fix missing OpenSSL DLLs for QtNetwork HTTPS on Windows (thumbnails are fetched over HTTPS).
# PATH must be set before any PySide6 module is imported.
if sys.platform == "win32":
    try:
        import PySide6

        package_dir = os.path.dirname(PySide6.__file__)
        openssl_dir = os.path.join(package_dir, "openssl", "bin")
        if os.path.exists(openssl_dir):
            os.environ["PATH"] = openssl_dir + os.pathsep + os.environ.get("PATH", "")
    except (ImportError, OSError):
        pass


def main() -> None:
    # Ensure "src" is importable when running from repo root
    root_dir = Path(__file__).resolve().parent
    src_dir = root_dir / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from vidnotes.app import main as run_app

    run_app()


if __name__ == "__main__":
    main()
