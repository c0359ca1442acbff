"""
Prepare the terminal for UTF-8 output before anything is printed.
"""

import logging
import sys

from utf8str.errors import ConsoleError

logger = logging.getLogger(__name__)

UTF8_CODE_PAGE = 65001


def _setup_windows_console() -> None:
    import ctypes

    kernel32 = ctypes.windll.kernel32
    if not kernel32.IsValidCodePage(UTF8_CODE_PAGE):
        raise ConsoleError("code page 65001 is not available")
    if not kernel32.SetConsoleCP(UTF8_CODE_PAGE):
        raise ConsoleError("SetConsoleCP failed")
    if not kernel32.SetConsoleOutputCP(UTF8_CODE_PAGE):
        raise ConsoleError("SetConsoleOutputCP failed")


def _reconfigure(stream) -> None:
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "").replace("_", "")
    if encoding in ("utf8", ""):
        return
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        raise ConsoleError(f"stream encoding is {stream.encoding}")
    logger.debug("Switching %r from %s to utf-8", stream, stream.encoding)
    reconfigure(encoding="utf-8")


def setup_console() -> None:
    if sys.platform == "win32":
        _setup_windows_console()
    _reconfigure(sys.stdout)
    _reconfigure(sys.stderr)
