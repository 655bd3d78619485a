"""Constants and configuration for the termedit editor."""

from .cursor import CSI as _CSI, CursorStyle


class EditorConstants:
    """Central configuration constants for the editor."""

    # Control sequences
    CSI = _CSI
    ERASE_FRAME = CSI + "2J"
    SHOW_CURSOR = CSI + "?25h"
    RESET_CURSOR_STYLE = CSI + "0 q"
    HIDE_CURSOR = CSI + "?25l"

    # Caret glyph communicating the active mode
    NORMAL_CARET_STYLE = CursorStyle.STEADY_BLOCK
    INSERT_CARET_STYLE = CursorStyle.STEADY_BAR

    # Fallback frame size when no terminal is attached
    DEFAULT_WIDTH = 80
    DEFAULT_HEIGHT = 24

    # Logging
    LOG_APP_NAME = "termedit"
    LOG_FILE_NAME = "termedit.log"
    LOG_FILE_ENV = "TERMEDIT_LOG_FILE"
    LOG_LEVEL_ENV = "TERMEDIT_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"

    # Status messages
    FILE_NOT_FOUND_MESSAGE = "File {} not found"
