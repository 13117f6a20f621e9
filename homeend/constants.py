"""Constants and configuration defaults for the homeend editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Navigation cycle
    PERCENT_DIVISIONS = 10  # Prefix argument is a decile of the document
    MAX_PREFIX_ARGUMENT = 10

    # Defaults overridable from config.json
    DEFAULT_MARK_RING_SIZE = 16
    DEFAULT_PAGE_CONTEXT_LINES = 2  # Overlap lines kept when paging
    DEFAULT_LOG_LEVEL = "WARNING"

    # Display
    DEFAULT_VIEW_WIDTH = 80
    STATUS_LINES = 1  # Bottom row reserved for the status line

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Status messages
    NOTHING_TO_DO_MESSAGE = "Nothing to do: already at {} of document"
    NO_MARK_MESSAGE = "No mark to jump to"
