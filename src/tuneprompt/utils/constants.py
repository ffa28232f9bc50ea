"""Constants used throughout tuneprompt."""

# Tempo bounds offered by the BPM prompt
DEFAULT_MIN_BPM = 1
DEFAULT_MAX_BPM = 999

# Default piece label when none is given on the command line
DEFAULT_PIECE = "untitled"

# Exit status for Ctrl+C (128 + SIGINT)
EXIT_INTERRUPTED = 130


class MenuStyle:
    """Selection menu backends."""

    LINE = "line"
    ARROW = "arrow"

    ALL = (LINE, ARROW)


class Messages:
    """User-facing prompt messages."""

    EMPTY_SELECTION = "Input cannot be empty, please try again."
    INVALID_SELECTION = "Invalid selection, please try again."
    SELECTION_CANCELLED = "Selection cancelled, please choose an option."
    INVALID_INTEGER = "Invalid input. Please enter a whole number."
    INVALID_FLOAT = "Invalid input. Please enter a number."
    NEGATIVE_FLOAT = "Please enter a positive value."
    OUT_OF_RANGE = "Please enter a value between {minimum} and {maximum}."

    # Path resolution, in the order the checks run
    NO_FILE_NAME = "Invalid path. Please enter a valid file name."
    NO_PARENT = "Failed to get parent directory. Please enter a valid path."
    CANNOT_CANONICALIZE = "Failed to canonicalize path. Please enter a valid path."
    PARENT_NOT_DIR = "Parent path is not a directory. Please enter a valid path."
    NOT_REPRESENTABLE = "Failed to convert path to string. Please enter a valid path."

    EXITING = "Exiting interactive mode."
