"""Exception types raised by clipmate."""


class ClipmateError(Exception):
    """Base class for clipmate errors"""


class HistoryLoadError(ClipmateError):
    """The history file exists but could not be read or parsed"""


class HistoryPersistError(ClipmateError):
    """The history file could not be written"""


class ClipboardAccessError(ClipmateError):
    """Reading or writing the text clipboard failed"""


class ImageHelperError(ClipmateError):
    """The external image clipboard helper could not be run"""
