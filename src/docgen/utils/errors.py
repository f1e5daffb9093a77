"""Typed exceptions for configuration, dictionary loading and corpus output."""


class DocgenError(Exception):
    """Base class for all errors raised by docgen."""


class ConfigError(DocgenError, ValueError):
    """Raised when generation parameters are inconsistent or invalid."""


class DictionaryError(DocgenError):
    """Base class for dictionary related errors."""


class DictionaryLoadError(DictionaryError):
    """Raised when the words file cannot be opened or decoded."""


class EmptyDictionaryError(DictionaryError):
    """Raised when a dictionary holds no usable words."""


class OutputError(DocgenError):
    """Base class for output sink errors."""


class OutputOpenError(OutputError):
    """Raised when the output file cannot be created or truncated."""


class OutputWriteError(OutputError):
    """Raised when writing or flushing a document to the output fails."""
