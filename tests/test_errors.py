from docgen.utils.errors import (
    ConfigError,
    DictionaryError,
    DictionaryLoadError,
    DocgenError,
    EmptyDictionaryError,
    OutputError,
    OutputOpenError,
    OutputWriteError,
)


def test_hierarchy() -> None:
    assert issubclass(ConfigError, ValueError)
    for exc in (DictionaryLoadError, EmptyDictionaryError):
        assert issubclass(exc, DictionaryError)
    for exc in (OutputOpenError, OutputWriteError):
        assert issubclass(exc, OutputError)
    for exc in (ConfigError, DictionaryError, OutputError):
        assert issubclass(exc, DocgenError)
