"""avro-phonetic package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as package_version

from avro_phonetic.avro import Avro
from avro_phonetic.phonetic.errors import (
    ConfigurationError,
    ErrorKind,
    GrammarError,
    MalformedSourceError,
    SourceUnavailableError,
)
from avro_phonetic.phonetic.parser import PhoneticParser, build_parser

__all__ = [
    "Avro",
    "ConfigurationError",
    "ErrorKind",
    "GrammarError",
    "MalformedSourceError",
    "PhoneticParser",
    "SourceUnavailableError",
    "__version__",
    "build_parser",
]


def _resolve_version() -> str:
    try:
        return package_version("avro-phonetic")
    except PackageNotFoundError:
        return "0.0.0.dev0"


__version__ = _resolve_version()
