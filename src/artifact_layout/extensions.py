"""Packaging type <-> file extension table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from artifact_layout.exceptions import MissingExtensionError, UnknownTypeError


_IDENTITY_TYPES = ("jar", "war", "ear", "rar", "sar", "par", "pom", "zip", "tld", "dll", "so", "xml")

DEFAULT_TYPE_EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        **{t: t for t in _IDENTITY_TYPES},
        "ejb": "jar",
        "ejb-client": "jar",
        "java-source": "jar",
        "javadoc": "jar",
        "maven-plugin": "jar",
        "maven-archetype": "jar",
        "aspect": "jar",
        "uberjar": "jar",
        "distribution-tgz": "tar.gz",
        "distribution-bzip": "tar.bz2",
        "distribution-zip": "zip",
        "metadata-xml": "xml",
    }
)

# Types stored under a directory named after a different type (legacy layout).
DIRECTORY_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "ejb-client": "ejb",
        "distribution-tgz": "distribution",
        "distribution-zip": "distribution",
    }
)

# Checked in order; the first matching suffix decides the type.
_SUFFIX_TYPES: tuple[tuple[str, str], ...] = (
    (".tar.gz", "distribution-tgz"),
    (".tar.bz2", "distribution-bzip"),
    (".zip", "distribution-zip"),
    ("-sources.jar", "java-source"),
)

# Kept verbatim from existing repositories: sources jars share the javadoc directory.
SOURCES_JAR_DIRECTORY = "javadoc.jars"


class ExtensionTypeTable:
    """Read-only mapping between packaging types, extensions and directory names.

    The table is built once; `extra_types` may add or override entries at
    construction time and nothing can change it afterwards.
    """

    def __init__(self, extra_types: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        extras = dict(extra_types.items() if isinstance(extra_types, Mapping) else extra_types)
        table = {**DEFAULT_TYPE_EXTENSIONS, **extras}
        self._extensions: Mapping[str, str] = MappingProxyType(table)
        # Longest first so `tar.gz` wins over `gz`.
        self._compound = tuple(
            sorted({ext for ext in table.values() if "." in ext}, key=len, reverse=True)
        )

    @property
    def types(self) -> Mapping[str, str]:
        return self._extensions

    def is_registered(self, type_: str) -> bool:
        return type_ in self._extensions

    def extension_of(self, type_: str) -> str:
        """Return the file extension for a packaging type.

        Raises:
            UnknownTypeError: If the type is not registered.
        """
        try:
            return self._extensions[type_]
        except KeyError:
            raise UnknownTypeError(f"No extension registered for type '{type_}'") from None

    def type_of(self, filename: str) -> str:
        """Infer a packaging type from a filename alone.

        This is a first-pass guess: several types share the `jar` extension and
        cannot be told apart without more context.

        Raises:
            MissingExtensionError: If the filename has no extension.
        """
        name = filename.strip().lower()
        for suffix, type_ in _SUFFIX_TYPES:
            if name.endswith(suffix):
                return type_
        _, extension = self.split_extension(name)
        return extension

    def directory_for(self, classifier: str | None, type_: str) -> str:
        """Return the legacy type directory for a classifier/type pair.

        Plural forms are made by appending `s`; irregular plurals are not handled.
        """
        if type_ == "jar" and classifier == "sources":
            return SOURCES_JAR_DIRECTORY
        override = DIRECTORY_OVERRIDES.get(type_)
        if override is not None:
            return override + "s"
        return type_ + "s"

    def split_extension(self, filename: str) -> tuple[str, str]:
        """Split a filename into (stem, extension).

        Compound extensions present in the table (e.g. `tar.gz`) are matched
        before falling back to the text after the last `.`.

        Raises:
            MissingExtensionError: If no extension can be found.
        """
        lowered = filename.lower()
        for ext in self._compound:
            suffix = "." + ext
            if lowered.endswith(suffix) and len(filename) > len(suffix):
                cut = len(filename) - len(suffix)
                return filename[:cut], filename[cut + 1 :]

        index = filename.rfind(".")
        if index <= 0 or index == len(filename) - 1:
            raise MissingExtensionError(f"Unable to determine extension from filename '{filename}'")
        return filename[:index], filename[index + 1 :]
