"""
Dictionary files for hyphen-split.

Dictionaries are plain ``hyph_<lang>.dic`` files (the LibreOffice/Hunspell
hyphenation format) found in one folder. This module lists the available
languages, maps locale tags to them, decodes the files to Unicode and keeps
loaded dictionaries in a registry owned by the caller.

The folder is taken from the HYPHEN_SPLIT_DICTIONARIES environment variable,
or defaults to the ``dictionaries`` folder shipped with the package.
"""

import codecs
import logging
import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from hyphen_split.dictionary import DictionaryLoadError, HyphDict

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
# Configuration
# ============================================================================

ENV_DICTIONARIES = "HYPHEN_SPLIT_DICTIONARIES"

FILE_PREFIX = "hyph_"
FILE_SUFFIX = ".dic"

DEFAULT_ENCODING = "utf-8"

# Encoding names found in the wild that Python does not know
ENCODING_ALIASES = {
    "microsoft-cp1251": "cp1251",
}


def get_dictionaries_path() -> Path:
    """Get the dictionary folder (environment override or packaged default)."""
    folder = os.environ.get(ENV_DICTIONARIES)
    if folder:
        return Path(folder)
    return Path(__file__).parent / "dictionaries"


# ============================================================================
# Encoding
# ============================================================================

def decode_source(raw: bytes, name: Optional[str] = None) -> str:
    """
    Decode a dictionary file using the encoding declared on its first line.

    Unknown encoding names fall back to UTF-8.

    Raises:
        DictionaryLoadError: If the content does not decode
    """
    header = raw.split(b"\n", 1)[0].strip().decode("ascii", errors="replace").lower()
    encoding = ENCODING_ALIASES.get(header, header)

    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning("Unknown encoding %r in %s, assuming %s", header, name, DEFAULT_ENCODING)
        encoding = DEFAULT_ENCODING

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"Cannot decode {name or 'dictionary'} as {encoding}: {e}") from e


def load_dictionary(path: PathLike) -> HyphDict:
    """
    Read, decode and parse one dictionary file.

    Raises:
        DictionaryLoadError: If the file cannot be read or holds no patterns
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read dictionary {path}: {e}") from e

    return HyphDict.from_text(decode_source(raw, path.name), name=path.name)


# ============================================================================
# Languages
# ============================================================================

def normalize_language(language: str) -> str:
    """Lowercase a locale tag and use ``_`` as separator ("en-US" -> "en_us")."""
    return language.lower().replace("-", "_")


class DictionarySource:
    """
    The dictionary files of one folder.

    Each ``hyph_de_DE.dic`` file is available under its full name ("de_DE")
    and, unless another file claimed it first, its short name ("de").
    """

    def __init__(self, folder: Optional[PathLike] = None):
        self.folder = Path(folder) if folder is not None else get_dictionaries_path()
        self._languages: Optional[Dict[str, Path]] = None
        self._lowercase: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"DictionarySource({str(self.folder)!r})"

    @property
    def languages(self) -> Dict[str, Path]:
        """Language name -> dictionary path, scanned on first access."""
        with self._lock:
            if self._languages is None:
                self._languages = self._scan()
                self._lowercase = {name.lower(): name for name in self._languages}
            return self._languages

    def _scan(self) -> Dict[str, Path]:
        languages: Dict[str, Path] = {}
        if not self.folder.is_dir():
            logger.info("Dictionary folder %s does not exist", self.folder)
            return languages

        for path in sorted(self.folder.glob(f"{FILE_PREFIX}*{FILE_SUFFIX}")):
            name = path.name[len(FILE_PREFIX):-len(FILE_SUFFIX)]
            if not name:
                continue
            languages[name] = path
            languages.setdefault(name.split("_")[0], path)

        logger.info("Found %d dictionary files in %s", len(set(languages.values())), self.folder)
        return languages

    def list_languages(self) -> List[str]:
        """Sorted names of all available languages."""
        return sorted(self.languages)

    def language_fallback(self, language: str) -> Optional[str]:
        """
        Get the closest available language for a locale tag.

        Trailing parts are dropped until a match is found:
        "de-DE-1996" tries "de_de_1996", then "de_de", then "de".

        Returns:
            The available language name, or None
        """
        if not self.languages:
            return None
        parts = normalize_language(language).split("_")
        while parts:
            name = self._lowercase.get("_".join(parts))
            if name is not None:
                return name
            parts.pop()
        return None

    def path_for(self, language: str) -> Path:
        """
        Get the dictionary path for a locale tag, with fallback.

        Raises:
            KeyError: If no dictionary matches the language
        """
        name = self.language_fallback(language)
        if name is None:
            raise KeyError(f"No hyphenation dictionary for language {language!r}")
        return self.languages[name]


# ============================================================================
# Registry
# ============================================================================

class DictionaryRegistry:
    """
    Loaded dictionaries, keyed by resolved file path.

    Every file is parsed once per registry; the resulting HyphDict (and its
    result cache) is then shared by all users of the registry.
    """

    def __init__(self, source: Optional[DictionarySource] = None):
        self.source = source if source is not None else DictionarySource()
        self._dictionaries: Dict[Path, HyphDict] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._dictionaries)

    def __contains__(self, path: PathLike) -> bool:
        with self._lock:
            return Path(path).resolve() in self._dictionaries

    def get(self, path: PathLike) -> HyphDict:
        """
        Get the dictionary of a file, loading it on first use.

        Raises:
            DictionaryLoadError: If the file cannot be loaded
        """
        path = Path(path).resolve()
        with self._lock:
            hyph_dict = self._dictionaries.get(path)
            if hyph_dict is None:
                hyph_dict = load_dictionary(path)
                self._dictionaries[path] = hyph_dict
            return hyph_dict

    def for_language(self, language: str) -> HyphDict:
        """
        Get the dictionary of a language, with locale fallback.

        Raises:
            KeyError: If no dictionary matches the language
            DictionaryLoadError: If the matching file cannot be loaded
        """
        return self.get(self.source.path_for(language))

    def clear(self):
        """Forget all loaded dictionaries."""
        with self._lock:
            self._dictionaries.clear()


_default_registry: Optional[DictionaryRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> DictionaryRegistry:
    """Get the registry used when callers do not pass their own."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = DictionaryRegistry()
        return _default_registry
