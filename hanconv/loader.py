"""Build converters from configuration.

Resolves dictionary files through search paths, loads each file once,
and assembles the segmenter and conversion chain described by a
ConverterConfig.

Search order for a relative dictionary filename:
    1. The config file's directory
    2. <config dir>/../dictionary
    3. Caller-supplied search paths
    4. Tool default search paths (hanconv.json or fallbacks)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from . import config as cfg
from .config import ConverterConfig, DictConfig, load_config
from .conversion import Conversion, ConversionChain
from .converter import Converter
from .dicts import Dict, DictGroup, TextDict
from .errors import ConfigError, DictionaryNotFoundError, UnknownDictTypeError
from .ingest import ingestor_for_file
from .segmentation import create_segmenter

logger = logging.getLogger(__name__)

TEXT_DICT_TYPES = ("text", "ocd")
DICT_TYPES = ["text", "ocd", "ocd2", "group"]


def build_search_paths(
    config_dir: Optional[Path] = None,
    search_paths: Optional[Iterable[Path | str]] = None,
) -> list[Path]:
    """Assemble the ordered list of directories to search."""
    paths: list[Path] = []
    if config_dir is not None:
        paths.append(Path(config_dir))
        paths.append(Path(config_dir).parent / "dictionary")
    if search_paths:
        paths.extend(Path(p) for p in search_paths)
    paths.extend(Path(p) for p in cfg.default_search_paths())

    # Keep first occurrence of each directory
    unique: list[Path] = []
    for path in paths:
        if path not in unique:
            unique.append(path)
    return unique


def find_file(filename: str, search_paths: Iterable[Path]) -> Optional[Path]:
    """Find a file by absolute path or in the first matching search path."""
    path = Path(filename)
    if path.is_absolute():
        return path if path.is_file() else None

    for directory in search_paths:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


class DictLoader:
    """Loads dictionaries described by DictConfig objects.

    Each resolved file is parsed once per loader, so a dictionary shared
    by segmentation and conversion steps is the same object.
    """

    def __init__(
        self,
        search_paths: Iterable[Path | str],
        check_duplicates: bool = False,
    ):
        """Initialize loader.

        Args:
            search_paths: Directories searched for relative filenames.
            check_duplicates: Reject lexicons containing a duplicate key.
                Lookups over duplicates are otherwise unspecified.
        """
        self.search_paths = [Path(p) for p in search_paths]
        self.check_duplicates = check_duplicates
        self._cache: dict[Path, TextDict] = {}

    def resolve(self, filename: str) -> Path:
        path = find_file(filename, self.search_paths)
        if path is None:
            raise DictionaryNotFoundError(
                filename, [str(p) for p in self.search_paths]
            )
        return path

    def load(self, dict_config: DictConfig) -> Dict:
        """Load a dictionary, recursing into groups.

        Raises:
            UnknownDictTypeError: For unsupported dictionary types.
            DictionaryNotFoundError: If a file cannot be located.
            OSError: If a file cannot be read.
        """
        if dict_config.type == "group":
            return DictGroup(self.load(d) for d in dict_config.dicts)
        if dict_config.type in TEXT_DICT_TYPES:
            return self.load_text(dict_config.file)
        if dict_config.type == "ocd2":
            return self.load_ocd2(dict_config.file)
        raise UnknownDictTypeError(dict_config.type, DICT_TYPES)

    def load_text(self, filename: str) -> TextDict:
        """Load a lexicon file with the ingestor registered for its suffix."""
        path = self.resolve(filename).resolve()
        if path in self._cache:
            return self._cache[path]

        ingestor = ingestor_for_file(path)()
        result = ingestor.ingest(path)

        if self.check_duplicates:
            duplicate = result.lexicon.find_duplicate_key()
            if duplicate is not None:
                raise ConfigError(f"Duplicate key {duplicate!r} in {path}")

        dictionary = TextDict(result.lexicon)
        self._cache[path] = dictionary
        logger.debug("Loaded %s: %r", path, dictionary)
        return dictionary

    def load_ocd2(self, filename: str) -> TextDict:
        """Load an ocd2 dictionary.

        The binary trie format is not supported. The text lexicon with the
        same stem (STCharacters.ocd2 -> STCharacters.txt) is used when it
        can be found, otherwise the named file is read as text.
        """
        text_name = str(Path(filename).with_suffix(".txt"))
        if find_file(text_name, self.search_paths) is not None:
            logger.info("Using text lexicon %s in place of %s", text_name, filename)
            return self.load_text(text_name)

        logger.warning("Reading %s as a text lexicon", filename)
        return self.load_text(filename)


def build_converter(
    config: ConverterConfig,
    search_paths: Optional[Iterable[Path | str]] = None,
    check_duplicates: Optional[bool] = None,
) -> Converter:
    """Assemble a converter from a parsed config.

    Args:
        config: Converter configuration.
        search_paths: Extra directories to search for dictionary files.
        check_duplicates: Reject lexicons with duplicate keys. Defaults to
            the tool default.

    Returns:
        Converter ready for use.
    """
    config.validate()
    if check_duplicates is None:
        check_duplicates = cfg.default_check_duplicates()

    loader = DictLoader(
        build_search_paths(config.config_dir, search_paths),
        check_duplicates=check_duplicates,
    )

    seg_config = config.segmentation
    seg_dict = (
        loader.load(seg_config.dictionary)
        if seg_config.dictionary is not None
        else None
    )
    segmenter = create_segmenter(seg_config.type, seg_dict)

    chain = ConversionChain(
        Conversion(loader.load(step.dictionary))
        for step in config.conversion_chain
    )

    logger.debug(
        "Built converter %r with %d conversion steps", config.name, len(chain)
    )
    return Converter(config.name, segmenter, chain)


def load_converter(
    config_path: Path | str,
    search_paths: Optional[Iterable[Path | str]] = None,
    check_duplicates: Optional[bool] = None,
) -> Converter:
    """Load a converter config file and build its converter."""
    config = load_config(config_path)
    return build_converter(config, search_paths, check_duplicates)


def find_preset(
    name: str,
    search_paths: Optional[Iterable[Path | str]] = None,
) -> Optional[Path]:
    """Resolve a preset name (e.g. "s2t") or config path to a file.

    Looks for the name as given, then with a .json suffix, in each
    search path and its config/ subdirectory.
    """
    path = Path(name)
    if path.is_file():
        return path

    candidates = [name] if name.endswith(".json") else [name, f"{name}.json"]
    directories = build_search_paths(None, search_paths)
    for directory in directories:
        for subdir in (directory, directory / "config"):
            for candidate in candidates:
                found = subdir / candidate
                if found.is_file():
                    return found
    return None


def list_presets(search_paths: Optional[Iterable[Path | str]] = None) -> list[str]:
    """Names of all converter configs found under the search paths."""
    names: set[str] = set()
    for directory in build_search_paths(None, search_paths):
        for subdir in (directory, directory / "config"):
            if subdir.is_dir():
                names.update(p.stem for p in subdir.glob("*.json"))
    return sorted(names)
