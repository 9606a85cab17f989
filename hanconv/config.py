"""Configuration for hanconv.

Two kinds of configuration live here:
    - Converter configs: JSON files describing the segmentation dictionary
      and the ordered conversion chain (e.g. data/config/s2t.json)
    - Tool defaults: loaded from hanconv.json at project root, with
      hardcoded fallbacks

Converter config format:
    {
      "name": "Simplified Chinese to Traditional Chinese",
      "segmentation": {
        "type": "mmseg",
        "dict": {"type": "text", "file": "STPhrases.txt"}
      },
      "conversion_chain": [
        {"dict": {"type": "group", "dicts": [
          {"type": "text", "file": "STPhrases.txt"},
          {"type": "text", "file": "STCharacters.txt"}
        ]}}
      ]
    }
"""

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError, MissingFieldError

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "config": "s2t",
    "search_paths": ["data", "data/dictionary", "data/config"],
    "check_duplicates": False,
    "verbose": False,
}

CONFIG_FILENAME = "hanconv.json"

_config: dict[str, Any] | None = None


def _check_type(value: Any, expected: type, path: str) -> Any:
    """Return value, or raise ConfigError if it is not of the expected type."""
    if not isinstance(value, expected):
        raise ConfigError(
            f"{path} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass
class DictConfig:
    """One dictionary: a file of some type, or a group of dictionaries."""

    type: str
    file: Optional[str] = None
    dicts: list["DictConfig"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "dict") -> "DictConfig":
        """Create from dictionary.

        Args:
            data: Parsed JSON object.
            path: Location in the config, used in error messages.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must be an object")
        if "type" not in data:
            raise MissingFieldError(f"{path}.type")

        dict_type = _check_type(data["type"], str, f"{path}.type")
        if dict_type == "group":
            if "dicts" not in data:
                raise MissingFieldError(f"{path}.dicts")
            _check_type(data["dicts"], list, f"{path}.dicts")
            return cls(
                type=dict_type,
                dicts=[
                    cls.from_dict(d, f"{path}.dicts[{i}]")
                    for i, d in enumerate(data["dicts"])
                ],
            )

        if "file" not in data:
            raise MissingFieldError(f"{path}.file")
        return cls(
            type=dict_type,
            file=_check_type(data["file"], str, f"{path}.file"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.type == "group":
            return {"type": self.type, "dicts": [d.to_dict() for d in self.dicts]}
        return {"type": self.type, "file": self.file}


@dataclass
class SegmentationConfig:
    """Segmentation algorithm and the dictionary it matches against."""

    type: str = "mmseg"
    dictionary: Optional[DictConfig] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SegmentationConfig":
        if not isinstance(data, dict):
            raise ConfigError("segmentation must be an object")
        dict_data = data.get("dict")
        return cls(
            type=_check_type(data.get("type", "mmseg"), str, "segmentation.type"),
            dictionary=(
                DictConfig.from_dict(dict_data, "segmentation.dict")
                if dict_data is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        if self.dictionary is not None:
            data["dict"] = self.dictionary.to_dict()
        return data


@dataclass
class ConversionStepConfig:
    """One step of the conversion chain."""

    dictionary: DictConfig

    def to_dict(self) -> dict[str, Any]:
        return {"dict": self.dictionary.to_dict()}


@dataclass
class ConverterConfig:
    """A complete converter configuration."""

    name: str
    segmentation: Optional[SegmentationConfig] = None
    conversion_chain: list[ConversionStepConfig] = field(default_factory=list)
    config_dir: Optional[Path] = None       # Directory the config was read from

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        config_dir: Optional[Path] = None,
    ) -> "ConverterConfig":
        """Create from a parsed JSON object.

        Raises:
            ConfigError: If the structure is malformed.
        """
        if not isinstance(data, dict):
            raise ConfigError("Converter config must be a JSON object")

        segmentation = None
        if data.get("segmentation") is not None:
            segmentation = SegmentationConfig.from_dict(data["segmentation"])

        chain = _check_type(data.get("conversion_chain", []), list, "conversion_chain")
        steps = []
        for i, step in enumerate(chain):
            if not isinstance(step, dict) or step.get("dict") is None:
                raise MissingFieldError(f"conversion_chain[{i}].dict")
            steps.append(ConversionStepConfig(
                DictConfig.from_dict(step["dict"], f"conversion_chain[{i}].dict")
            ))

        return cls(
            name=_check_type(data.get("name", ""), str, "name"),
            segmentation=segmentation,
            conversion_chain=steps,
            config_dir=config_dir,
        )

    def validate(self) -> None:
        """Check required fields.

        Raises:
            MissingFieldError: If segmentation or its dictionary is absent.
        """
        if self.segmentation is None:
            raise MissingFieldError("segmentation")
        if self.segmentation.dictionary is None and self.segmentation.type != "chars":
            raise MissingFieldError("segmentation.dict")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "segmentation": (
                self.segmentation.to_dict() if self.segmentation else None
            ),
            "conversion_chain": [step.to_dict() for step in self.conversion_chain],
        }


def load_config(filepath: Path | str) -> ConverterConfig:
    """Load a converter config from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the JSON is invalid or malformed.
    """
    filepath = Path(filepath)
    with open(filepath, "r", encoding="utf-8") as f:
        data = f.read()
    return load_config_from_data(data, filepath.parent)


def load_config_from_data(
    data: str | bytes,
    config_dir: Optional[Path] = None,
) -> ConverterConfig:
    """Load a converter config from JSON text."""
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid converter config JSON: {e}") from e
    return ConverterConfig.from_dict(parsed, config_dir)


def _find_config() -> Path | None:
    """Find hanconv.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent / CONFIG_FILENAME,  # hanconv -> root
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load tool defaults from hanconv.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_preset() -> str:
    return get_default("config", FALLBACK_DEFAULTS["config"])


def default_search_paths() -> list[str]:
    return list(get_default("search_paths", FALLBACK_DEFAULTS["search_paths"]))


def default_check_duplicates() -> bool:
    return get_default("check_duplicates", FALLBACK_DEFAULTS["check_duplicates"])
