"""Pytest configuration and fixtures."""

import json
import pytest
import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_phrases_content():
    """Sample phrase lexicon content."""
    return """# Simplified to Traditional phrases
简体\t簡體
汉字\t漢字
头发\t頭髮
"""


@pytest.fixture
def sample_characters_content():
    """Sample character lexicon content."""
    return """头\t頭
发\t髪 發
体\t體
"""


@pytest.fixture
def sample_config():
    """Converter config using a phrase dictionary for segmentation and a
    phrase + character group for conversion."""
    return {
        "name": "Simplified to Traditional",
        "segmentation": {
            "type": "mmseg",
            "dict": {"type": "text", "file": "STPhrases.txt"},
        },
        "conversion_chain": [
            {
                "dict": {
                    "type": "group",
                    "dicts": [
                        {"type": "text", "file": "STPhrases.txt"},
                        {"type": "ocd2", "file": "STCharacters.ocd2"},
                    ],
                }
            }
        ],
    }


@pytest.fixture
def data_dir(sample_phrases_content, sample_characters_content, sample_config):
    """Temporary data directory laid out as config/ and dictionary/."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "config").mkdir()
        (root / "dictionary").mkdir()

        (root / "dictionary" / "STPhrases.txt").write_text(
            sample_phrases_content, encoding="utf-8"
        )
        (root / "dictionary" / "STCharacters.txt").write_text(
            sample_characters_content, encoding="utf-8"
        )
        (root / "config" / "s2t.json").write_text(
            json.dumps(sample_config, ensure_ascii=False), encoding="utf-8"
        )
        yield root
