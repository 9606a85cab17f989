"""Dictionary module.

Provides the dictionary interface and its implementations:
- TextDict: sorted lexicon with binary-search lookups
- DictGroup: ordered composition with list-order priority

Usage:
    from hanconv.dicts import TextDict, DictGroup

    phrases = TextDict.from_file("STPhrases.txt")
    chars = TextDict.from_file("STCharacters.txt")
    group = DictGroup([phrases, chars])
    group.match_prefix("简体字")
"""

from .base import Dict
from .group import DictGroup
from .text import TextDict

__all__ = [
    "Dict",
    "DictGroup",
    "TextDict",
]
