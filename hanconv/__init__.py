"""hanconv - Dictionary-driven script variant converter.

Converts text between script variants (Simplified/Traditional Chinese,
regional idiom sets) by segmenting input into dictionary-recognized units
and substituting each unit through an ordered chain of dictionaries.

Core concepts:
    - A lexicon is a sorted list of entries (key -> candidate values)
    - Dictionaries answer exact and longest-prefix lookups over a lexicon
    - Segmentation is greedy forward maximum matching
    - Conversion steps replace whole segments, never re-segmenting

Example:
    "简体汉字" segmented as ["简体", "汉字"]
    Converted through {"简体": "簡體", "汉字": "漢字"} → "簡體漢字"

Usage:
    from hanconv.schema import Lexicon, make_entry
    from hanconv.dicts import TextDict
    from hanconv.segmentation import MaxMatchSegmenter
    from hanconv.conversion import Conversion, ConversionChain
    from hanconv.converter import Converter

    lexicon = Lexicon([make_entry("简体", "簡體"), make_entry("汉字", "漢字")])
    lexicon.sort()
    d = TextDict(lexicon)

    converter = Converter(
        "s2t",
        MaxMatchSegmenter(d),
        ConversionChain([Conversion(d)]),
    )
    converter.convert("简体汉字")  # "簡體漢字"

    # Or from a JSON configuration file
    from hanconv.loader import load_converter
    converter = load_converter("data/config/s2t.json")
"""

__version__ = "0.1.0"
