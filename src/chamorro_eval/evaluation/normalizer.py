"""
Chamorro Text Normalization

Maps raw answer text to a canonical comparison form so that "håfa" matches
"hafa" and "na'ån" matches "naan".
"""

import re
import unicodedata
from types import MappingProxyType

# Chamorro-specific glyphs and glottal-stop marks
CHAMORRO_SUBSTITUTIONS = MappingProxyType({
    'å': 'a',
    'ñ': 'n',
    'á': 'a',
    'é': 'e',
    'í': 'i',
    'ó': 'o',
    'ú': 'u',
    "'": '',       # glottal stop, straight apostrophe
    '\u2018': '',  # left single quotation mark
    '\u2019': '',  # right single quotation mark (curly apostrophe)
    '\u02bc': '',  # modifier letter apostrophe
    '\u02bb': '',  # okina
    '\u2011': '-', # non-breaking hyphen
})

# Applied in a single pass, so no substitution ever feeds another
_TRANSLATION_TABLE = str.maketrans(dict(CHAMORRO_SUBSTITUTIONS))

_WHITESPACE_RE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """
    Normalize Chamorro text for comparison.

    Lowercases, deletes glottal-stop marks, folds diacritics to their base
    letters and collapses whitespace. Idempotent, and total over any string.

    Args:
        text: Raw answer text

    Returns:
        Canonical comparison form
    """
    if not text:
        return ''

    normalized = text.lower().strip()
    normalized = normalized.translate(_TRANSLATION_TABLE)

    # Catch any diacritics not listed in the table
    normalized = unicodedata.normalize('NFD', normalized)
    normalized = ''.join(ch for ch in normalized if unicodedata.category(ch) != 'Mn')

    return _WHITESPACE_RE.sub(' ', normalized).strip()


def fold_case(text: str) -> str:
    """Case- and edge-whitespace-insensitive form used for exact comparison."""
    if not text:
        return ''
    return text.strip().lower()
