"""
Monitoring Utilities
"""
import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')


def slugify_cache_key(value: str) -> str:
    """
    Convert a string into a lowercase slug safe for cache keys and tags.

    Unicode characters are transliterated to ASCII where possible, runs of
    anything else than ``[a-z0-9]`` collapse into a single hyphen and hyphens
    are trimmed from both ends.
    """
    value = (
        unicodedata.normalize('NFKD', str(value))
        .encode('ascii', 'ignore')
        .decode('ascii')
    )
    return _NON_ALPHANUMERIC.sub('-', value.lower()).strip('-')
