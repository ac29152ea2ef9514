"""
Stand-in for a secret protection provider.

The transform only wraps text in markers so tests can tell protected values
apart. It is not encryption.
"""

PREFIX = "enc{"
SUFFIX = "}"


def obscure(text: str) -> str:
    return PREFIX + text + SUFFIX


def reveal(text: str) -> str:
    """Strip the markers added by obscure; text without them is returned unchanged."""
    if text.startswith(PREFIX) and text.endswith(SUFFIX):
        return text[len(PREFIX):-len(SUFFIX)]
    return text
