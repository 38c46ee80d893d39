"""
XML element name encoding.

Package source names double as element names inside
<packageSourceCredentials>, so any character that is not legal in an XML
name is replaced by an escape of the form _xHHHH_ (or _UHHHHHHHH_ for code
points outside the Basic Multilingual Plane).
"""

import unicodedata

# Unicode categories allowed at the start of an XML name (besides '_')
_NAME_START_CATEGORIES = {"Ll", "Lu", "Lo", "Lt", "Nl"}

# Categories allowed anywhere after the first character (besides '.', '-', '_')
_NAME_CATEGORIES = _NAME_START_CATEGORIES | {"Lm", "Mc", "Me", "Mn", "Nd"}


def is_name_start_char(char: str) -> bool:
    """Check if a character may begin an XML element name."""
    return char == "_" or unicodedata.category(char) in _NAME_START_CATEGORIES


def is_name_char(char: str) -> bool:
    """Check if a character may appear after the first position of a name."""
    return char in "._-" or unicodedata.category(char) in _NAME_CATEGORIES


def escape_char(char: str) -> str:
    """
    Escape a single character as _xHHHH_ (or _UHHHHHHHH_ above U+FFFF).

    Examples:
        >>> escape_char(" ")
        '_x0020_'
        >>> escape_char(":")
        '_x003a_'
    """
    code_point = ord(char)
    if code_point > 0xFFFF:
        return f"_U{code_point:08x}_"
    return f"_x{code_point:04x}_"


def encode_element_name(name: str) -> str:
    """
    Encode a package source name into a valid XML element name.

    Characters that are already valid pass through unchanged, so names made
    of letters, digits, '.', '-' and '_' (not starting with a digit, '.' or
    '-') encode to themselves.

    Args:
        name: Package source display name

    Returns:
        Name usable as an XML element tag

    Examples:
        >>> encode_element_name("1Feed")
        '_x0031_Feed'
        >>> encode_element_name("Feed with spaces and :")
        'Feed_x0020_with_x0020_spaces_x0020_and_x0020__x003a_'
    """
    encoded = []

    for index, char in enumerate(name):
        if index == 0 and not is_name_start_char(char):
            encoded.append(escape_char(char))
        elif index > 0 and not is_name_char(char):
            encoded.append(escape_char(char))
        else:
            encoded.append(char)

    return "".join(encoded)
