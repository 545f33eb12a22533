"""
Character classification helpers used by the address scanner.
"""

import unicodedata

from .models import MAX_LOCAL_PART_CODEPOINT

# Space, comma, brackets and a subset of C0 controls; 10, 12 and 14 are not included
QUOTED_ONLY_CHARS = frozenset(
    ' ,[]' + ''.join(chr(code) for code in (1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 13, 15))
)


def is_quoted_only(ch: str) -> bool:
    """Check if a character may only appear inside a quoted string."""
    return ch in QUOTED_ONLY_CHARS


def is_forbidden_in_local_part(ch: str) -> bool:
    """
    Check if a character is rejected anywhere before the separating @.

    Non-ASCII code points, NUL and LF are never allowed in the local part.
    """
    code = ord(ch)
    return code > MAX_LOCAL_PART_CODEPOINT or code == 0 or code == 10


def is_domain_char(ch: str) -> bool:
    """
    Check if a character may appear in a domain label.

    Accepts any Unicode letter (with combining marks, which internationalized
    labels need), decimal digits and the hyphen. No IDNA conversion is done.

    Example:
        >>> is_domain_char('ü')
        True
        >>> is_domain_char('_')
        False
    """
    if ch == '-':
        return True
    category = unicodedata.category(ch)
    return category[0] in ('L', 'M') or category == 'Nd'
