"""
Data models for the address scanner.

The scan state is created fresh for every validation call and never shared.
"""

from dataclasses import dataclass

# Whole address, local part and domain label limits (RFC 5321 section 4.5.3.1)
MAX_ADDRESS_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64
MAX_LABEL_LENGTH = 63

# Highest code point accepted before the separating @
MAX_LOCAL_PART_CODEPOINT = 126


@dataclass
class ScanState:
    """
    Mutable state carried through one left-to-right scan of a candidate.

    Attributes:
        quoted: Inside a quoted string in the local part
        escaped: Previous character was a backslash that opened an escape
        in_domain: The separating @ has been consumed
        after_dot: Previous significant character was an unquoted dot
        just_closed_quote: Previous character closed a quoted block
        comment_depth: Number of open, unmatched parentheses
        domain_start: Index one past the separating @ (0 until it is seen)
    """
    quoted: bool = False
    escaped: bool = False
    in_domain: bool = False
    after_dot: bool = False
    just_closed_quote: bool = False
    comment_depth: int = 0
    domain_start: int = 0

    @property
    def in_comment(self) -> bool:
        """Check if at least one comment is open."""
        return self.comment_depth > 0

    def clear_marks(self) -> None:
        """Leave dot and escape mode."""
        self.after_dot = False
        self.escaped = False

    def __repr__(self) -> str:
        flags = [
            name for name in ('quoted', 'escaped', 'in_domain', 'after_dot', 'just_closed_quote')
            if getattr(self, name)
        ]
        return (
            f"ScanState(flags={flags}, comment_depth={self.comment_depth}, "
            f"domain_start={self.domain_start})"
        )
