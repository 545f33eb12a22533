"""
Email address syntax validator.

Classifies a candidate string as a syntactically valid email address using a
single forward scan over its characters, then checks each domain label:
1. Screen local-part characters and overall length
2. Track quoting, escaping, comment nesting and dot placement
3. Switch to the domain part at the first structural @
4. Validate dot-separated domain labels

Malformed input is never an error: every rule violation returns False.
Only a missing or non-string candidate raises.
"""

import logging
from typing import Optional

from .charclass import is_domain_char, is_forbidden_in_local_part, is_quoted_only
from .models import (
    MAX_ADDRESS_LENGTH,
    MAX_LABEL_LENGTH,
    MAX_LOCAL_PART_LENGTH,
    ScanState,
)

logger = logging.getLogger(__name__)


class EmailAddressValidator:
    """
    Pragmatic RFC 5321/5322 address syntax checker.

    Holds no per-call data, so one instance can be shared across threads.
    """

    def is_valid(self, candidate: str) -> bool:
        """
        Check whether a candidate string is a syntactically valid address.

        Args:
            candidate: Address to check (e.g., 'user@example.com')

        Returns:
            bool: True if every grammar rule passed, False otherwise

        Raises:
            TypeError: If candidate is None or not a str

        Example:
            >>> EmailAddressValidator().is_valid('"quoted user"@example.com')
            True
            >>> EmailAddressValidator().is_valid('user..name@example.com')
            False
        """
        if not isinstance(candidate, str):
            raise TypeError(
                f"candidate must be a str, not {type(candidate).__name__}"
            )

        domain_start = self._scan(candidate)
        if domain_start is None:
            return False

        return self._labels_valid(candidate[domain_start:])

    def _scan(self, candidate: str) -> Optional[int]:
        """
        Run the character scan over the whole candidate.

        Args:
            candidate: Address to scan

        Returns:
            Index where the domain part starts, or None if the scan rejected
        """
        state = ScanState()
        last_index = len(candidate) - 1

        for i, ch in enumerate(candidate):
            if not state.in_domain and is_forbidden_in_local_part(ch):
                return self._reject('local part character', i)

            if i >= MAX_ADDRESS_LENGTH:
                return self._reject('address length', i)

            # Only @ or . may follow a closing quote
            if state.just_closed_quote:
                if ch != '@' and ch != '.':
                    return self._reject('character after quoted block', i)
                state.just_closed_quote = False

            if ch == '@':
                if state.in_domain:
                    return self._reject('second @', i)
                if not state.quoted:
                    if state.after_dot:
                        return self._reject('dot before @', i)
                    state.in_domain = True
                    state.domain_start = i + 1
                    if i > MAX_LOCAL_PART_LENGTH:
                        return self._reject('local part length', i)
                state.clear_marks()

            elif ch == '(':
                if not state.quoted and not state.escaped:
                    state.comment_depth += 1

            elif ch == ')':
                if not state.quoted and not state.escaped:
                    if not state.in_comment:
                        return self._reject('unmatched )', i)
                    state.comment_depth -= 1

            elif ch == '\\':
                if not state.quoted and not state.in_comment:
                    return self._reject('backslash outside quote or comment', i)
                state.escaped = not state.escaped
                state.after_dot = False

            elif ch == '"':
                if state.in_domain and not state.in_comment:
                    return self._reject('quote in domain', i)
                if not state.escaped:
                    if not (i == 0 or state.after_dot or state.quoted):
                        return self._reject('misplaced quote', i)
                    if state.quoted:
                        state.just_closed_quote = True
                    state.quoted = not state.quoted
                state.clear_marks()

            elif ch == '.':
                if i == 0:
                    return self._reject('leading dot in local part', i)
                if i == state.domain_start:
                    return self._reject('leading dot in domain', i)
                if i == last_index:
                    return self._reject('trailing dot', i)
                if not state.quoted:
                    if state.after_dot:
                        return self._reject('adjacent dots', i)
                    state.after_dot = True
                state.escaped = False

            else:
                if is_quoted_only(ch) and not state.quoted:
                    return self._reject('unquoted special character', i)
                state.clear_marks()
                if state.in_domain and not is_domain_char(ch):
                    return self._reject('domain character', i)

        if state.in_comment:
            return self._reject('unterminated comment', len(candidate))
        if not state.in_domain:
            return self._reject('missing @', len(candidate))
        if state.domain_start == len(candidate):
            return self._reject('empty domain part', len(candidate))
        if state.domain_start == 1:
            return self._reject('empty local part', 0)

        return state.domain_start

    def _labels_valid(self, domain: str) -> bool:
        """
        Check each dot-separated label of the domain part.

        Args:
            domain: Domain substring after the separating @

        Returns:
            bool: True if no label is empty, hyphen-bounded or too long
        """
        for label in domain.split('.'):
            if not label:
                logger.debug("Rejected: empty domain label")
                return False
            if label[0] == '-' or label[-1] == '-':
                logger.debug("Rejected: domain label starts or ends with hyphen")
                return False
            if len(label) > MAX_LABEL_LENGTH:
                logger.debug(f"Rejected: domain label of {len(label)} characters")
                return False
        return True

    @staticmethod
    def _reject(rule: str, index: int) -> None:
        """Log the rule that failed and signal rejection to the scan."""
        logger.debug(f"Rejected: {rule} at index {index}")
        return None


# Stateless, shared across callers
_default_validator = EmailAddressValidator()


def is_valid(candidate: str) -> bool:
    """
    Check whether a candidate string is a syntactically valid address.

    Shortcut for EmailAddressValidator().is_valid(candidate).
    """
    return _default_validator.is_valid(candidate)
