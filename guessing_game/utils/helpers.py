"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

# Longer digit runs are out of range for every tier
MAX_GUESS_DIGITS = 18


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request and the current session."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    username = None
    account = getattr(request_obj, 'account', None)
    if account is not None:
        username = account.name

    return {
        'user_ip': user_ip,
        'username': username
    }


def parse_int_prefix(raw) -> Optional[int]:
    """
    Parse the leading integer of ``raw`` the way a browser number field does.

    Leading whitespace is skipped and the optional sign plus digit run that
    follows is taken ("42abc" -> 42, "3.9" -> 3). Returns None when there are
    no leading digits, or when the run is too long to be any playable guess.
    ``bool`` is rejected even though it subclasses int.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if raw is None:
        return None

    text = str(raw).lstrip()
    end = 1 if text[:1] in ('+', '-') else 0
    while end < len(text) and text[end] in '0123456789':
        end += 1

    digits = text[:end]
    if not digits or digits in ('+', '-'):
        return None
    if len(digits.lstrip('+-').lstrip('0')) > MAX_GUESS_DIGITS:
        return None
    return int(digits)
