"""
Weak-pattern detectors used by the strength evaluator.
Every detector is a pure function of its arguments.
"""

from typing import Optional

# Common weak strings, matched as substrings of the lowercased password
COMMON_WEAK_PATTERNS = (
    "password",
    "passw0rd",
    "qwerty",
    "qwertyui",
    "qwerty123",
    "abc123",
    "letmein",
    "admin",
    "welcome",
    "iloveyou",
    "111111",
    "123456",
    "12345678",
    "123456789",
    "123123",
)

MIN_SEQUENCE_LEN = 4
MIN_REPEAT_RUN = 3
MIN_IDENTITY_LEN = 3


def contains_weak_pattern(password: str) -> bool:
    """True if the password contains a common weak string or is one repeated character."""
    if not password:
        return False

    lowered = password.lower()
    if any(pattern in lowered for pattern in COMMON_WEAK_PATTERNS):
        return True

    return all(ch == password[0] for ch in password)


def contains_repeating_runs(password: str) -> bool:
    """True if any character repeats three or more times in a row."""
    run = 1
    for prev, current in zip(password, password[1:]):
        if current == prev:
            run += 1
            if run >= MIN_REPEAT_RUN:
                return True
        else:
            run = 1

    return False


def _is_sequence_char(code: int) -> bool:
    return ord("0") <= code <= ord("9") or ord("a") <= code <= ord("z")


def contains_sequence(password: str) -> bool:
    """
    True if the lowercased password holds four or more consecutive ascending
    or descending code points from 0-9 or a-z (e.g. "abcd", "4321").
    Any other character resets the run.
    """
    lowered = password.lower()
    if len(lowered) < MIN_SEQUENCE_LEN:
        return False

    asc = 1
    desc = 1
    for prev_ch, current_ch in zip(lowered, lowered[1:]):
        prev = ord(prev_ch)
        current = ord(current_ch)

        if not _is_sequence_char(prev) or not _is_sequence_char(current):
            asc = 1
            desc = 1
            continue

        asc = asc + 1 if current == prev + 1 else 1
        desc = desc + 1 if current + 1 == prev else 1
        if asc >= MIN_SEQUENCE_LEN or desc >= MIN_SEQUENCE_LEN:
            return True

    return False


def contains_identity(password: str, username: Optional[str] = None, email: Optional[str] = None) -> bool:
    """
    True if the password contains the username or the email local part.
    Either value is only considered when it is at least three characters long.
    """
    lowered = password.lower()

    normalized_username = (username or "").strip().lower()
    if len(normalized_username) >= MIN_IDENTITY_LEN and normalized_username in lowered:
        return True

    local_part = (email or "").strip().lower().split("@")[0]
    if len(local_part) >= MIN_IDENTITY_LEN and local_part in lowered:
        return True

    return False
