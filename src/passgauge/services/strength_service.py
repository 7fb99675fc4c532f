"""
Password strength evaluation.

Turns a candidate password, an optional policy and optional identity hints into
a StrengthReport: a 0-4 score, an entropy estimate, an offline crack-time
estimate and the eleven per-rule checks.

The score is the clamped sum of an ordered table of independent rules, and the
entropy estimate is a charset-based value minus an ordered table of flat
penalties. Both tables are module level so each rule can be tested on its own.

Nothing here keeps state between calls and nothing is logged that could
reveal the password.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union
import logging
import math

from passgauge.models.policy import DEFAULT_PASSWORD_POLICY, PasswordPolicy
from passgauge.models.report import StrengthChecks, StrengthReport
from passgauge.services.pattern_service import (
    contains_identity,
    contains_repeating_runs,
    contains_sequence,
    contains_weak_pattern,
)

# Set up logging
logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 4
UNIQUE_RATIO_THRESHOLD = 0.55

# Alphabet sizes credited for each character class present
LOWERCASE_CHARSET = 26
UPPERCASE_CHARSET = 26
DIGIT_CHARSET = 10
SYMBOL_CHARSET = 33

# Offline attacker model
GUESSES_PER_SECOND = 1e10
ENTROPY_CAP_BITS = 80
# Largest power of two a float can hold
_MAX_FLOAT_EXPONENT = 1023


@dataclass(frozen=True)
class PasswordSignals:
    """Everything the scoring, entropy and check steps need, extracted once."""
    length: int
    unique_chars: int
    has_lowercase: bool
    has_uppercase: bool
    has_digit: bool
    has_symbol: bool
    has_whitespace: bool
    weak_pattern: bool
    sequence: bool
    repeating_runs: bool
    identity_contains: bool

    @property
    def class_count(self) -> int:
        return sum((self.has_lowercase, self.has_uppercase, self.has_digit, self.has_symbol))

    @property
    def unique_ratio(self) -> float:
        return self.unique_chars / self.length if self.length > 0 else 0.0


@dataclass(frozen=True)
class ScoreRule:
    """Adds `points` to the running score when `applies` holds."""
    name: str
    points: int
    applies: Callable[[PasswordSignals], bool]


@dataclass(frozen=True)
class EntropyPenalty:
    """Removes `bits` from the base entropy when `applies` holds."""
    name: str
    bits: float
    applies: Callable[[PasswordSignals], bool]


SCORE_RULES = (
    ScoreRule("length_8", 1, lambda s: s.length >= 8),
    ScoreRule("length_12", 1, lambda s: s.length >= 12),
    ScoreRule("length_16", 1, lambda s: s.length >= 16),
    ScoreRule("length_20", 1, lambda s: s.length >= 20),
    ScoreRule("classes_2", 1, lambda s: s.class_count >= 2),
    ScoreRule("classes_3", 1, lambda s: s.class_count >= 3),
    ScoreRule("classes_4", 1, lambda s: s.class_count >= 4),
    ScoreRule("unique_ratio", 1, lambda s: s.length > 0 and s.unique_ratio >= UNIQUE_RATIO_THRESHOLD),
    ScoreRule("whitespace", -1, lambda s: s.has_whitespace),
    ScoreRule("weak_pattern", -2, lambda s: s.weak_pattern),
    ScoreRule("sequence", -1, lambda s: s.sequence),
    ScoreRule("repeating_runs", -1, lambda s: s.repeating_runs),
    ScoreRule("identity_contains", -2, lambda s: s.identity_contains),
)

ENTROPY_PENALTIES = (
    EntropyPenalty("weak_pattern", 10, lambda s: s.weak_pattern),
    EntropyPenalty("sequence", 7, lambda s: s.sequence),
    EntropyPenalty("repeating_runs", 4, lambda s: s.repeating_runs),
    EntropyPenalty("identity_contains", 8, lambda s: s.identity_contains),
)


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


# str.isspace() also accepts these separators, which lack the Unicode White_Space property
_NON_WHITESPACE_SEPARATORS = "\x1c\x1d\x1e\x1f"


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NON_WHITESPACE_SEPARATORS


class StrengthService:
    """Service for password strength evaluation."""

    @staticmethod
    def extract_signals(
        password: str,
        username: Optional[str] = None,
        email: Optional[str] = None
    ) -> PasswordSignals:
        """Compute length, class flags and pattern flags over the password's code points."""
        return PasswordSignals(
            length=len(password),
            unique_chars=len(set(password)),
            has_lowercase=any("a" <= ch <= "z" for ch in password),
            has_uppercase=any("A" <= ch <= "Z" for ch in password),
            has_digit=any("0" <= ch <= "9" for ch in password),
            has_symbol=any(not _is_ascii_alnum(ch) and not _is_whitespace(ch) for ch in password),
            has_whitespace=any(_is_whitespace(ch) for ch in password),
            weak_pattern=contains_weak_pattern(password),
            sequence=contains_sequence(password),
            repeating_runs=contains_repeating_runs(password),
            identity_contains=contains_identity(password, username, email),
        )

    @staticmethod
    def score(signals: PasswordSignals) -> int:
        """Sum every applicable rule and clamp to 0-4."""
        total = sum(rule.points for rule in SCORE_RULES if rule.applies(signals))
        return max(MIN_SCORE, min(MAX_SCORE, total))

    @staticmethod
    def charset_size(signals: PasswordSignals) -> int:
        size = 0
        if signals.has_lowercase:
            size += LOWERCASE_CHARSET
        if signals.has_uppercase:
            size += UPPERCASE_CHARSET
        if signals.has_digit:
            size += DIGIT_CHARSET
        if signals.has_symbol:
            size += SYMBOL_CHARSET
        return size

    @staticmethod
    def estimate_entropy(signals: PasswordSignals) -> float:
        """Charset entropy minus flat weakness penalties, never below zero."""
        charset = StrengthService.charset_size(signals)
        if signals.length > 0 and charset > 1:
            entropy = signals.length * math.log2(charset)
        else:
            entropy = 0.0

        for penalty in ENTROPY_PENALTIES:
            if penalty.applies(signals):
                entropy -= penalty.bits

        return max(entropy, 0.0)

    @staticmethod
    def estimate_crack_time(
        entropy_bits: float,
        guesses_per_second: float = GUESSES_PER_SECOND,
        entropy_cap_bits: float = ENTROPY_CAP_BITS
    ) -> float:
        """
        Seconds an offline attacker needs to exhaust 2^entropy guesses.

        Entropy is capped before exponentiation to keep the result finite.
        A non-positive guess rate falls back to the default rate.
        """
        rate = guesses_per_second if guesses_per_second > 0 else GUESSES_PER_SECOND
        capped = max(0.0, min(entropy_bits, entropy_cap_bits, _MAX_FLOAT_EXPONENT))
        return max(2.0 ** capped / rate, 0.0)

    @staticmethod
    def evaluate_checks(signals: PasswordSignals, policy: PasswordPolicy) -> StrengthChecks:
        """Check each signal against the policy. Disabled requirements always pass."""
        block = policy.block_weak_patterns
        return StrengthChecks(
            length=signals.length >= policy.min_length,
            lowercase=not policy.require_lowercase or signals.has_lowercase,
            uppercase=not policy.require_uppercase or signals.has_uppercase,
            digit=not policy.require_digit or signals.has_digit,
            symbol=not policy.require_symbol or signals.has_symbol,
            unique=signals.unique_chars >= policy.min_unique_chars,
            no_whitespace=not signals.has_whitespace,
            no_weak_pattern=not block or not signals.weak_pattern,
            no_sequence=not block or not signals.sequence,
            no_repeating_runs=not block or not signals.repeating_runs,
            no_identity_contains=not block or not signals.identity_contains,
        )

    @staticmethod
    def evaluate(
        password: Optional[str],
        policy: Union[PasswordPolicy, Mapping[str, Any], None] = None,
        username: Optional[str] = None,
        email: Optional[str] = None,
        *,
        guesses_per_second: float = GUESSES_PER_SECOND,
        entropy_cap_bits: float = ENTROPY_CAP_BITS
    ) -> StrengthReport:
        """
        Evaluate password strength.

        Args:
            password: Candidate password (None is treated as empty)
            policy: PasswordPolicy, raw policy mapping, or None for the default policy
            username: Optional username for identity-leak detection
            email: Optional email whose local part is used for identity-leak detection
            guesses_per_second: Attacker guess rate for the crack-time estimate
            entropy_cap_bits: Entropy ceiling applied before the crack-time exponent

        Returns:
            StrengthReport with score, entropy, crack time and per-rule checks
        """
        password = password or ""
        if policy is None:
            policy = DEFAULT_PASSWORD_POLICY
        elif not isinstance(policy, PasswordPolicy):
            policy = PasswordPolicy.from_partial(policy)

        signals = StrengthService.extract_signals(password, username, email)
        entropy_bits = StrengthService.estimate_entropy(signals)
        report = StrengthReport(
            score=StrengthService.score(signals),
            entropy_bits=entropy_bits,
            crack_time_seconds=StrengthService.estimate_crack_time(
                entropy_bits, guesses_per_second, entropy_cap_bits
            ),
            checks=StrengthService.evaluate_checks(signals, policy),
        )

        logger.debug(
            f"Evaluated password: length={signals.length} score={report.score} "
            f"entropy={report.entropy_bits:.1f}"
        )
        return report

# Global strength service instance
strength_service = StrengthService()
