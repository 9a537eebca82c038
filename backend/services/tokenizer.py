"""Free-text tokenizer for mentee profile fields.

Turns answers like "React, Node.js & GraphQL" into a set of lowercase
search tokens plus the original phrases, so mentor expertise and company
text can be scanned with plain substring checks.
"""

import re

from models.schemas.token_set import Phrase, ProfileTokens, TokenSet

# Segment delimiters: comma, ampersand, slash, newline
_SEGMENT_SPLIT = re.compile(r"[,&/\n]")
# Strips the conjunction anywhere it appears, including inside words
# like "Android" or "bandwidth". Stored token sets depend on this.
_AND_PATTERN = re.compile(r"and", re.IGNORECASE)

MIN_WORD_LENGTH = 3


def _segments(text: str) -> list[str]:
    """Split text into trimmed, non-empty segments with "and" removed."""
    cleaned = (_AND_PATTERN.sub(" ", segment).strip() for segment in _SEGMENT_SPLIT.split(text))
    return [segment for segment in cleaned if segment]


def tokenize(text: str | None) -> TokenSet:
    """Tokenize one free-text field.

    Each segment contributes itself (lowercased) and each of its
    whitespace-separated words of at least three characters to `values`.
    """
    if not text:
        return TokenSet()

    values: dict[str, None] = {}
    phrases: list[Phrase] = []

    for segment in _segments(str(text)):
        lower = segment.lower()
        phrases.append(Phrase(original=segment, lower=lower))
        values[lower] = None
        for word in segment.split():
            word = word.strip().lower()
            if len(word) >= MIN_WORD_LENGTH:
                values[word] = None

    return TokenSet(values=list(values), phrases=phrases)


def tokenize_profile(current_skills: str, desired_skills: str, industry_interests: str) -> ProfileTokens:
    """Build the three scored token sets for a mentee."""
    return ProfileTokens(
        current=tokenize(current_skills),
        desired=tokenize(desired_skills),
        industry=tokenize(industry_interests),
    )
