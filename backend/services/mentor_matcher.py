"""Compare a mentor record against a mentee's token sets."""

from typing import Any

from models.requests import MentorCandidate
from models.schemas.match_result import MatchResult
from models.schemas.token_set import ProfileTokens


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def availability_count(availability: dict[str, Any] | None) -> int:
    """Total number of bookable slots; non-list entries count as zero."""
    if not availability:
        return 0
    return sum(len(slots) for slots in availability.values() if isinstance(slots, list))


def _expertise_matching(expertise: list[str], expertise_lower: list[str], tokens: list[str]) -> list[str]:
    """Expertise items (original casing) containing any token as a substring."""
    return _dedupe([
        item
        for item, lower in zip(expertise, expertise_lower)
        if any(token in lower for token in tokens)
    ])


def compute_matches(mentor: MentorCandidate, tokens: ProfileTokens) -> MatchResult:
    """Find which of the mentee's stated needs this mentor covers.

    Matching is case-insensitive and unanchored: the token "js" matches
    "JavaScript" and "Node.js" alike.
    """
    expertise = list(mentor.expertise)
    expertise_lower = [item.lower() for item in expertise]
    expertise_text = " ".join(expertise_lower)
    company = mentor.company.lower()
    title = mentor.title.lower()
    bio = (mentor.bio or "").lower()

    skill_matches = _expertise_matching(expertise, expertise_lower, tokens.desired.values)
    growth_matches = _expertise_matching(expertise, expertise_lower, tokens.current.values)

    industry_matches = _dedupe([
        phrase.original
        for phrase in tokens.industry.phrases
        if phrase.lower in company
        or phrase.lower in title
        or phrase.lower in expertise_text
        or phrase.lower in bio
    ])

    return MatchResult(
        skill_matches=skill_matches,
        growth_matches=growth_matches,
        industry_matches=industry_matches,
    )
