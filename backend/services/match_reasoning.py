"""Human-readable "why this mentor" sentences."""

import re

from models.requests import MentorCandidate
from models.schemas.match_result import MatchResult

# First word character after an ASCII word boundary. Only that character
# is uppercased; the rest of the word keeps its casing.
_WORD_START = re.compile(r"\b\w", re.ASCII)

MAX_SKILLS_SHOWN = 3
MAX_INDUSTRIES_SHOWN = 2


def title_case(text: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def build_reason(mentor: MentorCandidate, matches: MatchResult, slots: int) -> str:
    """Assemble the justification shown on a recommended mentor's card."""
    parts: list[str] = []

    if matches.skill_matches:
        highlighted = [title_case(s) for s in matches.skill_matches[:MAX_SKILLS_SHOWN]]
        parts.append(f"Expert in {', '.join(highlighted)}")
    elif matches.growth_matches:
        highlighted = [title_case(s) for s in matches.growth_matches[:MAX_SKILLS_SHOWN]]
        parts.append(f"Experienced with your current skills: {', '.join(highlighted)}")

    if matches.industry_matches:
        highlighted = [title_case(i) for i in matches.industry_matches[:MAX_INDUSTRIES_SHOWN]]
        parts.append(f"Works closely with {' & '.join(highlighted)}")

    if slots > 0:
        parts.append(f"Has {slots} upcoming time slot{'s' if slots > 1 else ''} available")

    if not parts:
        parts.append(f"Strong background as {mentor.title} at {mentor.company}")

    return ". ".join(parts) + "."
