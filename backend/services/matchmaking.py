"""Matchmaking pipeline: rank candidate mentors for a mentee.

Pipeline:
1. Tokenize the mentee's current skills, desired skills and industry interests
2. Match every mentor's expertise, company, title and bio against the tokens
3. Score the match categories plus an availability bonus
4. Rank by score, then slot count, then name
5. Keep the top positively scored mentors (or the top of the full ranking
   when nobody scored) and attach a justification to each

Everything here is a pure function of the request; no state is kept
between calls.
"""

import logging
from typing import Any

from models.requests import MatchmakingRequest, MentorCandidate, MenteeProfile
from models.responses import MatchmakingResponse
from models.schemas.match_result import MatchResult, ScoredMentor
from models.schemas.token_set import ProfileTokens
from services.match_reasoning import build_reason
from services.mentor_matcher import availability_count, compute_matches
from services.tokenizer import tokenize_profile

logger = logging.getLogger(__name__)

# Weights per matched item
W_SKILL = 4
W_INDUSTRY = 3
W_GROWTH = 2
W_AVAILABILITY = 1

MAX_RECOMMENDATIONS = 4


def compute_score(matches: MatchResult, slots: int) -> int:
    return (
        W_SKILL * len(matches.skill_matches)
        + W_GROWTH * len(matches.growth_matches)
        + W_INDUSTRY * len(matches.industry_matches)
        + (W_AVAILABILITY if slots > 0 else 0)
    )


def score_mentor(mentor: MentorCandidate, tokens: ProfileTokens) -> ScoredMentor:
    matches = compute_matches(mentor, tokens)
    slots = availability_count(mentor.availability)
    return ScoredMentor(
        mentor=mentor,
        matches=matches,
        slots=slots,
        score=compute_score(matches, slots),
    )


def rank(scored: list[ScoredMentor]) -> list[ScoredMentor]:
    """Order by score desc, slots desc, then name asc. Input order breaks any remaining tie."""
    return sorted(scored, key=lambda s: (-s.score, -s.slots, s.mentor.name))


def to_output(item: ScoredMentor) -> dict[str, Any]:
    """The caller's mentor record plus its match reasoning."""
    return {
        **item.mentor.as_record(),
        "matchReasoning": build_reason(item.mentor, item.matches, item.slots),
    }


def select(ranked: list[ScoredMentor]) -> list[ScoredMentor]:
    """Top positively scored mentors, or the top of the ranking if none scored."""
    primary = [item for item in ranked if item.score > 0][:MAX_RECOMMENDATIONS]
    if primary:
        return primary
    if ranked:
        logger.info("No mentor matched the profile; falling back to top %d overall", MAX_RECOMMENDATIONS)
    return ranked[:MAX_RECOMMENDATIONS]


def recommend_mentors(profile: MenteeProfile, mentors: list[MentorCandidate]) -> list[dict[str, Any]]:
    """Run the full pipeline and return up to four annotated mentor records."""
    # career_goals is accepted but does not take part in scoring
    tokens = tokenize_profile(
        profile.current_skills,
        profile.desired_skills,
        profile.industry_interests,
    )

    ranked = rank([score_mentor(mentor, tokens) for mentor in mentors])
    selected = select(ranked)

    logger.debug(
        "Matchmaking: %d candidates, %d selected, top score %d",
        len(mentors),
        len(selected),
        selected[0].score if selected else 0,
    )
    return [to_output(item) for item in selected]


def match(request: MatchmakingRequest) -> MatchmakingResponse:
    return MatchmakingResponse(mentors=recommend_mentors(request.profile, request.mentors))
