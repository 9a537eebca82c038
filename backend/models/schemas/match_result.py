"""Per-mentor match categories and the scored ranking entry."""

from pydantic import BaseModel

from models.requests import MentorCandidate


class MatchResult(BaseModel):
    skill_matches: list[str] = []  # expertise covering desired skills
    growth_matches: list[str] = []  # expertise covering current skills
    industry_matches: list[str] = []  # industry phrases found in the mentor's text


class ScoredMentor(BaseModel):
    """A candidate after matching, before ranking and selection."""
    mentor: MentorCandidate
    matches: MatchResult = MatchResult()
    slots: int = 0
    score: int = 0
