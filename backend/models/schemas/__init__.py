"""Internal Pydantic contracts passed between matchmaking stages."""

from models.schemas.token_set import Phrase, ProfileTokens, TokenSet
from models.schemas.match_result import MatchResult, ScoredMentor

__all__ = [
    "Phrase",
    "TokenSet",
    "ProfileTokens",
    "MatchResult",
    "ScoredMentor",
]
