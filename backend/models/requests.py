from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PrivateAttr, StrictStr, model_validator


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


def _strip(value: str) -> str:
    return value.strip()


# Checked for content but passed through untouched
RequiredText = Annotated[StrictStr, AfterValidator(_not_blank)]
# Checked for content and trimmed before the engine sees it
TrimmedText = Annotated[StrictStr, AfterValidator(_not_blank), AfterValidator(_strip)]


class MenteeProfile(BaseModel):
    """Free-text answers from the smart-match form."""
    model_config = ConfigDict(populate_by_name=True)

    current_skills: TrimmedText = Field(..., alias="currentSkills")
    desired_skills: TrimmedText = Field(..., alias="desiredSkills")
    # Accepted and validated, not used for scoring
    career_goals: TrimmedText = Field(..., alias="careerGoals")
    industry_interests: TrimmedText = Field(..., alias="industryInterests")


class MentorCandidate(BaseModel):
    """A mentor record as supplied by the caller.

    Only the declared fields are read by the engine. Anything else on the
    record (email, avatar, yearsOfExperience, ...) is kept as an extra and
    returned unchanged.
    """
    model_config = ConfigDict(extra="allow")

    name: RequiredText
    title: RequiredText
    company: RequiredText
    expertise: list[StrictStr] = []
    availability: dict[str, Any] = {}
    bio: StrictStr | None = None

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler):
        mentor = handler(data)
        if isinstance(data, dict):
            mentor._key_order = list(data)
        return mentor

    def as_record(self) -> dict[str, Any]:
        """Return exactly the fields the caller sent, in the order they were sent."""
        extras = self.model_extra or {}
        declared = self.model_dump(include=set(self.model_fields_set) - set(extras))
        values = {**declared, **extras}
        ordered = {key: values[key] for key in self._key_order if key in values}
        return {**ordered, **values}


class MatchmakingRequest(BaseModel):
    profile: MenteeProfile
    mentors: list[MentorCandidate] = Field(..., min_length=1)
