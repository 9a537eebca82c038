"""Tokenizer output: the searchable form of one free-text mentee field."""

from pydantic import BaseModel


class Phrase(BaseModel):
    """One delimited segment of the input text."""
    original: str
    lower: str


class TokenSet(BaseModel):
    """Tokens extracted from a single mentee field.

    `values` holds every segment and every word longer than two characters,
    lowercased and de-duplicated in first-seen order. `phrases` keeps one
    entry per segment (duplicates included) with its original casing.
    """
    values: list[str] = []
    phrases: list[Phrase] = []


class ProfileTokens(BaseModel):
    """The three token sets that take part in scoring."""
    current: TokenSet = TokenSet()
    desired: TokenSet = TokenSet()
    industry: TokenSet = TokenSet()
