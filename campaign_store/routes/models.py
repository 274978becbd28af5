"""Pydantic request models for API endpoints.

Collection routes take query parameters, so each kind has a query model whose
fields are all optional strings. Required-field checks and coercion happen in
storage; exclude_unset tells "absent" apart from "empty".
"""

from typing import Any

from pydantic import BaseModel


class CharacterFields(BaseModel):
    name: str | None = None
    race: str | None = None
    age: str | None = None
    personality: str | None = None
    goals: str | None = None
    visual_description: str | None = None
    relationship: str | None = None


class LocationFields(BaseModel):
    name: str | None = None
    visual_description: str | None = None
    region: str | None = None
    type: str | None = None
    notes: str | None = None
    factions: str | None = None
    characters: str | None = None


class QuestFields(BaseModel):
    title: str | None = None
    description: str | None = None
    status: str | None = None
    locations: str | None = None
    reward: str | None = None
    notes: str | None = None


class SceneFields(BaseModel):
    title: str | None = None
    description: str | None = None
    location: str | None = None
    characters: str | None = None
    notes: str | None = None


class RemoveFromSheet(BaseModel):
    path: Any = None
    value: Any = None
