"""Persisted state model."""

from pydantic import BaseModel


class PersistedState(BaseModel):
    api_key: str = ""
