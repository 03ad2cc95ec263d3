"""Modelos tipados para las respuestas de iTunes Search API."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ResultType(str, Enum):
    """Valores admitidos por el parámetro ``entity`` de /search."""

    SOFTWARE = "software"
    MUSIC_TRACK = "musicTrack"
    MOVIE = "movie"

    @classmethod
    def from_segment(cls, index: int) -> "ResultType":
        """Traduce la posición del selector (0, 1, 2) al tipo de resultado."""
        segments = (cls.SOFTWARE, cls.MUSIC_TRACK, cls.MOVIE)
        if not 0 <= index < len(segments):
            raise ValueError(f"Segmento no soportado: {index}")
        return segments[index]

    @classmethod
    def parse(cls, value: str) -> "ResultType":
        raw = (value or "").strip()
        for member in cls:
            if raw == member.value or raw.upper() == member.name:
                return member
        raise ValueError(f"Tipo de resultado no soportado: {value!r}")


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(validation_alias=AliasChoices("title", "trackName"))
    artist: str = Field(validation_alias=AliasChoices("artist", "artistName"))


class SearchResults(BaseModel):
    """Sobre JSON de /search: ``{"resultCount": n, "results": [...]}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    results: List[SearchResult]
    result_count: Optional[int] = Field(default=None, alias="resultCount")


__all__ = [
    "ResultType",
    "SearchResult",
    "SearchResults",
]
