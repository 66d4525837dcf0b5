from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from moviemagnet.core.exceptions import MalformedRecord


class Actor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str
    role: str


class DownloadLink(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    quality: str
    link: str


class Movie(BaseModel):
    """Read-only view of one document in the movies collection."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    title: str = ""
    # stored as text, e.g. "7.8" / "2014"
    rating: str = ""
    year: str = ""
    summary: str = ""
    trailer_link: str = Field(default="", alias="trailerLink")
    image_url: str = Field(default="", alias="imageUrl")

    # no defaults: a document without these lists cannot be presented
    genres: list[str]
    actors: list[Actor]
    download: list[DownloadLink]

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Movie":
        """
        Raises:
            MalformedRecord: If required fields are absent or of the wrong shape
        """
        movie_id = document.get("_id") if isinstance(document, Mapping) else None
        try:
            return cls.model_validate(document)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedRecord(
                f"Movie document {movie_id!r} is malformed: {fields}",
                movie_id=movie_id,
            ) from e
