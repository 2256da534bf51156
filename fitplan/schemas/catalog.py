"""Catalog entry schemas, including the shape of one bundled seed record."""

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    muscle_group: str
    image: bytes | None = None


class CatalogSeedRecord(BaseModel):
    """One element of the seed JSON array: ``{"name", "muscleGroup", "image"}``.
    ``image`` is base64 text; empty or missing means no image."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    muscle_group: str = Field(..., alias="muscleGroup")
    image: str | None = ""
