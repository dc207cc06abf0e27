"""Data models for the generated book catalog."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.alias_generators import to_camel


class Difficulty(str, Enum):
    """Reading difficulty tier derived from lexical complexity."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    VERY_HARD = "Very Hard"


class CatalogEntry(BaseModel):
    """One book in the catalog.

    Serialized with camelCase keys (``numPages``, ``readTime``...) so the
    output can be consumed directly by a JavaScript front end.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    title: str
    author: str
    num_pages: int | None
    creation_date: str
    read_time: str | None
    difficulty: Difficulty | None
    rating: float
    signature: Literal["RE", "JE"]

    @property
    def is_degraded(self) -> bool:
        """True when the document itself could not be parsed."""
        return self.num_pages is None


class Catalog(RootModel[tuple[CatalogEntry, ...]]):
    """Ordered, immutable collection of catalog entries."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> CatalogEntry:
        return self.root[index]

    def to_json(self) -> str:
        """Serialize as an indented JSON array with camelCase keys."""
        return self.model_dump_json(indent=2, by_alias=True)
