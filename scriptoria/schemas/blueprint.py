from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Budget(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return BUDGET_LABELS[self]

    @classmethod
    def label_for(cls, value: str | None) -> str:
        """Display label for a raw budget value; unknown values read as medium."""
        try:
            return cls(value).label
        except ValueError:
            return cls.MEDIUM.label


BUDGET_LABELS: dict[Budget, str] = {
    Budget.LOW: "Low Budget",
    Budget.MEDIUM: "Medium Budget",
    Budget.HIGH: "High Budget",
}


class BlueprintRequest(CamelModel):
    # null and blank values both fall back to the prompt defaults.
    genre: str | None = None
    tone: str | None = None
    logline: str | None = None
    setting: str | None = None
    era: str | None = None
    visual_style: str | None = None
    # Kept as a plain string: unrecognised values fall back to the medium label.
    budget: str | None = Budget.MEDIUM.value


class FilmBlueprint(CamelModel):
    story: str = ""
    characters: str = ""
    character_design: str = ""
    locations: str = ""
    screenplay: str = ""
    storyboard: str = ""
    visual_style: str = ""
    costumes: str = ""
    props: str = ""
    sound: str = ""
    shots: str = ""
    lighting: str = ""
    production: str = ""
    casting: str = ""

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in type(self).model_fields)

    def missing_sections(self) -> list[str]:
        """camelCase keys of the sections that are still empty."""
        return [
            to_camel(name) for name in type(self).model_fields if not getattr(self, name)
        ]


# Display order and titles, as rendered by the UI and the exporters.
SECTION_TITLES: tuple[tuple[str, str], ...] = (
    ("story", "Story & Structure"),
    ("characters", "Character Arcs"),
    ("character_design", "Character Design"),
    ("locations", "Locations"),
    ("screenplay", "Screenplay"),
    ("storyboard", "Storyboard Notes"),
    ("visual_style", "Visual Style Guide"),
    ("costumes", "Costume Design"),
    ("props", "Props & Set Design"),
    ("sound", "Sound Design"),
    ("shots", "Shot List"),
    ("lighting", "Lighting Design"),
    ("casting", "Casting Breakdown"),
    ("production", "Production Plan"),
)


class BlueprintResponse(CamelModel):
    blueprint: FilmBlueprint
    missing_sections: list[str] = Field(default_factory=list)


class ContinuationRequest(CamelModel):
    # Defaults keep a missing field on the 400 path instead of pydantic's 422.
    existing_story: str | None = None
    direction: str | None = None


class ContinuationResponse(BaseModel):
    continuation: str


class ExportRequest(BaseModel):
    blueprint: FilmBlueprint
    format: Literal["markdown", "text"] = "markdown"
    title: str | None = None


class ErrorResponse(BaseModel):
    error: str
