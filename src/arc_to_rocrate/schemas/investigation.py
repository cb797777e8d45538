"""ISA investigation JSON schema, limited to the fields the converter reads."""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Person(BaseModel):
    """A contact of the investigation.

    ISA JSON may list a person as a plain ``"First Last"`` string; such
    entries are normalized into a record before validation.
    """

    first_name: Annotated[str, Field(alias="firstName", description="First name")] = ""
    last_name: Annotated[str, Field(alias="lastName", description="Last name")] = ""
    orcid: Annotated[str | None, Field(description="ORCID identifier")] = None
    doi: Annotated[str | None, Field(description="DOI identifying the person")] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def split_plain_name(cls, data: Any) -> Any:
        """Turn ``"First Last"`` into a record with first and last name."""
        if isinstance(data, str):
            parts = data.split(" ")
            return {"firstName": parts[0], "lastName": parts[1] if len(parts) > 1 else ""}
        return data

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def none_as_empty_name(cls, v: Any) -> Any:
        """Treat null names like missing ones."""
        return "" if v is None else v


class Publication(BaseModel):
    """A publication related to the investigation."""

    doi: Annotated[str | None, Field(description="DOI of the publication")] = None


class Assay(BaseModel):
    """An assay registered in a study."""

    filename: Annotated[str, Field(description="Assay file path relative to the assays folder")]


class Study(BaseModel):
    """A study of the investigation."""

    assays: Annotated[list[Assay], Field(description="Assays of the study")] = Field(default_factory=list)

    @field_validator("assays", mode="before")
    @classmethod
    def none_as_empty_assays(cls, v: Any) -> Any:
        """Treat a null assay list like a missing one."""
        return [] if v is None else v


class Investigation(BaseModel):
    """Top level ISA investigation record."""

    identifier: Annotated[str | None, Field(description="Investigation identifier")] = None
    description: Annotated[str | None, Field(description="Investigation description")] = None
    public_release_date: Annotated[
        datetime,
        Field(alias="publicReleaseDate", description="Public release date, normalized to UTC"),
    ]
    people: Annotated[list[Person], Field(description="Contacts")] = Field(default_factory=list)
    publications: Annotated[list[Publication], Field(description="Publications")] = Field(default_factory=list)
    studies: Annotated[list[Study], Field(description="Studies")] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("people", "publications", "studies", mode="before")
    @classmethod
    def none_as_empty_list(cls, v: Any) -> Any:
        """Treat null lists like missing ones."""
        return [] if v is None else v

    @field_validator("public_release_date", mode="before")
    @classmethod
    def parse_release_date(cls, v: Any) -> datetime:
        """Parse an ISO 8601 date or date-time string into an aware UTC datetime.

        Date-only values and date-times without offset are taken as UTC.
        """
        if isinstance(v, datetime):
            parsed = v
        elif isinstance(v, str):
            try:
                parsed = datetime.fromisoformat(v.strip())
            except ValueError as e:
                raise ValueError(f"invalid date '{v}'") from e
        else:
            raise ValueError(f"invalid date {v!r}, expected an ISO 8601 string")
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        try:
            return parsed.astimezone(UTC)
        except OverflowError as e:
            raise ValueError(f"invalid date '{v}', out of range in UTC") from e
