"""Page selection request models."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from selpg.typing.enums import DelimiterMode
from selpg.typing.models.source import InputSource, StandardInputSource

DEFAULT_PAGE_LENGTH = 72
UNSET_PAGE = -1


class RawOptions(BaseModel):
    """Flat option record as parsed from the command line."""

    model_config = ConfigDict(extra="forbid")

    start_page: int = UNSET_PAGE
    end_page: int = UNSET_PAGE
    page_length: int = DEFAULT_PAGE_LENGTH
    form_feed: bool = False
    page_length_explicit: bool = False
    destination: str = ""
    positional: list[str] = Field(default_factory=list)
    raw_args: list[str] = Field(default_factory=list)


class SelectionRequest(BaseModel):
    """Validated page range request, read-only once built."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_page: int = Field(ge=1)
    end_page: int = Field(ge=1)
    page_length: int = Field(default=DEFAULT_PAGE_LENGTH, ge=1)
    mode: DelimiterMode = DelimiterMode.LINES
    destination: str | None = None
    source: InputSource = Field(default_factory=StandardInputSource)

    @model_validator(mode="after")
    def check_range(self) -> Self:
        if self.end_page < self.start_page:
            message = "end_page must not be smaller than start_page"
            raise ValueError(message)
        return self

    @property
    def delimited_by_form_feed(self) -> bool:
        """Return whether pages are separated by form feeds."""
        return self.mode is DelimiterMode.FORM_FEED
