"""Pydantic v2 schemas for legislator lookup and outreach messages."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from legislator_lookup.lib.legislators.types import Legislator, SocialEntry, SocialPlatform


class LegislatorLookupRequest(BaseModel):
    """Request body for POST /lookup-legislators."""

    address: str | None = Field(default=None, description="Freeform postal address to resolve")


class SocialEntryResponse(BaseModel):
    """A legislator's presence on one social platform."""

    model_config = ConfigDict(from_attributes=True)

    platform: SocialPlatform
    handle: str | None = None
    url: str | None = None

    def to_entry(self) -> SocialEntry:
        return SocialEntry(platform=self.platform, handle=self.handle, url=self.url)


class LegislatorResponse(BaseModel):
    """A state legislator representing the looked-up address."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    state: str
    chamber: str = Field(description="Raw chamber code: upper or lower")
    chamber_label: str = Field(alias="chamberLabel", description="Human-readable chamber name")
    district: str
    party: str
    social: list[SocialEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_legislator(cls, legislator: Legislator) -> Self:
        return cls(
            id=legislator.id,
            name=legislator.name,
            state=legislator.state,
            chamber=legislator.chamber,
            chamber_label=legislator.chamber_label,
            district=legislator.district,
            party=legislator.party,
            social=[SocialEntryResponse.model_validate(entry) for entry in legislator.social],
        )

    def to_legislator(self) -> Legislator:
        return Legislator(
            id=self.id,
            name=self.name,
            state=self.state,
            chamber=self.chamber,
            chamber_label=self.chamber_label,
            district=self.district,
            party=self.party,
            social=tuple(entry.to_entry() for entry in self.social),
        )


class LegislatorLookupResponse(BaseModel):
    """Response for POST /lookup-legislators."""

    legislators: list[LegislatorResponse] = Field(default_factory=list)


class OutreachMessageRequest(BaseModel):
    """Request body for POST /outreach/message."""

    template: str = Field(min_length=1, description="Message text containing a {{handles}} placeholder")
    legislators: list[LegislatorResponse] = Field(default_factory=list)
    platform: SocialPlatform = SocialPlatform.TWITTER


class OutreachMessageResponse(BaseModel):
    """Composed outreach message."""

    message: str
    intent_url: str | None = None
