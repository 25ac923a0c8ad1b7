"""Wire-level models for ``serverinfo`` responses.

These mirror the JSON exactly as the API sends it (PascalCase keys, the
``"current/max"`` player string, base64 ``Info``). They round-trip back to
the same JSON shape, which is useful for building a local API proxy.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from scpsl.constants import MAX_ACCOUNT_ID


class RawPlayerEntry(BaseModel):
    """A ``PlayersList`` entry sent as an object (id plus nickname)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    nickname: str | None = Field(default=None, alias="Nickname")


# A PlayersList entry is either a bare user id or an id/nickname object
RawPlayer = str | RawPlayerEntry


class RawServerInfo(BaseModel):
    """One server record as sent by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: StrictInt = Field(alias="ID", ge=0, le=MAX_ACCOUNT_ID)
    port: StrictInt = Field(alias="Port", ge=0, le=65535)
    last_online: str | None = Field(default=None, alias="LastOnline")
    players_count: str | None = Field(default=None, alias="Players")
    players: list[RawPlayer] | None = Field(default=None, alias="PlayersList")
    info: str | None = Field(default=None, alias="Info")
    pastebin: str | None = Field(default=None, alias="Pastebin")
    version: str | None = Field(default=None, alias="Version")
    online: StrictBool | None = Field(default=None, alias="Online")
    friendly_fire: StrictBool | None = Field(default=None, alias="FF")
    whitelist: StrictBool | None = Field(default=None, alias="WL")
    modded: StrictBool | None = Field(default=None, alias="Modded")
    mods: StrictInt | None = Field(default=None, alias="Mods", ge=0)
    suppress: StrictBool | None = Field(default=None, alias="Suppress")
    auto_suppress: StrictBool | None = Field(default=None, alias="AutoSuppress")


class RawResponse(BaseModel):
    """Top-level ``serverinfo`` response as sent by the API."""

    model_config = ConfigDict(populate_by_name=True)

    success: StrictBool = Field(alias="Success")
    error: str | None = Field(default=None, alias="Error")
    servers: list[RawServerInfo] | None = Field(default=None, alias="Servers")
    cooldown: StrictInt | None = Field(default=None, alias="Cooldown", ge=0)

    def to_wire(self) -> dict:
        """Dump to the API's JSON shape, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
