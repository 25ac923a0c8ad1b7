"""Typed ``serverinfo`` response models and the response parser.

The API answers with either a list of servers or an error message. That
maps onto the ``Response`` union: ``SuccessResponse | ErrorResponse``.
Fields that were not requested (or not reported) are ``None`` and must be
checked by the caller:

    response = parse_response(body)
    if response.is_success:
        for server in response.servers:
            if server.players_count is not None:
                print(server.players_count.current_players)
    else:
        print(response.error)
"""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scpsl.constants import LAST_ONLINE_FORMAT, PLAYERS_COUNT_SEPARATOR
from scpsl.exceptions import ResponseDecodeError
from scpsl.models.raw import RawPlayer, RawPlayerEntry, RawResponse, RawServerInfo

# "current/max" in plain ASCII decimal: no sign, padding or leading zeros
_COUNT = r"(0|[1-9][0-9]*)"
PLAYERS_COUNT_PATTERN = re.compile(
    _COUNT + re.escape(PLAYERS_COUNT_SEPARATOR) + _COUNT, re.ASCII
)


class PlayersCount(BaseModel):
    """Current and maximum player occupancy of a server."""

    model_config = ConfigDict(frozen=True)

    current_players: int = Field(ge=0)
    max_players: int = Field(ge=0)

    @classmethod
    def parse(cls, value: str) -> PlayersCount:
        """Parse the API's ``"current/max"`` representation.

        Raises:
            ResponseDecodeError: If the value is not two non-negative integers
                in plain decimal form.
        """
        match = PLAYERS_COUNT_PATTERN.fullmatch(value)
        if match is None:
            raise ResponseDecodeError(f"Malformed player count: {value!r}")
        return cls(
            current_players=int(match.group(1)), max_players=int(match.group(2))
        )

    def __str__(self) -> str:
        return f"{self.current_players}{PLAYERS_COUNT_SEPARATOR}{self.max_players}"


class Player(BaseModel):
    """A connected player. ``nickname`` is only sent when requested."""

    model_config = ConfigDict(frozen=True)

    id: str
    nickname: str | None = None

    @classmethod
    def from_raw(cls, raw: RawPlayer) -> Player:
        if isinstance(raw, str):
            return cls(id=raw)
        return cls(id=raw.id, nickname=raw.nickname)

    def to_raw(self) -> RawPlayer:
        if self.nickname is None:
            return self.id
        return RawPlayerEntry(id=self.id, nickname=self.nickname)


def _parse_last_online(value: str) -> date:
    try:
        return datetime.strptime(value, LAST_ONLINE_FORMAT).date()
    except ValueError as e:
        raise ResponseDecodeError(f"Malformed LastOnline date: {value!r}") from e


def _decode_info(value: str) -> str:
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ResponseDecodeError("Server Info is not valid base64-encoded UTF-8") from e


class ServerInfo(BaseModel):
    """One of the account's servers, with decoded field values."""

    model_config = ConfigDict(frozen=True)

    id: int
    port: int
    last_online: date | None = None
    players_count: PlayersCount | None = None
    players: list[Player] | None = None
    info: str | None = None
    pastebin: str | None = None
    version: str | None = None
    online: bool | None = None
    friendly_fire: bool | None = None
    whitelist: bool | None = None
    modded: bool | None = None
    mods: int | None = None
    suppress: bool | None = None
    auto_suppress: bool | None = None

    @classmethod
    def from_raw(cls, raw: RawServerInfo) -> ServerInfo:
        """Decode a wire record.

        Raises:
            ResponseDecodeError: If ``Players``, ``LastOnline`` or ``Info``
                cannot be decoded.
        """
        return cls(
            id=raw.id,
            port=raw.port,
            last_online=(
                _parse_last_online(raw.last_online)
                if raw.last_online is not None
                else None
            ),
            players_count=(
                PlayersCount.parse(raw.players_count)
                if raw.players_count is not None
                else None
            ),
            players=(
                [Player.from_raw(p) for p in raw.players]
                if raw.players is not None
                else None
            ),
            info=_decode_info(raw.info) if raw.info is not None else None,
            pastebin=raw.pastebin,
            version=raw.version,
            online=raw.online,
            friendly_fire=raw.friendly_fire,
            whitelist=raw.whitelist,
            modded=raw.modded,
            mods=raw.mods,
            suppress=raw.suppress,
            auto_suppress=raw.auto_suppress,
        )

    def to_raw(self) -> RawServerInfo:
        return RawServerInfo(
            id=self.id,
            port=self.port,
            last_online=(
                self.last_online.strftime(LAST_ONLINE_FORMAT)
                if self.last_online is not None
                else None
            ),
            players_count=(
                str(self.players_count) if self.players_count is not None else None
            ),
            players=(
                [p.to_raw() for p in self.players] if self.players is not None else None
            ),
            info=(
                base64.b64encode(self.info.encode("utf-8")).decode("ascii")
                if self.info is not None
                else None
            ),
            pastebin=self.pastebin,
            version=self.version,
            online=self.online,
            friendly_fire=self.friendly_fire,
            whitelist=self.whitelist,
            modded=self.modded,
            mods=self.mods,
            suppress=self.suppress,
            auto_suppress=self.auto_suppress,
        )


class SuccessResponse(BaseModel):
    """Successful ``serverinfo`` response."""

    model_config = ConfigDict(frozen=True)

    cooldown: int = Field(ge=0)  # seconds until the next request is allowed
    servers: list[ServerInfo] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def total_players(self) -> int:
        """Sum of current players over servers that report a player count."""
        return sum(
            server.players_count.current_players
            for server in self.servers
            if server.players_count is not None
        )

    def find_server(self, server_id: int) -> ServerInfo | None:
        for server in self.servers:
            if server.id == server_id:
                return server
        return None


class ErrorResponse(BaseModel):
    """Error reported by the API itself (bad key, cooldown, unknown id...)."""

    model_config = ConfigDict(frozen=True)

    error: str

    @property
    def is_success(self) -> bool:
        return False


Response: TypeAlias = SuccessResponse | ErrorResponse


def response_from_raw(raw: RawResponse) -> Response:
    """Convert a wire response into its typed variant.

    An ``Error`` message takes precedence over the ``Success`` flag.

    Raises:
        ResponseDecodeError: If the payload matches neither variant.
    """
    if raw.error is not None:
        return ErrorResponse(error=raw.error)
    if not raw.success:
        raise ResponseDecodeError("Failure response is missing its Error message")
    if raw.servers is None:
        raise ResponseDecodeError("Success response is missing Servers")
    if raw.cooldown is None:
        raise ResponseDecodeError("Success response is missing Cooldown")
    return SuccessResponse(
        cooldown=raw.cooldown,
        servers=[ServerInfo.from_raw(server) for server in raw.servers],
    )


def response_to_raw(response: Response) -> RawResponse:
    if isinstance(response, ErrorResponse):
        return RawResponse(success=False, error=response.error)
    return RawResponse(
        success=True,
        servers=[server.to_raw() for server in response.servers],
        cooldown=response.cooldown,
    )


def decode_raw_response(body: str | bytes | Mapping[str, Any]) -> RawResponse:
    """Validate a response body against the wire schema.

    Raises:
        ResponseDecodeError: If the body is not JSON or does not match.
    """
    try:
        if isinstance(body, (str, bytes, bytearray)):
            return RawResponse.model_validate_json(body)
        return RawResponse.model_validate(body)
    except ValidationError as e:
        raise ResponseDecodeError(f"Response does not match serverinfo schema: {e}") from e


def parse_response(body: str | bytes | Mapping[str, Any]) -> Response:
    """Parse a ``serverinfo`` body into ``SuccessResponse`` or ``ErrorResponse``.

    Raises:
        ResponseDecodeError: If the body is malformed. A malformed body never
            produces an empty success.
    """
    return response_from_raw(decode_raw_response(body))
