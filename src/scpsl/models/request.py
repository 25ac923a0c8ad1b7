"""Request parameters for the ``serverinfo`` endpoint.

``RequestParameters`` is an immutable descriptor built through
``RequestParametersBuilder``. The descriptor knows how to serialise itself
into query parameters; it performs no I/O.

Example:
    parameters = (
        RequestParameters.builder()
        .url(DEFAULT_SERVER_INFO_URL)
        .id(12345)
        .key("abc")
        .players()
        .build()
    )
"""

import re
from typing import Any

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from scpsl.constants import MAX_ACCOUNT_ID
from scpsl.exceptions import InvalidRequestError

# Flag attribute -> query parameter name, in the order they are sent
FLAG_QUERY_NAMES: dict[str, str] = {
    "last_online": "lo",
    "players": "players",
    "list": "list",
    "info": "info",
    "pastebin": "pastebin",
    "version": "version",
    "flags": "flags",
    "nicknames": "nicknames",
    "online": "online",
}

REQUIRED_FIELDS = ("url", "id", "key")

# ASCII (IDNA-encoded) host: DNS labels, IPv4 or IPv6 literal
HOST_PATTERN = re.compile(rb"[A-Za-z0-9._:-]+")


class RequestParameters(BaseModel):
    """Validated, immutable parameters for one ``serverinfo`` request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: StrictStr
    id: StrictInt = Field(ge=0, le=MAX_ACCOUNT_ID)
    key: StrictStr = Field(min_length=1, repr=False)

    last_online: StrictBool = False
    players: StrictBool = False
    list: StrictBool = False
    info: StrictBool = False
    pastebin: StrictBool = False
    version: StrictBool = False
    flags: StrictBool = False
    nicknames: StrictBool = False
    online: StrictBool = False

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        try:
            parsed = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"URL could not be parsed: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ValueError("URL must be an absolute http(s) URL with a host")
        if not HOST_PATTERN.fullmatch(parsed.raw_host):
            raise ValueError(f"URL host is not a valid hostname: {parsed.host!r}")
        return value

    @classmethod
    def builder(cls) -> "RequestParametersBuilder":
        return RequestParametersBuilder()

    def to_query_params(self) -> dict[str, str]:
        """Serialise the descriptor into ``serverinfo`` query parameters.

        Unset flags are omitted rather than sent as ``false``.
        """
        params = {"id": str(self.id), "key": self.key}
        for attr, name in FLAG_QUERY_NAMES.items():
            if getattr(self, attr):
                params[name] = "true"
        return params

    def redacted_query_params(self) -> dict[str, str]:
        """Query parameters safe to write to logs."""
        params = self.to_query_params()
        params["key"] = "***"
        return params


class RequestParametersBuilder:
    """Chainable builder for :class:`RequestParameters`.

    Flag setters default to ``True`` so ``.players()`` reads naturally;
    pass ``False`` to clear a flag again.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def url(self, value: str) -> "RequestParametersBuilder":
        self._values["url"] = value
        return self

    def id(self, value: int) -> "RequestParametersBuilder":
        self._values["id"] = value
        return self

    def key(self, value: str) -> "RequestParametersBuilder":
        self._values["key"] = value
        return self

    def last_online(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["last_online"] = value
        return self

    def players(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["players"] = value
        return self

    def list(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["list"] = value
        return self

    def info(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["info"] = value
        return self

    def pastebin(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["pastebin"] = value
        return self

    def version(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["version"] = value
        return self

    def flags(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["flags"] = value
        return self

    def nicknames(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["nicknames"] = value
        return self

    def online(self, value: bool = True) -> "RequestParametersBuilder":
        self._values["online"] = value
        return self

    def build(self) -> RequestParameters:
        """Validate the collected values and produce the request descriptor.

        Raises:
            InvalidRequestError: If ``url``, ``id`` or ``key`` is missing, or
                any value fails validation.
        """
        missing = [name for name in REQUIRED_FIELDS if self._values.get(name) is None]
        if missing:
            raise InvalidRequestError(
                f"Missing required request parameter(s): {', '.join(missing)}"
            )

        try:
            return RequestParameters(**self._values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidRequestError(f"Invalid request parameters: {problems}") from e
