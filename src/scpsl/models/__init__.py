"""Pydantic models for the SCP: Secret Laboratory API.

Usage:
    from scpsl.models import RequestParameters, parse_response
    from scpsl.models import SuccessResponse, ErrorResponse, ServerInfo
"""

# Raw wire models
from scpsl.models.raw import RawPlayer, RawPlayerEntry, RawResponse, RawServerInfo

# Request models
from scpsl.models.request import RequestParameters, RequestParametersBuilder

# Typed response models
from scpsl.models.server_info import (
    ErrorResponse,
    Player,
    PlayersCount,
    Response,
    ServerInfo,
    SuccessResponse,
    decode_raw_response,
    parse_response,
    response_from_raw,
    response_to_raw,
)

__all__ = [
    # Request
    "RequestParameters",
    "RequestParametersBuilder",
    # Raw
    "RawPlayer",
    "RawPlayerEntry",
    "RawResponse",
    "RawServerInfo",
    # Typed
    "Response",
    "SuccessResponse",
    "ErrorResponse",
    "ServerInfo",
    "PlayersCount",
    "Player",
    # Parsing
    "decode_raw_response",
    "parse_response",
    "response_from_raw",
    "response_to_raw",
]
