"""Integration tests against the live SCP: Secret Laboratory API.

These tests need real credentials in SCPSL_ACCOUNT_ID and SCPSL_API_KEY
and are skipped otherwise. Keep them few: the API enforces a cooldown
between serverinfo requests.
"""

import ipaddress
import os

import pytest

from scpsl.client import ScpslHTTPClient
from scpsl.constants import DEFAULT_SERVER_INFO_URL
from scpsl.models import RequestParameters, SuccessResponse
from tests.conftest import requires_credentials


@pytest.mark.integration
@requires_credentials
class TestLiveApi:
    """Tests for real serverinfo and ip calls."""

    @pytest.mark.asyncio
    async def test_server_info_with_players(self) -> None:
        """Test a players request returns a count for every server."""
        parameters = (
            RequestParameters.builder()
            .url(DEFAULT_SERVER_INFO_URL)
            .id(int(os.environ["SCPSL_ACCOUNT_ID"]))
            .key(os.environ["SCPSL_API_KEY"])
            .players()
            .build()
        )

        async with ScpslHTTPClient() as client:
            response = await client.get_server_info(parameters)

        if not response.is_success:
            pytest.skip(f"API returned an error: {response.error}")

        assert isinstance(response, SuccessResponse)
        for server in response.servers:
            assert server.players_count is not None

    @pytest.mark.asyncio
    async def test_ip(self) -> None:
        """Test the ip endpoint returns an address."""
        async with ScpslHTTPClient() as client:
            address = await client.get_ip()

        assert isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address))
