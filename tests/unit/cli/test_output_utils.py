"""Unit tests for CLI output utilities."""

from datetime import date

from rich.panel import Panel
from rich.table import Table

from scpsl.cli.utils.output import (
    MISSING,
    create_server_detail_panel,
    create_servers_table,
    format_flag,
    format_last_online,
)
from scpsl.models import Player, PlayersCount, ServerInfo, SuccessResponse


class TestFormatFlag:
    """Tests for the format_flag function."""

    def test_values(self) -> None:
        """Test yes, no and missing."""
        assert "yes" in format_flag(True)
        assert "no" in format_flag(False)
        assert format_flag(None) == MISSING


class TestFormatLastOnline:
    """Tests for the format_last_online function."""

    def test_today(self) -> None:
        """Test the current day is called out."""
        today = date(2024, 3, 15)
        assert format_last_online(today, today=today) == "today"

    def test_past_date(self) -> None:
        """Test other dates render as ISO."""
        assert format_last_online(date(2024, 1, 2), today=date(2024, 3, 15)) == "2024-01-02"

    def test_missing(self) -> None:
        """Test absent dates render as a dash."""
        assert format_last_online(None) == MISSING


class TestCreateServersTable:
    """Tests for the create_servers_table function."""

    def test_one_row_per_server(self) -> None:
        """Test a row is added for each server."""
        response = SuccessResponse(
            cooldown=0,
            servers=[
                ServerInfo(
                    id=1,
                    port=7777,
                    players_count=PlayersCount(current_players=5, max_players=20),
                ),
                ServerInfo(id=2, port=7778),
            ],
        )

        table = create_servers_table(response)

        assert isinstance(table, Table)
        assert table.row_count == 2
        assert table.title == "Servers (2)"


class TestCreateServerDetailPanel:
    """Tests for the create_server_detail_panel function."""

    def test_creates_panel(self) -> None:
        """Test that a panel lists players with and without nicknames."""
        server = ServerInfo(
            id=4242,
            port=7777,
            info="Welcome",
            players=[Player(id="1@steam"), Player(id="2@steam", nickname="Bright")],
        )

        panel = create_server_detail_panel(server)

        assert isinstance(panel, Panel)
        content = str(panel.renderable)
        assert "Welcome" in content
        assert "1@steam" in content
        assert "Bright" in content
