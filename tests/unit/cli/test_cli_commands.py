"""Unit tests for CLI commands."""

import ipaddress
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from scpsl.cli.main import app
from scpsl.config import ENV_VARS, ClientConfig
from scpsl.exceptions import AddressParseError, ScpslConnectionError, ScpslHTTPStatusError
from scpsl.models import RawResponse

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real SCPSL_* variables from leaking into CLI tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestMainApp:
    """Tests for the main CLI application."""

    def test_help_output(self) -> None:
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Secret Laboratory" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Test that running without arguments shows help."""
        result = runner.invoke(app, [])
        assert "servers" in result.stdout
        assert "ip" in result.stdout
        assert "config" in result.stdout

    def test_servers_help(self) -> None:
        """Test servers --help lists the request flags."""
        result = runner.invoke(app, ["servers", "--help"])
        assert result.exit_code == 0
        assert "--players" in result.stdout
        assert "--nicknames" in result.stdout


class TestServersCommand:
    """Tests for the servers command."""

    def test_success_with_players(self, two_servers_payload: dict) -> None:
        """Test a successful query prints the summed player count."""
        raw = RawResponse.model_validate(two_servers_payload)

        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = raw
            result = runner.invoke(
                app, ["servers", "--id", "12345", "--key", "abc", "--players"]
            )

        assert result.exit_code == 0
        assert "Total players:" in result.stdout
        assert "12" in result.stdout

        config, parameters = mock_fetch.call_args[0]
        assert isinstance(config, ClientConfig)
        assert parameters.id == 12345
        assert parameters.key == "abc"
        assert parameters.players is True
        assert parameters.nicknames is False

    def test_credentials_from_environment(self, two_servers_payload: dict) -> None:
        """Test --id and --key fall back to SCPSL_* variables."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse.model_validate(two_servers_payload)
            result = runner.invoke(
                app,
                ["servers"],
                env={"SCPSL_ACCOUNT_ID": "777", "SCPSL_API_KEY": "env-key"},
            )

        assert result.exit_code == 0
        _, parameters = mock_fetch.call_args[0]
        assert parameters.id == 777
        assert parameters.key == "env-key"

    def test_credentials_from_config_file(
        self, tmp_path: Path, two_servers_payload: dict
    ) -> None:
        """Test --config supplies id and key, and options still win."""
        config_path = tmp_path / "scpsl.yaml"
        ClientConfig(account_id=1, api_key="file-key").to_yaml(config_path)

        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse.model_validate(two_servers_payload)
            result = runner.invoke(
                app, ["servers", "--config", str(config_path), "--id", "2"]
            )

        assert result.exit_code == 0
        _, parameters = mock_fetch.call_args[0]
        assert parameters.id == 2
        assert parameters.key == "file-key"

    def test_missing_credentials(self) -> None:
        """Test a clear error when no id or key is available."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            result = runner.invoke(app, ["servers"])

        assert result.exit_code == 1
        assert "Missing required" in result.stdout
        mock_fetch.assert_not_called()

    def test_invalid_id(self) -> None:
        """Test a negative id is rejected before any request."""
        result = runner.invoke(app, ["servers", "--id", "-1", "--key", "abc"])
        assert result.exit_code == 1
        assert "Invalid option" in result.stdout

    def test_api_error(self, error_payload: dict) -> None:
        """Test an API-level failure is shown and exits with 1."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse.model_validate(error_payload)
            result = runner.invoke(app, ["servers", "--id", "1", "--key", "bad"])

        assert result.exit_code == 1
        assert "Invalid API key" in result.stdout

    def test_transport_error(self) -> None:
        """Test connection failures exit with 1."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.side_effect = ScpslConnectionError("HTTP error: refused")
            result = runner.invoke(app, ["servers", "--id", "1", "--key", "abc"])

        assert result.exit_code == 1
        assert "Request failed" in result.stdout

    def test_http_status_error(self) -> None:
        """Test non-2xx responses exit with 1 and show the body."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.side_effect = ScpslHTTPStatusError(
                "API returned HTTP 502", status_code=502, body="Bad Gateway"
            )
            result = runner.invoke(app, ["servers", "--id", "1", "--key", "abc"])

        assert result.exit_code == 1
        assert "502" in result.stdout

    def test_undecodable_success(self) -> None:
        """Test a success without servers is reported as a decode error."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse(success=True, cooldown=5)
            result = runner.invoke(app, ["servers", "--id", "1", "--key", "abc"])

        assert result.exit_code == 1
        assert "Could not decode" in result.stdout

    def test_json_output(self, two_servers_payload: dict) -> None:
        """Test --json prints the response in the API's field layout."""
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse.model_validate(two_servers_payload)
            result = runner.invoke(
                app, ["servers", "--id", "1", "--key", "abc", "--json"]
            )

        assert result.exit_code == 0
        assert '"Success": true' in result.stdout
        assert '"Players": "5/20"' in result.stdout
        assert "Total players" not in result.stdout

    def test_json_output_is_decoded_response(self, two_servers_payload: dict) -> None:
        """Test --json prints the decoded wire model, not the body verbatim."""
        payload = {**two_servers_payload, "Motd": "ignored"}
        with patch(
            "scpsl.cli.commands.servers._fetch_raw_server_info",
            new_callable=AsyncMock,
        ) as mock_fetch:
            mock_fetch.return_value = RawResponse.model_validate(payload)
            result = runner.invoke(
                app, ["servers", "--id", "1", "--key", "abc", "--json"]
            )

        assert result.exit_code == 0
        assert "Motd" not in result.stdout
        assert '"Cooldown": 25' in result.stdout


class TestIpCommand:
    """Tests for the ip command."""

    def test_prints_address(self) -> None:
        """Test the address is printed."""
        with patch(
            "scpsl.cli.commands.ip._fetch_ip", new_callable=AsyncMock
        ) as mock_fetch:
            mock_fetch.return_value = ipaddress.ip_address("203.0.113.7")
            result = runner.invoke(app, ["ip"])

        assert result.exit_code == 0
        assert "203.0.113.7" in result.stdout

    def test_url_override(self) -> None:
        """Test --url replaces the configured endpoint."""
        with patch(
            "scpsl.cli.commands.ip._fetch_ip", new_callable=AsyncMock
        ) as mock_fetch:
            mock_fetch.return_value = ipaddress.ip_address("2001:db8::1")
            result = runner.invoke(app, ["ip", "--url", "http://localhost/ip"])

        assert result.exit_code == 0
        (config,) = mock_fetch.call_args[0]
        assert config.ip_url == "http://localhost/ip"

    def test_parse_failure(self) -> None:
        """Test an unparseable body exits with 1."""
        with patch(
            "scpsl.cli.commands.ip._fetch_ip", new_callable=AsyncMock
        ) as mock_fetch:
            mock_fetch.side_effect = AddressParseError("bad body")
            result = runner.invoke(app, ["ip"])

        assert result.exit_code == 1
        assert "Request failed" in result.stdout


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_help(self) -> None:
        """Test config --help works."""
        result = runner.invoke(app, ["config", "--help"])
        assert result.exit_code == 0
        assert "validate" in result.stdout
        assert "generate" in result.stdout
        assert "show" in result.stdout

    def test_generate_and_validate(self, tmp_path: Path) -> None:
        """Test a generated file passes validation."""
        config_path = tmp_path / "scpsl.yaml"

        result = runner.invoke(
            app, ["config", "generate", str(config_path), "--id", "12345"]
        )
        assert result.exit_code == 0
        assert config_path.exists()
        assert ClientConfig.from_yaml(config_path).account_id == 12345

        result = runner.invoke(app, ["config", "validate", str(config_path)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.stdout
        assert "api_key is not set" in result.stdout

    def test_generate_refuses_overwrite(self, tmp_path: Path) -> None:
        """Test an existing file is kept unless --force is given."""
        config_path = tmp_path / "scpsl.yaml"
        config_path.write_text("timeout: 3\n")

        result = runner.invoke(app, ["config", "generate", str(config_path)])
        assert result.exit_code == 1
        assert "already exists" in result.stdout

        result = runner.invoke(app, ["config", "generate", str(config_path), "--force"])
        assert result.exit_code == 0

    def test_validate_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML is reported."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("timeout: [unclosed\n")

        result = runner.invoke(app, ["config", "validate", str(config_path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.stdout

    def test_validate_unknown_key(self, tmp_path: Path) -> None:
        """Test unknown keys fail validation."""
        config_path = tmp_path / "typo.yaml"
        config_path.write_text(yaml.dump({"acount_id": 1}))

        result = runner.invoke(app, ["config", "validate", str(config_path)])
        assert result.exit_code == 1
        assert "acount_id" in result.stdout

    def test_validate_bad_value(self, tmp_path: Path) -> None:
        """Test out-of-range values fail validation."""
        config_path = tmp_path / "bad_value.yaml"
        config_path.write_text(yaml.dump({"timeout": -1}))

        result = runner.invoke(app, ["config", "validate", str(config_path)])
        assert result.exit_code == 1
        assert "timeout" in result.stdout

    def test_show_masks_key(self, tmp_path: Path) -> None:
        """Test show never prints the API key."""
        config_path = tmp_path / "scpsl.yaml"
        ClientConfig(account_id=1, api_key="super-secret").to_yaml(config_path)

        result = runner.invoke(app, ["config", "show", str(config_path)])
        assert result.exit_code == 0
        assert "super-secret" not in result.stdout
        assert "***" in result.stdout
