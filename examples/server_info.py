# Prints the total number of players across your servers.
#
# Usage:
#     SCPSL_ACCOUNT_ID=12345 SCPSL_API_KEY=... python examples/server_info.py

import asyncio
import logging

from scpsl import ClientConfig, ScpslHTTPClient


async def main() -> None:
    config = ClientConfig.from_env()
    parameters = config.request_builder().players().build()

    async with ScpslHTTPClient.from_config(config) as client:
        response = await client.get_server_info(parameters)

    if not response.is_success:
        print(f"API error: {response.error}")
        return

    for server in response.servers:
        count = server.players_count
        if count is None:
            print(f"Server {server.id}: player count not reported")
        else:
            print(f"Server {server.id}: {count.current_players}/{count.max_players}")

    print(f"Total players: {response.total_players}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
