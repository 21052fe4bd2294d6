#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from cradle.api import CradleClient, HealthCheckError
from cradle.api.core.enums import AccountType, MarketStatus, MarketType
from cradle.api.mutations import is_create_account


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check a Cradle back-end and create a test account")
    p.add_argument("linked_account_id", nargs="?", default="user-12345")
    p.add_argument("--create", action="store_true", help="Submit a CreateAccount mutation")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # CRADLE_API_KEY / CRADLE_API_URL / CRADLE_API_TIMEOUT_MS
    async with CradleClient.from_env() as client:
        try:
            health = await client.health()
            print(f"Back-end {client.config.base_url}: {health.status} at {health.timestamp}")
        except HealthCheckError as e:
            print(f"Back-end {client.config.base_url} is down: {e}")
            return

        markets = await client.get_markets(
            {"market_type": MarketType.SPOT, "status": MarketStatus.ACTIVE}
        )
        if markets.success:
            print(f"Active spot markets: {len(markets.data)}")
            print(f"{'Name':20} | {'Regulation':12} | Id")
            print("-" * 60)
            for m in markets.data:
                print(f"{m.name:20} | {m.market_regulation.value:12} | {m.id}")
        else:
            print(f"Listing markets failed: {markets.error}")

        if not args.create:
            return

        created = await client.create_account(
            {"linked_account_id": args.linked_account_id, "account_type": AccountType.RETAIL}
        )
        if not created.success:
            print(f"CreateAccount failed: {created.error}")
            return
        if is_create_account(created.data):
            account = await client.get_account(created.data.result)
            print(f"Created account: {account.data if account.success else created.data.result}")
        else:
            print(f"Unexpected mutation response: {created.data}")


if __name__ == "__main__":
    asyncio.run(main())
