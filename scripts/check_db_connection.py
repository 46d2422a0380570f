#!/usr/bin/env python3
"""Check that the WorkMongolia PostgreSQL server is reachable.

Tries the primary server (DB_HOST) and then the fallback (DB_FALLBACK_HOST),
exiting 0 on the first successful ``SELECT 1`` and 1 if none answers.
"""

import sys
import asyncio
import argparse

from workmongolia.core.config import settings
from workmongolia.core.database import check_connection
from workmongolia.core.logging import setup_logging, get_logger

logger = get_logger(__name__)


def candidate_servers() -> list[tuple[str, str]]:
    servers = [("Primary", settings.DB_HOST)]
    if settings.DB_FALLBACK_HOST and settings.DB_FALLBACK_HOST != settings.DB_HOST:
        servers.append(("Fallback", settings.DB_FALLBACK_HOST))
    return servers


async def run(timeout: float) -> bool:
    for label, host in candidate_servers():
        logger.info(f"Attempting to connect ({label}) {host}:{settings.DB_PORT}...")
        try:
            await check_connection(settings.database_url_for(host), timeout=timeout)
        except Exception as e:
            logger.error(f"Connection failed ({label}): {e}")
            continue
        logger.info(f"Connected to {label} server: {host}")
        return True

    logger.error("Could not connect to any database server")
    return False


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Database connectivity smoke test")
    parser.add_argument("--timeout", type=float, default=5.0, help="Seconds to wait per server")
    args = parser.parse_args()

    setup_logging()
    success = asyncio.run(run(args.timeout))
    sys.exit(0 if success else 1)
