#!/usr/bin/env python3
"""Ensure the bootstrap account exists.

Idempotent: running it again leaves an existing account untouched.

Usage:
    # From project root, with MONGO_URI, SESSION_SECRET and WEATHER_API_KEY set
    # (or present in .env):
    python scripts/seed_user.py
"""

import asyncio
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from app.application.use_cases.auth.seed_user import SeedUserUseCase
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.di.container import DIContainer
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger("seed_user")


async def seed_user() -> None:
    """Open the store, make sure the username index and bootstrap user exist, close."""
    container = DIContainer()
    await container.startup()
    try:
        await container.get(UserRepository).ensure_indexes()
        user = await container.get(SeedUserUseCase).execute()
        logger.info(f"Bootstrap user ready: {user.username} ({user.id})")
    finally:
        await container.shutdown()


def main() -> int:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    configure_logging(get_settings().log_level)
    try:
        asyncio.run(seed_user())
    except Exception:
        logger.error("Seeding failed", exc_info=True)
        return 1
    logger.info("Seeding completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
