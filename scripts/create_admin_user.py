"""
Create an admin user for the impact report admin panel.

Usage:
    python scripts/create_admin_user.py <email> <password> [--first-name NAME] [--last-name NAME]
"""
import argparse
import asyncio
import logging
import sys

from impact_report.core.mongodb import init_store
from impact_report.services.user_service import UserService

logger = logging.getLogger("create_admin_user")


async def main(args: argparse.Namespace) -> int:
    store = init_store()
    try:
        user = await UserService.create_admin_user(
            store,
            args.email,
            args.password,
            first_name=args.first_name,
            last_name=args.last_name,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1
    finally:
        await store.disconnect()

    logger.info(f"Admin user created: {user.email} (admin={user.admin})")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")

    sys.exit(asyncio.run(main(parser.parse_args())))
