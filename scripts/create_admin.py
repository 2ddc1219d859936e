"""Utility script to bootstrap an administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from writers_guild.application.use_cases.auth import register_user
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import SessionLocal, initialize_database
from writers_guild.infrastructure.repositories import UserRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for admin creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator for the Writers Guild API.",
    )
    parser.add_argument("--username", default="admin", help="Username (default: admin)")
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address (default: admin@example.com)",
    )
    parser.add_argument("--display-name", default=None, help="Display name (default: username)")
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted for interactively when omitted.",
    )
    parser.add_argument(
        "--super-admin",
        action="store_true",
        help="Also allow this account to grant and revoke admin rights.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an admin using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
            display_name=args.display_name,
        )
        user.is_admin = True
        user.is_super_admin = args.super_admin
        user.is_verified = True
        user = UserRepository(session).update(user)
    except WritersGuildError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the admin: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the admin in the database: {exc}") from exc
    else:
        print(
            "Admin created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Email: {user.email}\n"
            f"  Super admin: {'yes' if user.is_super_admin else 'no'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
