"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py create-admin --email admin@example.com --password s3cret \
        --firstname Ada --lastname Admin

PROTEAN_ENV selects the configuration overlay from domain.toml
(``--env`` sets it for this run).
"""

import argparse
import os
import sys


def setup_database():
    """Create the database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront...")
    storefront.init()
    print("Creating database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop the database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront...")
    storefront.init()
    print("Dropping database schema...")
    drop_db(storefront)
    print("Done.")


def create_admin(email, password, firstname, lastname):
    """Create an administrator account, or promote the existing account with that email."""
    from protean import UnitOfWork

    from storefront.auth.passwords import hash_password
    from storefront.domain import storefront
    from storefront.user.user import Role, User

    storefront.init()
    with storefront.domain_context(), UnitOfWork():
        users = storefront.repository_for(User)
        user = users.find_by_email(email)
        if user is None:
            user = User.register(
                firstname=firstname,
                lastname=lastname,
                email=email,
                password_hash=hash_password(password),
                role=Role.ADMIN,
            )
            users.add(user)
            print(f"Created administrator {user.email} (id {user.id}).")
        else:
            user.role = Role.ADMIN.value
            users.add(user)
            print(f"Promoted {user.email} (id {user.id}) to administrator.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    parser.add_argument("--env", help="Configuration environment (default: $PROTEAN_ENV or development)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create or promote an administrator")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--firstname", default="Admin")
    admin_parser.add_argument("--lastname", default="User")

    args = parser.parse_args()

    # The domain reads its configuration on import, so the overlay is chosen first
    if args.env:
        os.environ["PROTEAN_ENV"] = args.env

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "create-admin":
        if len(args.password) < 6:
            parser.error("--password must be at least 6 characters")
        create_admin(args.email, args.password, args.firstname, args.lastname)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
