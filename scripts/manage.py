#!/usr/bin/env python3
"""
Database and staff account management for the Item Request Service.

Usage:
    python scripts/manage.py init                               - create database tables
    python scripts/manage.py add <username> <email> <password>  - add a staff user
    python scripts/manage.py list                               - list users
"""

import sys
from pathlib import Path

# Add the parent directory to the path so we can import itemrequest modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session, SQLModel, select

from itemrequest.core.security import get_password_hash
from itemrequest.db.base import *  # noqa: register all tables
from itemrequest.db.session import engine
from itemrequest.models.user import User


def cmd_init(args):
    """Create database tables."""
    SQLModel.metadata.create_all(engine)
    print("Tables created:")
    for table in SQLModel.metadata.tables.keys():
        print(f"  - {table}")


def cmd_add(args):
    if len(args) != 3:
        print("Usage: manage.py add <username> <email> <password>")
        sys.exit(1)
    username, email, password = args

    with Session(engine) as session:
        existing = session.exec(select(User).where(User.username == username)).first()
        if existing:
            print(f"User '{username}' already exists")
            sys.exit(1)

        user = User(
            username=username,
            email=email,
            hashed_password=get_password_hash(password),
            is_admin=True
        )
        session.add(user)
        session.commit()
        print(f"Staff user '{username}' created")


def cmd_list(args):
    with Session(engine) as session:
        users = session.exec(select(User).order_by(User.username)).all()
        if not users:
            print("No users found")
            return
        for user in users:
            flags = "admin" if user.is_admin else "user"
            state = "" if user.is_active else " (inactive)"
            print(f"  {user.username:<20} {user.email:<30} {flags}{state}")


COMMANDS = {
    "init": cmd_init,
    "add": cmd_add,
    "list": cmd_list,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        sys.exit(1)
    COMMANDS[sys.argv[1]](sys.argv[2:])


if __name__ == "__main__":
    main()
