"""Out-of-band account administration.

Usage:
  python -m tracking.manage promote alice
  python -m tracking.manage demote alice
  python -m tracking.manage deactivate alice
"""
import argparse
import sys

from .config import get_settings
from .database import Base, build_engine, build_session_factory
from .models.user import UserRole
from .repositories.users import UserRepository

ROLE_FOR_COMMAND = {
    "promote": UserRole.ADMINISTRATOR,
    "demote": UserRole.SALES_EXECUTIVE,
}


def run(command: str, username: str, session_factory) -> int:
    s = session_factory()
    try:
        users = UserRepository(s)
        user = users.find_by_username(username)
        if not user:
            print(f"Active user not found: {username}")
            return 1
        if command == "deactivate":
            users.deactivate(user.id)
            print(f"Deactivated {username}")
            return 0
        role = ROLE_FOR_COMMAND[command]
        if user.role == role:
            print(f"{username} is already {role.value}")
            return 0
        users.set_role(user.id, role)
        print(f"{username} is now {role.value}")
        return 0
    finally:
        s.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tracking.manage")
    parser.add_argument("command", choices=["promote", "demote", "deactivate"])
    parser.add_argument("username", help="Username of the account to change")
    args = parser.parse_args(argv)

    engine = build_engine(get_settings().database_url)
    Base.metadata.create_all(bind=engine)
    try:
        return run(args.command, args.username, build_session_factory(engine))
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
