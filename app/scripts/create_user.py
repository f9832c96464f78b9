"""
Create a user (e.g. the first admin) without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user principal principal@sainik.edu your-secure-password admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import Conflict, InvalidInput
from app.core.security import ROLE_ADMIN, ROLE_USER
from app.services import authenticator
from app.services.credential_store import CredentialStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a website user account.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (at least PASSWORD_MIN_LENGTH chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=[ROLE_USER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        store = CredentialStore(db)
        if args.role == ROLE_ADMIN:
            user = authenticator.bootstrap_admin(
                store, args.username.strip(), args.email.strip(), args.password
            )
            if user is None:
                print(
                    f"User '{args.username}' or email '{args.email}' already exists.",
                    file=sys.stderr,
                )
                return 1
        else:
            user = authenticator.register(store, args.username, args.email, args.password)
        print(f"Created user '{user.username}' with role '{user.role}'.")
        return 0
    except (InvalidInput, Conflict) as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
