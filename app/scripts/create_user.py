"""
Create an account (e.g. first admin) through the signup flow. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD ROLE [--company-name NAME]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.core.exceptions import AppError
from app.models.user import Role
from app.schemas.auth import SignupRequest
from app.services.accounts import register_account
from app.services.validation import validate_signup

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a HireHive account.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", choices=[r.value for r in Role])
    parser.add_argument("--company-name", default=None, help="Required for vendors")
    args = parser.parse_args(argv)

    body = SignupRequest(
        name=args.name,
        email=args.email,
        password=args.password,
        role=args.role,
        company_name=args.company_name,
    )
    db = SessionLocal()
    try:
        user_id = register_account(db, validate_signup(body))
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{args.email}' (id {user_id}) with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
