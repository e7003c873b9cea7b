"""
Print a bcrypt hash for ADMIN_PASSWORD_HASH.

    python -m fleet_admin.hash_password 'my secret'
    python -m fleet_admin.hash_password            # prompts
"""
import getpass
import sys

from fleet_admin.utils.security import hash_password


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    password = args[0] if args else getpass.getpass("Admin password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1
    print(hash_password(password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
