import argparse
import logging
import sys

from .tokens import create_salt, generate_token, is_valid_token

log = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="CSRF token tool")

    subparsers = parser.add_subparsers(dest="command", help="the command to execute")
    subparsers.required = True

    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument("-v", "--verbose", action="store_true", help="show debug messages")

    token_parser = subparsers.add_parser(
        "token",
        description="Generates a token for a session secret",
        help="generates a token",
        parents=[parent_parser],
    )
    token_parser.add_argument("--salt", help="the salt to use instead of a random one")
    token_parser.add_argument("secret", help="the session secret")
    token_parser.set_defaults(func=do_token)

    check_parser = subparsers.add_parser(
        "check",
        description="Checks a token against a session secret",
        help="checks a token",
        parents=[parent_parser],
    )
    check_parser.add_argument("secret", help="the session secret")
    check_parser.add_argument("token", help="the token to check")
    check_parser.set_defaults(func=do_check)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
    )

    try:
        result = args.func(args)
    except Exception:
        log.exception("Unexpected error encountered")
        sys.exit(3)

    if result:
        sys.exit(int(result))


def do_token(args):
    salt = args.salt if args.salt is not None else create_salt()
    print(generate_token(args.secret, salt))


def do_check(args):
    if is_valid_token(args.secret, args.token):
        print("valid")
        return 0
    print("invalid")
    return 1


if __name__ == "__main__":
    main()
