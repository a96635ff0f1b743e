#!/usr/bin/env python3
"""
Command-line interface for hashing and verifying passwords.

Usage:
    argon2id-hash hash [--stdin]
    argon2id-hash verify HASH [--stdin]

Exit codes:
    0  hash printed / password matches
    1  password does not match
    2  error (invalid hash, policy violation, bad configuration)
"""

import argparse
import getpass
import logging
import sys

from .config import load_policy
from .hash_errors import HashError
from .policy import PasswordHasher


EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool = False):
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='argon2id-hash',
        description='Hash and verify passwords with Argon2id',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hash a password typed at the prompt
  argon2id-hash hash

  # Verify a password piped on stdin
  echo 'correct horse battery' | argon2id-hash verify --stdin \\
      '$argon2id$v=19$m=65536,t=15,p=4$...$...'

  # Use a custom policy / preset
  argon2id-hash --config config/policy.yaml hash
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged default_config.yaml)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    hash_parser = subparsers.add_parser('hash', help='Hash a password')
    hash_parser.add_argument(
        '--stdin',
        action='store_true',
        help='Read the password from the first line of stdin instead of prompting'
    )

    verify_parser = subparsers.add_parser('verify', help='Verify a password against a hash')
    verify_parser.add_argument('hash', type=str, help='Encoded hash to verify against')
    verify_parser.add_argument(
        '--stdin',
        action='store_true',
        help='Read the password from the first line of stdin instead of prompting'
    )

    return parser.parse_args(argv)


def read_password(from_stdin: bool) -> str:
    """Read a password from stdin or an interactive prompt."""
    if from_stdin:
        return sys.stdin.readline().rstrip('\r\n')
    return getpass.getpass('Password: ')


def main(argv=None):
    """Main entry point for the command-line tool."""
    args = parse_arguments(argv)

    setup_logging(verbose=args.verbose)

    try:
        hasher = PasswordHasher(load_policy(args.config))
        password = read_password(args.stdin)

        if args.command == 'hash':
            print(hasher.hash(password))
            return EXIT_OK

        if hasher.verify(password, args.hash):
            print("match")
            return EXIT_OK
        print("no match")
        return EXIT_MISMATCH

    except HashError as e:
        logging.error(f"{args.command} failed: {e}")
        return EXIT_ERROR

    except UnicodeDecodeError as e:
        logging.error(f"{args.command} failed: password is not valid UTF-8 ({e.reason})")
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
