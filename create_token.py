#!/usr/bin/env python3
"""
Issue a bearer token for a seeded or registered user, e.g. for curl tests.

Usage:
    python create_token.py --email user1@example.com --days 365
"""

import argparse

from bookstore_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Issue a Bookstore API access token.")
    ap.add_argument("--email", default="user1@example.com", help="Email of the user the token is for")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()

    token = create_access_token({"sub": args.email}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
