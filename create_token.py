"""Mint an access token for a member id, e.g. for smoke tests.

Usage:
    python create_token.py 1 --days 365
"""
import argparse

from artfolio_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Create an access token for a member.")
    ap.add_argument("member_id", type=int, help="Member id to embed as the token subject")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()
    token = create_access_token({"sub": str(args.member_id)}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
