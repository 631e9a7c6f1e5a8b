#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify MongoDB is reachable and the auth settings load.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from placement_portal.core.config import get_settings
from placement_portal.core.auth import generate_token, decode_token
from placement_portal.db.mongodb import test_mongo_connection, init_mongo_indexes


def main():
    settings = get_settings()
    print("=" * 50)
    print("PLACEMENT PORTAL - CONNECTION CHECK")
    print("=" * 50)

    # MongoDB
    print("\n[1] Checking MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    mongo_ok = test_mongo_connection()
    if mongo_ok:
        print("    ✅ MongoDB: CONNECTED")
        init_mongo_indexes()
        print("    ✅ Indexes: companies.name, admins.email")
    else:
        print("    ❌ MongoDB: FAILED")

    # JWT
    print("\n[2] Checking JWT signing...")
    token = generate_token({"id": "connection-check", "role": "admin"}, "1m")
    claims = decode_token(token)
    if claims and claims.get("id") == "connection-check":
        print(f"    ✅ JWT: {settings.jwt_algorithm} sign/verify OK")
    else:
        print("    ❌ JWT: token did not verify")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0 if mongo_ok else 1


if __name__ == "__main__":
    sys.exit(main())
