#!/usr/bin/env python3
"""Seed demo accounts and parcels into a running WorldMap backend.

Usage:
    # Start the backend first:
    uvicorn worldmap.web.app:create_app --factory --port 8080

    # Seed demo data:
    python3 scripts/seed_demo_data.py

    # Seed against a different host:
    python3 scripts/seed_demo_data.py --base-url http://localhost:9000

All data goes through the public API, so it passes the same validation a
map client would hit.

Data created:
    - 2 demo accounts
    - 3 parcels around Istanbul split between them
    - 1 rejected parcel (too few points) to show the validation error
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone

import httpx

DEFAULT_BASE_URL = "http://localhost:8080"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def api(
    client: httpx.Client,
    method: str,
    path: str,
    *,
    json: dict | None = None,
    params: dict | None = None,
    token: str | None = None,
) -> dict | list | None:
    """Make an API call and return parsed JSON, or None on failure."""
    headers = {}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    resp = client.request(method, path, json=json, params=params, headers=headers)
    if resp.status_code >= 400:
        print(f"  FAILED {method} {path} -> {resp.status_code}: {resp.text[:200]}")
        return None
    if resp.headers.get("content-type", "").startswith("application/json"):
        return resp.json()
    return None


def section(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

DEMO_USERS = [
    {"username": "ayse", "email": "ayse@example.com", "password": "demo1234"},
    {"username": "mehmet", "email": "mehmet@example.com", "password": "demo1234"},
]


def seed_users(client: httpx.Client) -> dict[str, str]:
    """Register (or log in) the demo accounts. Returns username -> token."""
    section("Accounts")
    tokens: dict[str, str] = {}
    for user in DEMO_USERS:
        result = api(client, "POST", "/api/auth/register", json=user)
        if result is None:
            result = api(client, "POST", "/api/auth/login", json={
                "username": user["username"],
                "password": user["password"],
            })
        if result:
            tokens[user["username"]] = result["token"]
            print(f"  {user['username']}: token {result['token'][:8]}...")
    return tokens


# ---------------------------------------------------------------------------
# Parcels
# ---------------------------------------------------------------------------

DEMO_PARCELS = [
    {
        "owner": "ayse",
        "body": {
            "name": "Kadikoy garden",
            "description": "Back garden behind the house",
            "coordinates": [
                {"lat": 41.0, "lon": 29.0},
                {"lat": 41.0, "lon": 29.1},
                {"lat": 41.1, "lon": 29.1},
                {"lat": 41.1, "lon": 29.0},
            ],
        },
    },
    {
        "owner": "ayse",
        "body": {
            "name": "Olive grove",
            "coordinates": [
                {"lat": 40.95, "lon": 28.80},
                {"lat": 40.95, "lon": 28.83},
                {"lat": 40.97, "lon": 28.84},
                {"lat": 40.98, "lon": 28.82},
                {"lat": 40.97, "lon": 28.79},
            ],
        },
    },
    {
        "owner": "mehmet",
        "body": {
            "name": "Sariyer plot",
            "description": "Hillside plot near the forest road",
            "coordinates": [
                {"lat": 41.16, "lon": 29.04},
                {"lat": 41.16, "lon": 29.06},
                {"lat": 41.18, "lon": 29.06},
                {"lat": 41.18, "lon": 29.04},
            ],
        },
    },
]


def seed_parcels(client: httpx.Client, tokens: dict[str, str]) -> int:
    section("Parcels")
    created = 0
    for entry in DEMO_PARCELS:
        token = tokens.get(entry["owner"])
        if token is None:
            continue
        result = api(client, "POST", "/api/parcels", json=entry["body"], token=token)
        if result:
            created += 1
            print(
                f"  #{result['id']} {result['name']} ({entry['owner']}, "
                f"{len(result['coordinates'])} points)"
            )

    print("\n  Submitting a 3-point outline (expected to fail):")
    token = tokens.get("mehmet")
    if token:
        api(client, "POST", "/api/parcels", token=token, json={
            "name": "Triangle",
            "coordinates": [
                {"lat": 41.0, "lon": 29.0},
                {"lat": 41.0, "lon": 29.1},
                {"lat": 41.1, "lon": 29.1},
            ],
        })
    return created


def verify_data(client: httpx.Client, tokens: dict[str, str]) -> None:
    section("Verification")
    for username, token in tokens.items():
        parcels = api(client, "GET", "/api/parcels", token=token) or []
        print(f"  {username}: {len(parcels)} parcels")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed WorldMap demo data")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args()

    section("WorldMap Demo Seeder")
    print(f"Target: {args.base_url}")
    print(f"Time:   {datetime.now(timezone.utc).isoformat()}")

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        try:
            health = api(client, "GET", "/api/health")
        except httpx.ConnectError:
            health = None
        if not health:
            print(f"\nERROR: Cannot reach {args.base_url}. Start the backend first:")
            print("  uvicorn worldmap.web.app:create_app --factory --port 8080")
            sys.exit(1)

        print(f"Backend: healthy={health.get('healthy')} store={health['details'].get('store')}")

        tokens = seed_users(client)
        created = seed_parcels(client, tokens)
        verify_data(client, tokens)

        section("Done")
        print(f"  Created {created} parcels.")


if __name__ == "__main__":
    main()
