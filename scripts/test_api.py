"""
API Smoke Script
================

Exercise the user endpoints of a running server.

Run the API server first:
    uvicorn users_api.main:app --reload

Then run this script:
    python scripts/test_api.py
"""

import asyncio
import json

import httpx

BASE_URL = "http://localhost:8000"


async def test_health():
    """Test health endpoint."""
    print("\n" + "=" * 50)
    print("Testing Health Endpoint")
    print("=" * 50)

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/health")
        print(f"Status: {response.status_code}")
        print(f"Response: {json.dumps(response.json(), indent=2)}")
        return response.json()


async def test_create_user(name: str, email: str) -> int:
    """Test user creation."""
    print("\n" + "=" * 50)
    print(f"Creating User: {name} <{email}>")
    print("=" * 50)

    async with httpx.AsyncClient() as client:
        response = await client.post(
            f"{BASE_URL}/users",
            json={"name": name, "email": email}
        )
        print(f"Status: {response.status_code}")
        if response.status_code != 201:
            print(f"Error: {response.text}")
        return response.status_code


async def test_list_users():
    """Test listing users."""
    print("\n" + "=" * 50)
    print("Listing Users")
    print("=" * 50)

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/users")
        print(f"Status: {response.status_code}")
        print(f"Response: {json.dumps(response.json(), indent=2)}")
        return response.json()


async def run_all_tests():
    """Run all API checks."""
    print("\n" + "#" * 60)
    print("# User Registry API - Smoke Test")
    print("#" * 60)

    health = await test_health()
    if health["status"] != "healthy":
        print("ERROR: API is not healthy!")
        return

    await test_create_user("Ada Lovelace", "ada@example.com")
    await test_create_user("Alan Turing", "alan@example.com")

    # Should be rejected with 422
    status = await test_create_user("Nobody", "not-an-email")
    if status != 422:
        print(f"WARNING: invalid email accepted with status {status}")

    users = await test_list_users()
    print(f"\n{len(users)} users stored")

    print("\n" + "#" * 60)
    print("# All Checks Complete!")
    print("#" * 60)


if __name__ == "__main__":
    print("Starting API Smoke Test...")
    print(f"Make sure the API server is running at {BASE_URL}")
    asyncio.run(run_all_tests())
