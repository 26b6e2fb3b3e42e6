"""API test fixtures — registered users with live access tokens.

Invariants:
    - Users are created through the public endpoints, never seeded directly
    - auth_headers(username) registers (once) and logs in, returning a Bearer header
"""

import pytest

PASSWORD = "secret"


@pytest.fixture
def auth_headers(client):
    """Factory fixture: await auth_headers("dicoding") → {"Authorization": "Bearer ..."}."""
    registered: set[str] = set()

    async def _auth_headers(username: str = "dicoding") -> dict:
        if username not in registered:
            res = await client.post("/users", json={
                "username": username, "password": PASSWORD, "fullname": username.title(),
            })
            assert res.status_code == 201
            registered.add(username)
        res = await client.post(
            "/authentications", json={"username": username, "password": PASSWORD},
        )
        assert res.status_code == 201
        return {"Authorization": f"Bearer {res.json()['data']['accessToken']}"}

    return _auth_headers


@pytest.fixture
async def thread_id(client, auth_headers):
    """A thread owned by "dicoding"."""
    res = await client.post(
        "/threads",
        json={"title": "A thread", "body": "Thread body"},
        headers=await auth_headers("dicoding"),
    )
    assert res.status_code == 201
    return res.json()["data"]["addedThread"]["id"]


@pytest.fixture
async def comment_id(client, auth_headers, thread_id):
    """A comment by "dicoding" on thread_id."""
    res = await client.post(
        f"/threads/{thread_id}/comments",
        json={"content": "A comment"},
        headers=await auth_headers("dicoding"),
    )
    assert res.status_code == 201
    return res.json()["data"]["addedComment"]["id"]
