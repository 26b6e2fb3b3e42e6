"""Users & Authentications endpoints — registration, login, refresh, logout.

Tests cover:
    - POST /users → 201 with addedUser (no password echoed)
    - Duplicate username, missing property, bad type, long/restricted username,
      password over 72 bytes → 400 fail
    - POST /authentications → 201 with both tokens; wrong password → 401
    - PUT /authentications → new access token; unknown or invalid refresh token → 400
    - DELETE /authentications → refresh token no longer usable
"""

USER = {"username": "dicoding", "password": "secret", "fullname": "Dicoding Indonesia"}


async def _login(client):
    await client.post("/users", json=USER)
    res = await client.post(
        "/authentications", json={"username": "dicoding", "password": "secret"},
    )
    return res.json()["data"]


# ─── Registration ────────────────────────────────────────────────

async def test_register_user(client):
    res = await client.post("/users", json=USER)

    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "success"
    added = body["data"]["addedUser"]
    assert added["id"].startswith("user-")
    assert added["username"] == "dicoding"
    assert added["fullname"] == "Dicoding Indonesia"
    assert "password" not in added


async def test_register_duplicate_username(client):
    await client.post("/users", json=USER)
    res = await client.post("/users", json=USER)

    assert res.status_code == 400
    assert res.json() == {"status": "fail", "message": "username is not available"}


async def test_register_missing_property(client):
    res = await client.post("/users", json={"username": "dicoding", "password": "secret"})

    assert res.status_code == 400
    body = res.json()
    assert body["status"] == "fail"
    assert body["message"] == (
        "cannot create a new user because the required property is missing: fullname"
    )


async def test_register_wrong_type(client):
    res = await client.post("/users", json={**USER, "fullname": ["Dicoding"]})

    assert res.status_code == 400
    assert "data type does not match" in res.json()["message"]


async def test_register_username_too_long(client):
    res = await client.post("/users", json={**USER, "username": "d" * 51})

    assert res.status_code == 400
    assert "character limit" in res.json()["message"]


async def test_register_username_restricted_characters(client):
    res = await client.post("/users", json={**USER, "username": "dico ding"})

    assert res.status_code == 400
    assert "restricted characters" in res.json()["message"]


async def test_register_password_too_long(client):
    res = await client.post("/users", json={**USER, "password": "p" * 100})

    assert res.status_code == 400
    assert res.json()["message"] == (
        "cannot create a new user because the password exceeds the length limit: password"
    )


async def test_register_non_object_body(client):
    res = await client.post("/users", json=["not", "an", "object"])

    assert res.status_code == 400
    assert res.json()["status"] == "fail"


# ─── Login ───────────────────────────────────────────────────────

async def test_login_returns_tokens(client):
    await client.post("/users", json=USER)
    res = await client.post(
        "/authentications", json={"username": "dicoding", "password": "secret"},
    )

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["accessToken"]
    assert data["refreshToken"]


async def test_login_wrong_password(client):
    await client.post("/users", json=USER)
    res = await client.post(
        "/authentications", json={"username": "dicoding", "password": "wrong"},
    )

    assert res.status_code == 401
    assert res.json()["status"] == "fail"


async def test_login_unknown_username(client):
    res = await client.post(
        "/authentications", json={"username": "ghost", "password": "secret"},
    )
    assert res.status_code == 400


async def test_login_password_too_long(client):
    await client.post("/users", json=USER)
    res = await client.post(
        "/authentications", json={"username": "dicoding", "password": "p" * 100},
    )

    assert res.status_code == 400
    assert res.json()["status"] == "fail"


async def test_login_missing_password(client):
    res = await client.post("/authentications", json={"username": "dicoding"})

    assert res.status_code == 400
    assert res.json()["message"] == "must send username and password: password"


# ─── Refresh / Logout ────────────────────────────────────────────

async def test_refresh_access_token(client):
    tokens = await _login(client)
    res = await client.put(
        "/authentications", json={"refreshToken": tokens["refreshToken"]},
    )

    assert res.status_code == 200
    assert res.json()["data"]["accessToken"]


async def test_refresh_with_invalid_token(client):
    res = await client.put("/authentications", json={"refreshToken": "xxx"})
    assert res.status_code == 400
    assert res.json()["message"] == "refresh token is not valid"


async def test_refresh_without_token(client):
    res = await client.put("/authentications", json={})
    assert res.status_code == 400
    assert res.json()["message"] == "must send refresh token: refreshToken"


async def test_logout_revokes_refresh_token(client):
    tokens = await _login(client)
    payload = {"refreshToken": tokens["refreshToken"]}

    res = await client.request("DELETE", "/authentications", json=payload)
    assert res.status_code == 200
    assert res.json() == {"status": "success"}

    res = await client.put("/authentications", json=payload)
    assert res.status_code == 400
    assert res.json()["message"] == "refresh token not found in database"


async def test_logout_unknown_token(client):
    res = await client.request(
        "DELETE", "/authentications", json={"refreshToken": "never-issued"},
    )
    assert res.status_code == 400
