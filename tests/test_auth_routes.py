from bookserver.auth.tokens import TokenValidator

from .conftest import TEST_AUDIENCE, TEST_SECRET


def register(client, username="alice", password="pw1"):
    return client.post("/signIn", json={"username": username, "password": password})


def login(client, username="alice", password="pw1"):
    return client.post("/login", json={"username": username, "password": password})


class TestSignIn:
    def test_register(self, client, credential_store):
        resp = register(client)
        assert resp.status_code == 201
        assert resp.text == "User alice registered successfully"
        assert credential_store.exists("alice")

    def test_register_twice_conflicts(self, client):
        assert register(client).status_code == 201
        resp = register(client, password="pw2")
        assert resp.status_code == 409
        assert resp.text == "User already exists"

    def test_invalid_json(self, client):
        resp = client.post("/signIn", content=b"{not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.text.startswith("Invalid request")

    def test_missing_password(self, client):
        resp = client.post("/signIn", json={"username": "alice"})
        assert resp.status_code == 400

    def test_empty_username(self, client):
        resp = client.post("/signIn", json={"username": "", "password": "x"})
        assert resp.status_code == 400

    def test_wrong_method(self, client):
        assert client.get("/signIn").status_code == 405

    def test_lone_surrogate_password(self, client, credential_store):
        body = b'{"username": "eve", "password": "\\ud800"}'
        resp = client.post("/signIn", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert not credential_store.exists("eve")

    def test_lone_surrogate_username(self, client):
        body = b'{"username": "\\ud800", "password": "pw"}'
        resp = client.post("/signIn", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 400


class TestLogin:
    def test_scenario(self, client):
        assert register(client, "alice", "pw1").status_code == 201
        assert register(client, "alice", "pw2").status_code == 409

        ok = login(client, "alice", "pw1")
        assert ok.status_code == 200
        assert ok.text == "Login successful"
        assert "jwt" in ok.cookies

        bad = login(client, "alice", "wrong")
        assert bad.status_code == 404
        assert bad.text == "Wrong password"
        assert "set-cookie" not in bad.headers

    def test_cookie_carries_valid_token(self, client):
        register(client)
        resp = login(client)
        token = resp.cookies["jwt"]
        claims = TokenValidator(TEST_SECRET, TEST_AUDIENCE).validate(token)
        assert claims["sub"] == "alice"

    def test_cookie_attributes(self, client):
        register(client)
        header = login(client).headers["set-cookie"].lower()
        assert header.startswith("jwt=")
        assert "expires=" in header
        assert "httponly" in header
        assert "path=/" in header

    def test_unknown_user(self, client):
        resp = login(client, "ghost", "pw")
        assert resp.status_code == 404
        assert resp.text == "User not found"
        assert "set-cookie" not in resp.headers

    def test_bad_body(self, client):
        resp = client.post("/login", json={"user": "alice"})
        assert resp.status_code == 400

    def test_lone_surrogate_password(self, client, credential_store):
        credential_store.create("eve", "pw")
        body = b'{"username": "eve", "password": "\\ud800"}'
        resp = client.post("/login", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert "set-cookie" not in resp.headers

    def test_lone_surrogate_username(self, client):
        body = b'{"username": "\\ud800", "password": "pw"}'
        resp = client.post("/login", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 400


class TestLogout:
    def test_clears_cookie(self, client):
        register(client)
        login(client)
        resp = client.post("/logout")
        assert resp.status_code == 200
        header = resp.headers["set-cookie"].lower()
        assert header.startswith("jwt=")
        assert "max-age=0" in header

    def test_without_session(self, client):
        assert client.post("/logout").status_code == 200
