"""HTTP contracts: camelCase payloads, omitted fields and admin auth."""
import pytest


def login(client, team_id="ALPHA", node_id="SYS-01", key="ALPHAK01"):
    return client.post("/api/auth/login", json={"teamId": team_id, "nodeId": node_id, "accessKey": key})


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "ok"


def test_login_ok_and_fail(client):
    ok = login(client, team_id="alpha", node_id="sys-01")
    assert ok.status_code == 200
    assert ok.json() == {"status": "OK", "teamId": "ALPHA", "nodeId": "SYS-01"}

    fail = login(client, key="bad")
    assert fail.status_code == 200
    assert fail.json() == {"status": "FAIL"}


def test_login_with_missing_fields_fails_softly(client):
    response = client.post("/api/auth/login", json={})
    assert response.status_code == 200
    assert response.json() == {"status": "FAIL"}


def test_restore(client):
    assert client.post("/api/auth/restore", json={"teamId": "ALPHA", "nodeId": "SYS-01"}).json() == {
        "status": "FAIL"
    }

    login(client)
    body = client.post("/api/auth/restore", json={"teamId": "ALPHA", "nodeId": "SYS-01"}).json()

    assert body == {
        "status": "OK",
        "teamId": "ALPHA",
        "nodeId": "SYS-01",
        "attemptsRemaining": 3,
        "eventActive": False,
        "level": 1,
    }


def test_status_unauthenticated_only_reports_flags(client):
    body = client.get("/api/node/status", params={"teamId": "ALPHA", "nodeId": "SYS-01"}).json()
    assert body == {"eventActive": False, "authenticated": False}


def test_status_requires_query_params(client):
    assert client.get("/api/node/status").status_code == 422


def test_status_before_and_during_event(client, admin_headers):
    login(client)

    before = client.get("/api/node/status", params={"teamId": "ALPHA", "nodeId": "SYS-01"}).json()
    assert before["authenticated"] is True
    assert before["partnerConnected"] is False
    assert "cipher" not in before
    assert "timeRemainingSeconds" not in before
    assert "partnerNodeId" not in before

    client.post("/api/admin/start", headers=admin_headers)
    login(client, node_id="SYS-02", key="ALPHAK02")
    during = client.get("/api/node/status", params={"teamId": "alpha", "nodeId": "sys-01"}).json()

    assert during["eventActive"] is True
    assert during["cipherType"] == "NUMBER PATTERN"
    assert len(during["hints"]) == 3
    assert 0 < during["timeRemainingSeconds"] <= 30 * 60
    assert during["partnerConnected"] is True
    assert during["partnerNodeId"] == "SYS-02"
    assert during["nodeLocked"] is False


def test_submit_flow(client, admin_headers):
    login(client)
    client.post("/api/admin/start", headers=admin_headers)

    def submit(payload):
        return client.post(
            "/api/node/submit", json={"teamId": "ALPHA", "nodeId": "SYS-01", "payload": payload}
        ).json()

    level_up = submit("alpha-38")
    assert level_up["status"] == "LEVEL_UP"
    assert level_up["nextLevel"] == 2
    assert level_up["attemptsRemaining"] == 3
    assert level_up["cipherType"] == "ANAGRAM"

    assert submit("nope-1") == {"status": "FAIL", "attemptsRemaining": 2}
    assert submit("seven-65")["nextLevel"] == 3

    unlock = submit("victory-112")
    assert unlock == {
        "status": "UNLOCK",
        "formLink": "https://forms.example/node1",
        "nodeRole": "PARTNER-A",
    }
    assert submit("victory-112") == {"status": "LOCKED"}


def test_submit_outside_window(client):
    login(client)
    body = client.post(
        "/api/node/submit", json={"teamId": "ALPHA", "nodeId": "SYS-01", "payload": "alpha-38"}
    ).json()
    assert body == {"status": "FAIL", "message": "Event not active"}


def test_submit_unauthenticated(client):
    body = client.post("/api/node/submit", json={"teamId": "ALPHA", "nodeId": "SYS-01"}).json()
    assert body == {"status": "FAIL", "message": "Not authenticated"}


@pytest.mark.parametrize("method, path", [
    ("post", "/api/admin/start"),
    ("post", "/api/admin/end"),
    ("get", "/api/admin/status"),
    ("post", "/api/admin/reset-node"),
    ("get", "/api/admin/credentials"),
])
def test_admin_endpoints_require_key(client, method, path):
    missing = getattr(client, method)(path)
    wrong = getattr(client, method)(path, headers={"X-Admin-Key": "guess"})

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.json() == {"detail": "Invalid admin key"}


def test_admin_start_end(client, admin_headers):
    started = client.post("/api/admin/start", headers=admin_headers).json()
    assert started == {"status": "STARTED", "message": "Event started."}

    again = client.post("/api/admin/start", headers=admin_headers).json()
    assert again["status"] == "ALREADY_RUNNING"
    assert again["timeRemainingSeconds"] > 0

    ended = client.post("/api/admin/end", headers=admin_headers).json()
    assert ended == {"status": "ENDED", "message": "Event ended. All windows sealed."}

    status = client.get("/api/admin/status", headers=admin_headers).json()
    assert status["eventActive"] is False
    assert status["eventStarted"] is False
    assert status["timeRemainingSeconds"] == 0
    assert status["durationMinutes"] == 30


def test_admin_status_nodes(client, admin_headers):
    login(client)
    body = client.get("/api/admin/status", headers=admin_headers).json()

    assert body["nodes"] == [{
        "teamId": "ALPHA",
        "nodeId": "SYS-01",
        "authenticated": True,
        "level": 1,
        "attemptsUsed": 0,
        "attemptsRemaining": 3,
        "unlocked": False,
        "locked": False,
        "keyword": "victory",
        "checksum": 112,
    }]


def test_admin_reset_node(client, admin_headers):
    login(client)
    client.post("/api/admin/start", headers=admin_headers)
    for _ in range(3):
        client.post("/api/node/submit", json={"teamId": "ALPHA", "nodeId": "SYS-01", "payload": "x-0"})

    reset = client.post(
        "/api/admin/reset-node", headers=admin_headers, json={"teamId": "alpha", "nodeId": "sys-01"}
    ).json()
    assert reset == {"status": "RESET", "teamId": "ALPHA", "nodeId": "SYS-01"}

    status = client.get("/api/node/status", params={"teamId": "ALPHA", "nodeId": "SYS-01"}).json()
    assert status["nodeLocked"] is False
    assert status["attemptsRemaining"] == 3


def test_admin_credentials(client, admin_headers):
    rows = client.get("/api/admin/credentials", headers=admin_headers).json()

    assert len(rows) == 4
    assert rows[0] == {
        "teamId": "ALPHA",
        "nodeId": "SYS-01",
        "accessKey": "ALPHAK01",
        "cipher": "CAESAR CIPHER",
        "keyword": "victory",
        "checksum": "112",
    }
