import asyncio

import pytest
from fastapi.testclient import TestClient

import routers.diff as diff_router
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def upload(text_a, text_b):
    return {
        "fileA": ("original.txt", text_a, "text/plain"),
        "fileB": ("modified.txt", text_b, "text/plain"),
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "sidediff"}


def test_upload_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'name="fileA"' in response.text


def test_diff_page(client):
    response = client.post("/diff", files=upload(b"x\ny\nz", b"x\nw\n<z>"))
    assert response.status_code == 200
    assert '<td class="removed">y</td>' in response.text
    assert '<td class="added">w</td>' in response.text
    assert '<td class="added">&lt;z&gt;</td>' in response.text


def test_diff_page_requires_both_files(client):
    response = client.post("/diff", files={"fileA": ("a.txt", b"a", "text/plain")})
    assert response.status_code == 422


def test_api_diff_text(client):
    response = client.post("/api/diff", json={"text_a": "x\ny\nz", "text_b": "x\nw\nz"})
    assert response.status_code == 200
    body = response.json()
    assert [row["kind"] for row in body["rows"]] == ["unchanged", "removed", "added", "unchanged"]
    assert body["rows"][2]["right_line_number"] == 2
    assert body["rows"][2]["left_line_number"] is None
    assert body["stats"] == {"added": 1, "removed": 1, "unchanged": 2}
    assert body["identical"] is False


def test_api_diff_files(client):
    response = client.post("/api/diff/files", files=upload(b"a\n\nb\n", b"a\n\nb\n"))
    assert response.status_code == 200
    body = response.json()
    assert body["identical"] is True
    assert [row["left_text"] for row in body["rows"]] == ["a", "", "b"]


def test_api_diff_files_strips_bom(client):
    response = client.post("/api/diff/files", files=upload("\ufeffa\n".encode("utf-8"), b"a\n"))
    assert response.json()["identical"] is True


def test_binary_upload_rejected(client):
    response = client.post("/api/diff/files", files=upload(b"\x00\x01\x02", b"a"))
    assert response.status_code == 415
    assert "binary" in response.json()["detail"]


def test_undecodable_upload_rejected(client):
    response = client.post("/diff", files=upload(b"a", b"\xff\xfe\xfa"))
    assert response.status_code == 415
    assert "fileB" in response.json()["detail"]


def test_oversized_upload_rejected(client):
    assert client.put("/api/config", json={"upload": {"maxBytes": 4}}).status_code == 200

    response = client.post("/api/diff/files", files=upload(b"12345", b"1"))
    assert response.status_code == 413

    response = client.post("/api/diff", json={"text_a": "1", "text_b": "12345"})
    assert response.status_code == 413
    assert "text_b" in response.json()["detail"]


def test_get_config_defaults(client):
    response = client.get("/api/config")
    assert response.status_code == 200
    body = response.json()
    assert body["upload"] == {"maxBytes": 5 * 1024 * 1024, "encoding": "utf-8"}
    assert body["server"]["port"] == 3000


def test_update_config_rejects_unknown_encoding(client):
    response = client.put("/api/config", json={"upload": {"encoding": "no-such-codec"}})
    assert response.status_code == 400


def test_update_config_rejects_bad_max_bytes(client):
    response = client.put("/api/config", json={"upload": {"maxBytes": 0}})
    assert response.status_code == 400


def test_update_config_rejects_unknown_log_level(client):
    response = client.put("/api/config", json={"logging": {"level": "LOUD"}})
    assert response.status_code == 400


def test_update_config_encoding(client):
    response = client.put("/api/config", json={"upload": {"encoding": "latin-1"}})
    assert response.status_code == 200

    response = client.post("/api/diff/files", files=upload(b"caf\xe9\n", "café\n".encode("latin-1")))
    assert response.status_code == 200
    assert response.json()["rows"][0]["left_text"] == "café"


def test_api_diff_text_rejects_binary(client):
    response = client.post("/api/diff", json={"text_a": "a\x00b", "text_b": "a"})
    assert response.status_code == 415
    assert "text_a" in response.json()["detail"]


def test_comparison_runs_off_event_loop(client, monkeypatch):
    calls = []
    compare_texts = diff_router.compare_texts

    def recording_compare(text_a, text_b):
        try:
            asyncio.get_running_loop()
            calls.append("event loop")
        except RuntimeError:
            calls.append("worker thread")
        return compare_texts(text_a, text_b)

    monkeypatch.setattr(diff_router, "compare_texts", recording_compare)

    assert client.post("/api/diff", json={"text_a": "a", "text_b": "b"}).status_code == 200
    assert client.post("/api/diff/files", files=upload(b"a", b"b")).status_code == 200
    assert client.post("/diff", files=upload(b"a", b"b")).status_code == 200
    assert calls == ["worker thread"] * 3
