import pytest

from spweb.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_home(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.get_json()["message"]


def test_generate_defaults(client):
    resp = client.post("/generate", json={})
    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["password"]) == 12
    assert body["strength"]["policy"] == "composition"
    assert body["strength"]["total_blocks"] == 4


def test_generate_digits_only(client):
    resp = client.post("/generate", json={
        "length": 20, "upper": False, "lower": False, "digits": True, "symbols": False,
    })
    body = resp.get_json()
    assert body["password"].isdigit()
    assert len(body["password"]) == 20


def test_generate_empty_alphabet(client):
    resp = client.post("/generate", json={
        "upper": False, "lower": False, "digits": False, "symbols": False,
    })
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_generate_bad_length(client):
    resp = client.post("/generate", json={"length": 0})
    assert resp.status_code == 400


def test_score(client):
    resp = client.post("/score", json={"password": "Ab3!Ab3!Ab3!"})
    assert resp.get_json() == {
        "score": 5, "label": "Strong", "blocks": 4, "total_blocks": 4, "policy": "composition",
    }


def test_score_length_policy(client):
    resp = client.post("/score", json={"password": "abcde", "policy": "length"})
    assert resp.get_json()["label"] == "Weak"


def test_score_unknown_policy(client):
    resp = client.post("/score", json={"password": "abc", "policy": "nope"})
    assert resp.status_code == 400


def test_generate_string_flag_rejected(client):
    resp = client.post("/generate", json={
        "length": 25, "upper": "false", "lower": False, "digits": False, "symbols": False,
    })
    assert resp.status_code == 400
    assert "include_uppercase" in resp.get_json()["error"]


@pytest.mark.parametrize("route", ["/generate", "/score"])
def test_non_object_body_rejected(client, route):
    resp = client.post(route, json=[1])
    assert resp.status_code == 400
    assert "JSON object" in resp.get_json()["error"]


@pytest.mark.parametrize("body", [
    {"password": 123},
    {"password": None},
    {"password": "abc", "policy": ["length"]},
    {"password": "abc", "policy": 7},
])
def test_score_wrong_field_types(client, body):
    resp = client.post("/score", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_generate_wrong_policy_type(client):
    resp = client.post("/generate", json={"policy": {"name": "length"}})
    assert resp.status_code == 400
