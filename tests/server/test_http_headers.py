"""HTTP tests for the header preview API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from edge_keys.server.http.app import create_header_app
from edge_keys.server.settings import HeaderSettings


@pytest.fixture
def client() -> TestClient:
    settings = HeaderSettings(cache_control_ttl=300, stale_if_error=600)
    return TestClient(create_header_app(settings))


def test_preview_single_post_sets_headers(client: TestClient) -> None:
    response = client.post(
        "/headers/preview",
        json={
            "items": [{"id": 42, "author": 7}],
            "types": ["single", "singular"],
            "terms": {"category": [3]},
        },
    )
    assert response.status_code == 200
    assert response.headers["cache-control"] == "max-age=300, stale-if-error=600"
    assert response.headers["surrogate-key"] == "p-42 tm-single t-3 a-7"

    payload = response.json()
    assert payload["directives"] == {"max-age": 300, "stale-if-error": 600}
    assert payload["surrogate_keys"] == ["p-42", "tm-single", "t-3", "a-7"]
    assert payload["surrogate_key_header"] == "Surrogate-Key"


def test_preview_category_archive(client: TestClient) -> None:
    response = client.post(
        "/headers/preview",
        json={"types": ["category"], "queried_object": {"id": 9, "taxonomy": "category"}},
    )
    assert response.status_code == 200
    assert response.json()["surrogate_keys"] == ["tm-category", "t-9"]


def test_registered_taxonomies_limit_term_lookups(client: TestClient) -> None:
    response = client.post(
        "/headers/preview",
        json={
            "items": [{"id": 1}],
            "types": ["single"],
            "taxonomies": ["post_tag"],
            "terms": {"category": [3], "post_tag": [4]},
        },
    )
    assert response.status_code == 200
    assert response.json()["surrogate_keys"] == ["p-1", "tm-single", "t-4"]


def test_unknown_template_type_is_rejected(client: TestClient) -> None:
    response = client.post("/headers/preview", json={"types": ["landing"]})
    assert response.status_code == 422
    assert "landing" in response.json()["detail"]


def test_unconfigured_headers_are_omitted() -> None:
    client = TestClient(create_header_app())
    response = client.post("/headers/preview", json={})

    assert response.status_code == 200
    assert "cache-control" not in response.headers
    assert "surrogate-key" not in response.headers
    assert response.json()["cache_control"] is None


def test_settings_endpoint_reports_configuration(client: TestClient) -> None:
    response = client.get("/headers/settings")
    assert response.status_code == 200
    assert response.json() == {
        "cache_control_ttl": 300,
        "stale_while_revalidate": None,
        "stale_if_error": 600,
        "surrogate_key_header": "Surrogate-Key",
        "surrogate_key_delimiter": " ",
        "taxonomies": None,
    }


def test_settings_endpoint_matches_emitted_header() -> None:
    client = TestClient(create_header_app(HeaderSettings(cache_control_ttl=-30)))

    settings = client.get("/headers/settings")
    assert settings.status_code == 200
    assert settings.json()["cache_control_ttl"] == 30

    preview = client.post("/headers/preview", json={})
    assert preview.headers["cache-control"] == "max-age=30"


def test_string_ttl_is_reported_as_integer() -> None:
    client = TestClient(create_header_app(HeaderSettings(cache_control_ttl="120")))

    response = client.get("/headers/settings")
    assert response.status_code == 200
    assert response.json()["cache_control_ttl"] == 120


def test_negative_item_id_keeps_term_keys(client: TestClient) -> None:
    response = client.post(
        "/headers/preview",
        json={
            "items": [{"id": -42, "author": 7}],
            "types": ["single"],
            "terms": {"category": [3]},
        },
    )
    assert response.status_code == 200
    assert response.json()["surrogate_keys"] == ["p-42", "tm-single", "t-3", "a-7"]
