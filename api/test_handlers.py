import pytest
from starlette.requests import Request

from api.handlers import POST_ROUTES, build_upstream_url

BASE = "https://upstream.test/posts"
ROUTES = {route.name: route for route in POST_ROUTES}


def _request(path, query=b"", path_params=None):
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "query_string": query,
        "headers": [],
        "path_params": path_params or {},
    }
    return Request(scope)


def test_route_table_matches_the_posts_surface():
    table = {(route.method, route.path): route for route in POST_ROUTES}

    assert set(table) == {
        ("GET", "/posts"),
        ("GET", "/posts/{id}"),
        ("POST", "/posts"),
        ("PUT", "/posts/{id}"),
        ("PATCH", "/posts/{id}"),
        ("DELETE", "/posts/{id}"),
    }


def test_only_get_by_id_drops_inbound_headers():
    dropping = [route.name for route in POST_ROUTES if not route.forward_headers]

    assert dropping == ["get_post"]


def test_list_url_without_query():
    assert build_upstream_url(BASE, ROUTES["list_posts"], _request("/posts")) == BASE


def test_list_url_forwards_raw_query():
    request = _request("/posts", query=b"userId=1&title=a%20b")

    assert build_upstream_url(BASE, ROUTES["list_posts"], request) == f"{BASE}?userId=1&title=a%20b"


@pytest.mark.parametrize("name", ["get_post", "update_post", "patch_post", "delete_post"])
def test_id_routes_append_id_and_ignore_query(name):
    request = _request("/posts/7", query=b"userId=1", path_params={"id": "7"})

    assert build_upstream_url(BASE, ROUTES[name], request) == f"{BASE}/7"


def test_create_url_is_the_base():
    request = _request("/posts", query=b"ignored=1")

    assert build_upstream_url(BASE, ROUTES["create_post"], request) == BASE
