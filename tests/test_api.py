from __future__ import annotations

import httpx

from lemon3.server.settings import Settings

CID = "bafyreigh2akiscaildcqabsyg3dfr6chu3fgpregiymsck7e7aqa4s52zy"


def _serve(gateway_routes, cid, handler):
    gateway_routes[f"/ipfs/{cid}"] = handler


def test_health(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_manifest(client):
    r = client.get("/.well-known/farcaster.json")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    body = r.json()
    assert set(body) == {"accountAssociation", "frame"}
    assert set(body["accountAssociation"]) == {"header", "payload", "signature"}
    frame = body["frame"]
    assert frame["version"] == "1"
    assert frame["name"] == "lemon3 viewer"
    assert frame["buttonTitle"] == "Open"
    assert frame["splashBackgroundColor"] == "#F9E231"
    assert frame["iconUrl"] == frame["imageUrl"] == frame["splashImageUrl"]


def test_manifest_ignores_query(client, gateway_requests):
    plain = client.get("/.well-known/farcaster.json")
    with_query = client.get("/.well-known/farcaster.json?gw=https://evil.test&x=1")
    assert plain.content == with_query.content
    assert gateway_requests == []


def test_invalid_cid(client, gateway_requests):
    r = client.get("/notacid")
    assert r.status_code == 400
    assert r.text == "Invalid or missing CID"
    assert r.headers["content-type"].startswith("text/plain")
    assert gateway_requests == []


def test_missing_cid(client):
    r = client.get("/")
    assert r.status_code == 400
    assert r.text == "Invalid or missing CID"


def test_other_cid_encodings_are_rejected(client):
    r = client.get("/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG")
    assert r.status_code == 400


def test_renders_page(client, gateway_routes, gateway_requests, full_descriptor):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json=full_descriptor))
    r = client.get(f"/{CID}")
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/html; charset=utf-8"
    assert "<title>Night Swim</title>" in r.text
    assert "https://gw.test/ipfs/bafybeiaudiopayload" in r.text
    req = gateway_requests[0]
    assert str(req.url) == f"https://gw.test/ipfs/{CID}?format=dag-json"


def test_page_url_is_launch_target(client, gateway_routes, full_descriptor):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json=full_descriptor))
    r = client.get(f"/{CID}")
    assert f'"url":"http://testserver/{CID}"' in r.text


def test_extra_path_segments_are_ignored(client, gateway_routes, gateway_requests):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json={"title": "Deep"}))
    r = client.get(f"/{CID}/some/nested/path")
    assert r.status_code == 200
    assert "<title>Deep</title>" in r.text
    assert gateway_requests[0].url.path == f"/ipfs/{CID}"


def test_gateway_override(client, gateway_requests):
    r = client.get(f"/{CID}", params={"gw": "https://other.test"})
    assert r.status_code == 404
    assert str(gateway_requests[0].url) == f"https://other.test/ipfs/{CID}?format=dag-json"


def test_gateway_override_is_used_for_links(client, gateway_routes):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json={"enclosed": {"/": "bafyfile"}}))
    r = client.get(f"/{CID}", params={"gw": "https://other.test"})
    assert r.status_code == 200
    assert 'href="https://other.test/ipfs/bafyfile"' in r.text


def test_upstream_404_is_passed_through(client):
    r = client.get(f"/{CID}")
    assert r.status_code == 404
    assert "Not Found" in r.text
    assert r.text == "Failed to fetch IPFS data: Not Found"


def test_upstream_502_is_passed_through(client, gateway_routes):
    _serve(gateway_routes, CID, lambda request: httpx.Response(502))
    r = client.get(f"/{CID}")
    assert r.status_code == 502
    assert "Bad Gateway" in r.text


def test_invalid_json_is_internal_error(client, gateway_routes):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, text="<html>not json</html>"))
    r = client.get(f"/{CID}")
    assert r.status_code == 500
    assert r.text == "Internal error fetching IPFS data"


def test_transport_failure_is_internal_error(client, gateway_routes):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    _serve(gateway_routes, CID, boom)
    r = client.get(f"/{CID}")
    assert r.status_code == 500
    assert r.text == "Internal error fetching IPFS data"


def test_non_object_json_renders_defaults(client, gateway_routes):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json=["a", "b"]))
    r = client.get(f"/{CID}")
    assert r.status_code == 200
    assert "<title>Untitled</title>" in r.text


def test_redirects_are_followed(client, gateway_routes, full_descriptor):
    _serve(
        gateway_routes,
        CID,
        lambda request: httpx.Response(301, headers={"Location": "https://gw.test/moved"}),
    )
    gateway_routes["/moved"] = lambda request: httpx.Response(200, json=full_descriptor)
    r = client.get(f"/{CID}")
    assert r.status_code == 200
    assert "<title>Night Swim</title>" in r.text


def test_escape_mode_setting(make_client, gateway_routes):
    _serve(gateway_routes, CID, lambda request: httpx.Response(200, json={"title": "<b>x</b>"}))
    with make_client(Settings(IPFS_GATEWAY="https://gw.test", ESCAPE_HTML=True)) as c:
        r = c.get(f"/{CID}")
    assert r.status_code == 200
    assert "<title>&lt;b&gt;x&lt;/b&gt;</title>" in r.text


def test_app_name_setting(make_client):
    with make_client(Settings(APP_NAME="my viewer")) as c:
        r = c.get("/.well-known/farcaster.json")
    assert r.json()["frame"]["name"] == "my viewer"


def test_huge_size_still_renders(client, gateway_routes):
    body = '{"title": "Big", "size": ' + "9" * 400 + "}"
    _serve(
        gateway_routes,
        CID,
        lambda request: httpx.Response(200, content=body.encode(), headers={"content-type": "application/json"}),
    )
    r = client.get(f"/{CID}")
    assert r.status_code == 200
    assert "<title>Big</title>" in r.text
    assert "<strong>Size:</strong> unknown" in r.text
