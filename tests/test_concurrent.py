"""Tests that the server handles many simultaneous requests correctly.

Each request is an independent unit of work against the one shared store; the
store's unique constraint is what keeps short codes unique.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_shorten_requests(self, client):
        """Many concurrent POST /api/shorten with different URLs; all succeed and short_codes are unique."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [
            client.post("/api/shorten", json={"long_url": url, "user_id": "load"})
            for url in urls
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            data = r.json()["data"]
            assert data["long_url"] == urls[i]
            short_codes.append(data["short_code"])

        assert len(short_codes) == len(set(short_codes)), "All short_codes must be unique under concurrency"

        listing = await client.get("/api/urls/load")
        assert len(listing.json()["data"]) == concurrency

    async def test_concurrent_same_custom_code(self, client):
        """Only one of many simultaneous claims on a custom code wins."""
        concurrency = 10
        tasks = [
            client.post(
                "/api/shorten",
                json={"long_url": f"https://example.com/{i}", "user_id": f"u{i}", "custom_code": "contested"},
            )
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks)

        statuses = sorted(r.status_code for r in responses)
        assert statuses == [200] + [400] * (concurrency - 1)
        for r in responses:
            if r.status_code == 400:
                assert r.json()["message"] == "Custom code already exists"

    async def test_concurrent_redirect_requests(self, client):
        """Create one short URL, then many concurrent redirect (GET /{code}) requests all succeed."""
        create_resp = await client.post(
            "/api/shorten",
            json={"long_url": "https://example.com/redirect-target", "user_id": "u1"},
        )
        assert create_resp.status_code == 200
        short_code = create_resp.json()["data"]["short_code"]

        tasks = [
            client.get(f"/{short_code}", follow_redirects=False)
            for _ in range(20)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"
