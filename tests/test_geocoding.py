"""Tests for batched geocoding."""
import asyncio

import httpx

from nairim.services.dashboard import AddressPoint, GeocodingBatcher


def points(count: int):
    return [
        AddressPoint(title=f"Imóvel {i}", street=f"Rua {i}", number=str(i), city="Santos", state="SP", country="Brasil")
        for i in range(count)
    ]


def run(handler, addresses, **kwargs):
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with client:
            geocoder = GeocodingBatcher(client=client, retry_delay=0, **kwargs)
            return await geocoder.resolve_all(addresses)
    return asyncio.run(scenario())


def found(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=[{"lat": "-23.96", "lon": "-46.33"}])


class TestAddressPoint:
    def test_full_address_skips_empty_parts(self) -> None:
        point = AddressPoint(title="Casa", street="Rua A", number=None, city="Santos", state="SP", country="Brasil")
        assert point.full_address == "Rua A, Santos, SP, Brasil"
        assert point.label == "Casa (Santos/SP)"


class TestGeocodingBatcher:
    """Failed addresses are dropped, the batch still completes."""

    def test_resolves_all(self) -> None:
        result = run(found, points(3))
        assert len(result) == 3
        assert result[0].lat == -23.96
        assert result[0].lng == -46.33

    def test_sends_expected_request(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return found(request)

        run(handler, points(1))

        request = seen[0]
        assert request.url.params["q"] == "Rua 0, 0, Santos, SP, Brasil"
        assert request.url.params["format"] == "json"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Accept-Language"] == "pt-BR"
        assert request.headers["User-Agent"] == "NairimAPI/1.0"

    def test_transport_failure_drops_one_address(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["q"].startswith("Rua 2,"):
                attempts.append(request)
                raise httpx.ConnectError("connection refused", request=request)
            return found(request)

        result = run(handler, points(5), concurrency=3)

        assert len(result) == 4
        assert len(attempts) == 2
        assert "Imóvel 2 (Santos/SP)" not in [p.info for p in result]

    def test_retry_recovers(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            if len(attempts) == 1:
                raise httpx.ReadTimeout("timeout", request=request)
            return found(request)

        assert len(run(handler, points(1))) == 1
        assert len(attempts) == 2

    def test_http_errors_are_not_retried(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            return httpx.Response(503, text="unavailable")

        assert run(handler, points(2)) == []
        assert len(attempts) == 2

    def test_empty_and_invalid_bodies_are_dropped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["q"].startswith("Rua 0,"):
                return httpx.Response(200, json=[])
            if request.url.params["q"].startswith("Rua 1,"):
                return httpx.Response(200, text="<html>")
            return httpx.Response(200, json=[{"lat": "n/a", "lon": "1"}])

        assert run(handler, points(3)) == []

    def test_corrupt_body_drops_one_address(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["q"].startswith("Rua 1,"):
                attempts.append(request)
                return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")
            return found(request)

        result = run(handler, points(3))

        assert len(result) == 2
        assert len(attempts) == 1
        assert "Imóvel 1 (Santos/SP)" not in [p.info for p in result]

    def test_concurrency_is_bounded(self) -> None:
        in_flight = 0
        peak = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return found(request)

        result = run(handler, points(10), concurrency=3)

        assert len(result) == 10
        assert peak <= 3
