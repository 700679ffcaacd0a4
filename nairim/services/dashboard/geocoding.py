"""
Пакетное геокодирование адресов объектов через Nominatim-совместимый сервис.

Одновременно выполняется не больше `concurrency` запросов.
Адреса, которые не удалось распознать, пропускаются: на карте
будет меньше точек, но ответ дашборда не падает.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from nairim.config import get_settings
from nairim.schemas.dashboard import GeolocationPoint

logger = logging.getLogger(__name__)


@dataclass
class AddressPoint:
    """Адрес объекта в плоском виде для геокодера"""
    title: str
    street: Optional[str] = None
    number: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    @property
    def full_address(self) -> str:
        parts = (self.street, self.number, self.city, self.state, self.country)
        return ", ".join(part for part in parts if part)

    @property
    def label(self) -> str:
        return f"{self.title} ({self.city}/{self.state})"


class GeocodingBatcher:
    """
    Геокодер с ограничением параллельных запросов.

    Example Usage:
        async with GeocodingBatcher() as geocoder:
            points = await geocoder.resolve_all(addresses)
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        concurrency: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        settings = get_settings()
        self.url = settings.geocoding_url
        self.concurrency = concurrency or settings.geocoding_concurrency
        self.retry_delay = settings.geocoding_retry_delay if retry_delay is None else retry_delay
        self.headers = {
            "User-Agent": settings.geocoding_user_agent,
            "Accept-Language": settings.geocoding_accept_language,
            "Accept": "application/json",
        }
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.geocoding_timeout)

    async def close(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _fetch(self, query: str) -> httpx.Response:
        """GET к геокодеру; при сетевой ошибке одна повторная попытка"""
        params = {"q": query, "format": "json", "limit": 1}
        try:
            return await self.client.get(self.url, params=params, headers=self.headers)
        except httpx.TransportError as e:
            logger.warning(f"Geocoding transport error for '{query}': {e}, retrying in {self.retry_delay}s")
            await asyncio.sleep(self.retry_delay)
            return await self.client.get(self.url, params=params, headers=self.headers)

    async def _resolve(self, point: AddressPoint) -> Optional[GeolocationPoint]:
        query = point.full_address
        try:
            response = await self._fetch(query)
        except httpx.HTTPError as e:
            logger.error(f"Geocoding failed for '{query}': {e}")
            return None

        if not response.is_success:
            logger.warning(f"Geocoding HTTP {response.status_code} for '{query}'")
            return None

        try:
            results = response.json()
        except (ValueError, httpx.HTTPError):
            logger.warning(f"Geocoding returned non-JSON body for '{query}'")
            return None

        if not isinstance(results, list) or not results:
            logger.warning(f"Geocoding found nothing for '{query}'")
            return None

        try:
            lat = float(results[0]["lat"])
            lng = float(results[0]["lon"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Geocoding returned malformed coordinates for '{query}'")
            return None

        return GeolocationPoint(lat=lat, lng=lng, info=point.label)

    async def resolve_all(self, addresses: List[AddressPoint], concurrency: Optional[int] = None) -> List[GeolocationPoint]:
        """
        Геокодирует все адреса и дожидается всех запросов.

        Returns:
            Точки в порядке получения ответов, без нераспознанных адресов
        """
        semaphore = asyncio.Semaphore(concurrency or self.concurrency)
        points: List[GeolocationPoint] = []

        async def worker(point: AddressPoint):
            async with semaphore:
                resolved = await self._resolve(point)
            if resolved is not None:
                points.append(resolved)

        await asyncio.gather(*(worker(point) for point in addresses))
        logger.info(f"Geocoded {len(points)} of {len(addresses)} addresses")
        return points
