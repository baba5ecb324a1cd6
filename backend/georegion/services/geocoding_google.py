"""Google Maps Geocoding API provider."""
import logging
from typing import Optional

import httpx

from georegion.config import get_settings
from georegion.services.geocoding_base import GeocodeResult, GeocodingProvider

logger = logging.getLogger("georegion.geocoding.google")


class GoogleGeocodingProvider(GeocodingProvider):
    """Geocoding via the Google Maps Geocoding REST API.

    Any transport error, non-OK status or malformed payload is logged and
    reported as "no result".
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        default_country: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
        self.base_url = base_url or settings.GOOGLE_GEOCODING_URL
        self.default_country = default_country if default_country is not None else settings.DEFAULT_COUNTRY_CODE
        self.client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.GEOCODING_TIMEOUT_SECONDS
        )

    async def _request(self, params: dict) -> list[dict]:
        """Call the API and return its raw results (empty on any failure)."""
        params = {**params, "key": self.api_key}
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Geocoding request failed: {e}")
            return []
        if not isinstance(payload, dict):
            logger.warning("Geocoding response was not a JSON object")
            return []

        status = payload.get("status")
        if status != "OK":
            # ZERO_RESULTS is a normal miss; anything else is a provider problem
            if status != "ZERO_RESULTS":
                logger.warning(
                    f"Geocoding returned status {status}: {payload.get('error_message', '')}"
                )
            return []
        return payload.get("results") or []

    def _forward_params(self, address: str, country_hint: Optional[str]) -> dict:
        params = {"address": address}
        region = country_hint or self.default_country
        if region:
            params["region"] = region.lower()
        return params

    @staticmethod
    def _parse(result: dict) -> Optional[GeocodeResult]:
        try:
            location = result["geometry"]["location"]
            return GeocodeResult(
                latitude=float(location["lat"]),
                longitude=float(location["lng"]),
                formatted_address=result.get("formatted_address", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed geocoding result: {e}")
            return None

    async def forward_one(
        self, address: str, country_hint: Optional[str] = None
    ) -> Optional[GeocodeResult]:
        if not address or not address.strip():
            return None
        results = await self._request(self._forward_params(address, country_hint))
        if not results:
            return None
        return self._parse(results[0])

    async def forward_all(
        self, address: str, country_hint: Optional[str] = None
    ) -> list[GeocodeResult]:
        if not address or not address.strip():
            return []
        results = await self._request(self._forward_params(address, country_hint))
        parsed = (self._parse(result) for result in results)
        return [result for result in parsed if result is not None]

    async def reverse(self, latitude: float, longitude: float) -> Optional[GeocodeResult]:
        results = await self._request({"latlng": f"{latitude},{longitude}"})
        if not results:
            return None
        return GeocodeResult(
            latitude=latitude,
            longitude=longitude,
            formatted_address=results[0].get("formatted_address", ""),
        )

    async def aclose(self) -> None:
        await self.client.aclose()
