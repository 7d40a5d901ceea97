"""HTTP client for the PokeAPI with a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from .cache import Cache
from .models import LocationArea, LocationAreaList, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"


class PokeApiError(Exception):
    """Raised when the PokeAPI cannot be reached or returns unusable data."""


def _decode(data: bytes) -> Any:
    result = json.loads(data)
    if not isinstance(result, dict):
        raise ValueError("expected a JSON object")
    return result


class Client:
    """Fetches PokeAPI resources, answering repeated requests from a cache."""

    def __init__(self, timeout: float = 5.0, cache_lifetime: float = 300.0) -> None:
        self.timeout = timeout
        self.base_url = BASE_URL
        self.cache = Cache(cache_lifetime)
        self.cache_hits = 0
        self.cache_misses = 0

    def fetch(self, url: str) -> bytes:
        """Return the body at *url*, from the cache when it is there."""
        cached = self.cache.get(url)
        if cached is not None:
            self.cache_hits += 1
            return cached
        self.cache_misses += 1

        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                if response.status != 200:
                    raise PokeApiError(
                        f"API responded with not OK: {response.status} {response.reason}"
                    )
                data = response.read()
        except urllib.error.HTTPError as err:
            raise PokeApiError(f"API responded with not OK: {err.code} {err.reason}") from err
        except (urllib.error.URLError, OSError) as err:
            raise PokeApiError(f"unable to get data from URL: {url} [{err}]") from err

        self.cache.add(url, data)
        return data

    def cache_hit_rate(self) -> float:
        """Return the percentage of fetches answered from the cache."""
        total = self.cache_hits + self.cache_misses
        if total == 0:
            return 0.0
        return self.cache_hits / total * 100

    def list_location_areas(self, page_url: str | None = None) -> LocationAreaList:
        """Return a page of location areas; the first page when *page_url* is None."""
        url = page_url if page_url is not None else f"{self.base_url}/location-area"
        data = self.fetch(url)
        try:
            return LocationAreaList.from_dict(_decode(data))
        except ValueError as err:
            raise PokeApiError(f"unable to unmarshal LocationAreaList: {err}") from err

    def get_location_area(self, location_name: str) -> LocationArea:
        """Return the location area called *location_name*."""
        if not location_name:
            raise PokeApiError("missing location name")
        data = self.fetch(f"{self.base_url}/location-area/{location_name}")
        try:
            return LocationArea.from_dict(_decode(data))
        except ValueError as err:
            raise PokeApiError(f"unable to unmarshal LocationArea: {err}") from err

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokemon called *name*."""
        if not name:
            raise PokeApiError("pokemon name is empty")
        data = self.fetch(f"{self.base_url}/pokemon/{name}")
        try:
            return Pokemon.from_dict(_decode(data))
        except ValueError as err:
            raise PokeApiError(f"unable to unmarshal Pokemon: {err}") from err

    def close(self) -> None:
        """Release the cache's background reaper."""
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()