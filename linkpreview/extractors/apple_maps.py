"""
Apple Maps extractor.

Apple Maps links carry everything a preview needs in the query string, so
this extractor never touches the browser:

- ll=<lat>,<lng>     coordinates
- q= / address=      address or search text
- t=                 place name

With coordinates, a static map image is generated from OpenStreetMap.
"""

import math
from urllib.parse import parse_qs, urlparse

from ..core.browser import BrowserSession
from ..models.enums import Platform
from ..models.response import Coordinates, Preview
from ..utils.helpers import first_of, float_or_none
from .base import BaseExtractor


class AppleMapsExtractor(BaseExtractor):
    """Apple Maps preview extractor (URL parsing only)."""

    platform = Platform.APPLE_MAPS
    site_name = "Apple Maps"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        params = parse_qs(urlparse(url).query)

        def param(*names: str) -> str | None:
            return first_of(*(params.get(name, [None])[0] for name in names))

        coordinates = self._parse_coordinates(param("ll"))
        address = param("q", "address")
        name = param("t")

        image = None
        if coordinates:
            image = self._settings.static_map_url.format(lat=coordinates.lat, lng=coordinates.lng)

        return self._preview(
            url,
            title=name or address or "Location",
            description=address or "",
            image=image,
            address=address,
            location_name=name,
            coordinates=coordinates,
        )

    def fallback(self, url: str) -> Preview:
        return self._preview(url, title="Location", fallback=True)

    @staticmethod
    def _parse_coordinates(ll: str | None) -> Coordinates | None:
        if not ll or "," not in ll:
            return None
        lat_str, _, lng_str = ll.partition(",")
        lat, lng = float_or_none(lat_str), float_or_none(lng_str)
        if lat is None or lng is None:
            return None
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return None
        return Coordinates(lat=lat, lng=lng)
