import logging
import platform
from typing import Dict, List, Mapping, Optional

from .. import recognizer
from ..core.config import settings
from ..core.utils import normalize_words
from ..data.base import BoundingBox, Coordinates, Transport
from ..data.options import OutputFormat, RequestOptions
from ..data.transport import default_transport
from ..schemas import (
    Autosuggest,
    AvailableLanguages,
    GeocodeResult,
    GridSection,
    GridSectionGeoJson,
    Suggestion,
)
from .dispatch import decode_as, decode_result

log = logging.getLogger("w3wkit.client")

API_KEY_HEADER = "X-Api-Key"
WRAPPER_HEADER = "X-W3W-Wrapper"

class GeocodingClient:
    """
    Orchestrates:
      options → query params → transport → raw body → typed result
    Configuration methods (``header``, ``hostname``) return a new client, so a
    configured client can be shared freely.
    """
    def __init__(
        self,
        api_key: Optional[str] = None,
        host: Optional[str] = None,
        transport: Optional[Transport] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.W3W_API_KEY
        self.host = (host or settings.W3W_BASE_URL).rstrip("/")
        self.transport = transport or default_transport()
        self.headers: Dict[str, str] = dict(headers or {})

    # ----- configuration -----

    def header(self, name: str, value: str) -> "GeocodingClient":
        return GeocodingClient(self.api_key, self.host, self.transport, {**self.headers, name: value})

    def hostname(self, host: str) -> "GeocodingClient":
        return GeocodingClient(self.api_key, host, self.transport, self.headers)

    def _request_headers(self) -> Dict[str, str]:
        headers = dict(self.headers)
        headers[WRAPPER_HEADER] = f"w3wkit-python/{settings.VERSION} ({platform.system().lower()})"
        headers[API_KEY_HEADER] = self.api_key
        return headers

    async def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None):
        return await self.transport.get(f"{self.host}/{endpoint}", params, self._request_headers())

    # ----- conversions -----

    async def convert_to_3wa(self, coordinates: Coordinates, options: Optional[RequestOptions] = None) -> GeocodeResult:
        options = options or RequestOptions()
        fmt = options.format or OutputFormat.PLAIN
        params = {"coordinates": coordinates.to_param(), **options.output_format(fmt).to_params()}
        body = await self._get("convert-to-3wa", params)
        return decode_result(body, fmt)

    async def convert_to_coordinates(self, words: str, options: Optional[RequestOptions] = None) -> GeocodeResult:
        options = options or RequestOptions()
        fmt = options.format or OutputFormat.PLAIN
        params = {"words": normalize_words(words), **options.output_format(fmt).to_params()}
        body = await self._get("convert-to-coordinates", params)
        return decode_result(body, fmt)

    async def available_languages(self) -> AvailableLanguages:
        body = await self._get("available-languages")
        return decode_as(AvailableLanguages, body)

    async def grid_section(self, bounding_box: BoundingBox, output_format: OutputFormat = OutputFormat.PLAIN):
        fmt = OutputFormat(output_format)
        params = {"bounding-box": bounding_box.to_param(), "format": fmt.value}
        body = await self._get("grid-section", params)
        return decode_result(body, fmt, plain=GridSection, geojson=GridSectionGeoJson)

    # ----- autosuggest -----

    async def autosuggest(self, input: str, options: Optional[RequestOptions] = None) -> Autosuggest:
        params = {"input": input, **(options or RequestOptions()).to_params()}
        body = await self._get("autosuggest", params)
        return decode_as(Autosuggest, body)

    async def autosuggest_with_coordinates(self, input: str, options: Optional[RequestOptions] = None) -> Autosuggest:
        params = {"input": input, **(options or RequestOptions()).to_params()}
        body = await self._get("autosuggest-with-coordinates", params)
        return decode_as(Autosuggest, body)

    async def autosuggest_selection(
        self, raw_input: str, suggestion: Suggestion, options: Optional[RequestOptions] = None
    ) -> None:
        """Report which suggestion the user picked for ``raw_input``."""
        params = {
            "raw-input": raw_input,
            "selection": suggestion.words,
            "rank": str(suggestion.rank),
            **(options or RequestOptions()).to_params(),
        }
        await self._get("autosuggest-selection", params)

    # ----- address helpers -----

    def is_possible_3wa(self, text: str) -> bool:
        return recognizer.is_possible_3wa(text)

    def find_possible_3wa(self, text: str) -> List[str]:
        return recognizer.find_possible_3wa(text)

    def did_you_mean(self, text: str) -> bool:
        return recognizer.did_you_mean(text)

    async def is_valid_3wa(self, text: str) -> bool:
        """
        Shape check first; only a possible address costs a round trip. Valid
        when the top suggestion for the text is the text itself.
        """
        if not recognizer.is_possible_3wa(text):
            return False
        words = text.strip()
        result = await self.autosuggest(words, RequestOptions().n_result(1))
        if not result.suggestions:
            log.debug("no suggestion for %s", words)
            return False
        return result.suggestions[0].words == words
