"""
Movie server client.

Thin, stateless facade over the three remote operations the skill needs.
No retries and no caching: every failure surfaces as ServiceError.
"""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import SkillConfig
from .config_validator import mask_secret
from .exceptions import ServiceError, ServiceTimeoutError
from .models import CandidateMovie, Movie
from .schemas import AddMoviePayload, ListMoviesPayload, SearchPayload

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class RedactSecretFilter(logging.Filter):
    """Mask one secret in log records before any handler sees them."""

    def __init__(self, secret: str):
        super().__init__()
        self._secret = secret
        self._masked = mask_secret(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if self._secret and self._secret in message:
            record.msg = message.replace(self._secret, self._masked)
            record.args = None
        return True


class MovieServiceClient:
    """
    Client for the movie server JSON API.

    The API key is a path segment, so it is baked into the API root once
    and masked whenever this client logs a URL.

    httpx itself logs every request URL on the ``httpx`` logger at INFO
    level; while the client is open it attaches a filter to that logger
    which masks the key in those records.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 10.0,
                 http_client: Optional[httpx.Client] = None):
        """
        :param base_url: Movie server base URL (e.g. http://localhost:5050)
        :param api_key: Movie server API key
        :param timeout: Per-request timeout in seconds
        :param http_client: Optional preconfigured httpx client (tests inject a mock transport)
        """
        self._api_root = f"{base_url.rstrip('/')}/api/{api_key}"
        self._log_root = f"{base_url.rstrip('/')}/api/{mask_secret(api_key)}"
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)
        self._key_filter = RedactSecretFilter(api_key)
        logging.getLogger("httpx").addFilter(self._key_filter)

    @classmethod
    def from_config(cls, config: SkillConfig) -> "MovieServiceClient":
        return cls(config.base_url, config.api_key, timeout=config.request_timeout)

    def list_movies(self, search: Optional[str] = None) -> List[Movie]:
        """
        List movies known to the server, optionally filtered by title.

        :param search: Free-text title filter, or None for every movie
        :return: Matching movies in server order (empty when nothing matches)
        :raises: ServiceError on transport or parse failure
        """
        params = {"search": search} if search is not None else None
        payload = self._get("media.list", params, ListMoviesPayload)
        return [movie.to_model() for movie in payload.movies or []]

    def search_providers(self, query: str) -> List[CandidateMovie]:
        """
        Search the configured providers for movies matching a title.

        :param query: Free-text title
        :return: Candidates in provider order (empty when nothing matches)
        :raises: ServiceError on transport or parse failure
        """
        payload = self._get("search", {"q": query}, SearchPayload)
        return [movie.to_model() for movie in payload.movies or []]

    def add_movie(self, external_id: str) -> bool:
        """
        Queue one candidate for download.

        :param external_id: Provider identifier (IMDb id)
        :return: Whether the server reports success
        :raises: ServiceError on transport or parse failure
        """
        payload = self._get("movie.add", {"identifier": external_id}, AddMoviePayload)
        if not payload.success:
            logger.warning(f"Movie server refused to add {external_id}")
        return payload.success

    def close(self) -> None:
        logging.getLogger("httpx").removeFilter(self._key_filter)
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "MovieServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, operation: str, params: Optional[Dict[str, Any]],
             schema: Type[PayloadT]) -> PayloadT:
        logger.info(f"{operation} URL: {self._log_root}/{operation}/ params={params}")
        try:
            response = self._http.get(f"{self._api_root}/{operation}/", params=params)
            response.raise_for_status()
            return schema.model_validate(response.json())
        except httpx.TimeoutException as e:
            raise ServiceTimeoutError(f"{operation} request timed out: {type(e).__name__}") from e
        except httpx.HTTPError as e:
            raise ServiceError(f"{operation} request failed: {type(e).__name__}") from e
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            reason = "unexpected response shape" if isinstance(e, ValidationError) else "invalid JSON"
            raise ServiceError(f"{operation} returned {reason}") from e
