"""Search cluster client wrapper fetching mappings and sample documents."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from elasticsearch import Elasticsearch

from es_schema_reverse.configuration.runtime_settings import ConnectionSettings

from .mapping_request import MappingRequest

_LOGGER = logging.getLogger("es_schema_reverse.mapping_fetch")


class IndicesClientProtocol(Protocol):
    """Subset of the indices API required by the reader."""

    def get_mapping(self, *, index: Any = None, **kwargs: Any) -> Any: ...


class SearchClientProtocol(Protocol):
    """Protocol implemented by both the real and fake clients."""

    @property
    def indices(self) -> IndicesClientProtocol: ...

    def search(self, *, index: Any = None, **kwargs: Any) -> Any: ...


class IndexMappingReader:
    """Service fetching raw mapping responses and sample documents.

    Client errors are not handled here and reach the caller unchanged.
    """

    def __init__(
        self,
        connection_settings: ConnectionSettings,
        client: SearchClientProtocol | None = None,
    ) -> None:
        self._settings = connection_settings
        self._client = client or self._create_client()

    def fetch_mapping(self, request: MappingRequest) -> Mapping[str, Any]:
        """Return the `get mapping` response body for the requested indices."""
        _LOGGER.debug("Fetching mappings for indices %s", ", ".join(request.indices))
        response = self._client.indices.get_mapping(index=list(request.indices))
        return _response_body(response)

    def fetch_sample_document(self, index: str) -> Mapping[str, Any] | None:
        """Return the first hit of ``index`` (with ``_id`` and ``_source``), if any."""
        response = _response_body(self._client.search(index=index, size=1))
        hits = response.get("hits", {}).get("hits", [])
        if not hits:
            _LOGGER.debug("Index %s returned no sample document", index)
            return None
        return dict(hits[0])

    def _create_client(self) -> SearchClientProtocol:
        settings = self._settings
        options: dict[str, Any] = {
            "verify_certs": settings.verify_certs,
            "request_timeout": settings.request_timeout_seconds,
        }
        if settings.api_key:
            options["api_key"] = settings.api_key
        elif settings.username and settings.password:
            options["basic_auth"] = (settings.username, settings.password)
        if settings.ca_certs is not None:
            options["ca_certs"] = str(settings.ca_certs)
        return Elasticsearch(hosts=list(settings.hosts), **options)


def _response_body(response: Any) -> Mapping[str, Any]:
    body = getattr(response, "body", response)
    if not isinstance(body, Mapping):
        raise TypeError(f"Unexpected search client response: {type(body).__name__}")
    return body
