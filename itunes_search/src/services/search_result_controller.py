"""Controlador de búsquedas contra iTunes Search API (Apple).

Construye la petición, la delega a un ``NetworkSession`` y clasifica el
resultado. Cada llamada a ``perform_search`` devuelve un ``Future`` que se
resuelve una sola vez: con la lista de ``SearchResult`` o con un
``NetworkError``.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable, List, Optional

import requests
from pydantic import ValidationError

from ..config import Config
from ..errors import NetworkError, NetworkErrorKind
from ..models import ResultType, SearchResult, SearchResults
from ..transport import NetworkSession

logger = logging.getLogger(__name__)


class SearchResultController:
    def __init__(self, base_url: str | None = None):
        self._base_url = base_url or Config.ITUNES_SEARCH_URL

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_request(self, term: str, result_type: ResultType) -> requests.PreparedRequest:
        params = {
            "term": term,
            "entity": ResultType(result_type).value,
        }
        try:
            return requests.Request("GET", self._base_url, params=params).prepare()
        except (requests.RequestException, ValueError) as exc:
            logger.debug("No se pudo construir la URL de búsqueda: %s", exc)
            raise NetworkError(NetworkErrorKind.REQUEST_URL_IS_NIL) from None

    def perform_search(
        self,
        term: str,
        result_type: ResultType,
        session: NetworkSession,
        completion: Optional[Callable[[Future], None]] = None,
    ) -> Future[List[SearchResult]]:
        """Busca ``term`` filtrando por ``result_type``.

        ``completion`` (opcional) recibe el ``Future`` ya resuelto y corre en
        el hilo que lo resolvió; quien necesite otro contexto debe
        re-despacharlo.
        """
        future: Future[List[SearchResult]] = Future()
        if completion is not None:
            future.add_done_callback(completion)

        try:
            request = self.build_request(term, result_type)
        except NetworkError as err:
            future.set_exception(err)
            return future

        lock = threading.Lock()

        def _complete(data, _response, error) -> None:
            with lock:
                if future.done():
                    logger.warning("Callback repetido para %s; se ignora", request.url)
                    return
                outcome = self._classify(data, error)
                if isinstance(outcome, NetworkError):
                    future.set_exception(outcome)
                else:
                    future.set_result(outcome)

        logger.debug("GET %s", request.url)
        try:
            session.fetch(request, _complete)
        except Exception as exc:
            _complete(None, None, exc)
        return future

    def _classify(self, data: Optional[bytes], error: Optional[BaseException]):
        if error is not None:
            logger.error("Error fetching data: %s", error)
            return NetworkError(NetworkErrorKind.DATA_TASK_ERROR)
        if not data:
            return NetworkError(NetworkErrorKind.NO_DATA)
        try:
            return list(SearchResults.model_validate_json(data).results)
        except ValidationError as exc:
            logger.error("Unable to decode data into SearchResults: %s", exc)
            err = NetworkError(NetworkErrorKind.DECODING_ERROR, cause=exc)
            err.__cause__ = exc
            return err
