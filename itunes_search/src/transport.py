"""Transportes HTTP intercambiables para el controlador de búsqueda.

``NetworkSession`` define una única operación asíncrona (``fetch``); la
implementación real delega en ``requests`` y la de pruebas reproduce valores
preconfigurados sin tocar la red.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

import requests

from .config import Config

logger = logging.getLogger(__name__)

CompletionHandler = Callable[
    [Optional[bytes], Optional[requests.Response], Optional[BaseException]], None
]


class NetworkSession(ABC):
    name: str = "session"

    @abstractmethod
    def fetch(self, request: requests.PreparedRequest, completion_handler: CompletionHandler) -> None:
        """Ejecuta ``request`` y llama ``completion_handler(data, response, error)`` una vez."""
        raise NotImplementedError


class RequestsNetworkSession(NetworkSession):
    name = "requests"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float | None = None,
        max_workers: int | None = None,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else Config.ITUNES_TIMEOUT
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or Config.ITUNES_MAX_WORKERS,
            thread_name_prefix="itunes-fetch",
        )

    def fetch(self, request: requests.PreparedRequest, completion_handler: CompletionHandler) -> None:
        self._executor.submit(self._send, request, completion_handler)

    def _send(self, request: requests.PreparedRequest, completion_handler: CompletionHandler) -> None:
        try:
            response = self.session.send(request, timeout=self.timeout)
            content = response.content
        except Exception as exc:
            completion_handler(None, None, exc)
            return
        # 4xx/5xx no se consideran error de transporte
        completion_handler(content, response, None)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self) -> "RequestsNetworkSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class MockNetworkSession(NetworkSession):
    """Versión de pruebas: responde con ``data``/``error`` desde otro hilo."""

    name = "mock"

    def __init__(self, data: Optional[bytes] = None, error: Optional[BaseException] = None):
        self.data = data
        self.error = error
        self.requests: List[requests.PreparedRequest] = []

    def fetch(self, request: requests.PreparedRequest, completion_handler: CompletionHandler) -> None:
        self.requests.append(request)
        worker = threading.Thread(
            target=completion_handler,
            args=(self.data, None, self.error),
            name="itunes-mock-fetch",
            daemon=True,
        )
        worker.start()
