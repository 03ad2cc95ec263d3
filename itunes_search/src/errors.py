from __future__ import annotations

from enum import Enum
from typing import Optional


class NetworkErrorKind(str, Enum):
    REQUEST_URL_IS_NIL = "requestURLIsNil"
    DATA_TASK_ERROR = "dataTaskError"
    NO_DATA = "noData"
    DECODING_ERROR = "decodingError"


class NetworkError(Exception):
    """Fallo terminal de una búsqueda.

    Solo ``DECODING_ERROR`` conserva la causa original; para
    ``DATA_TASK_ERROR`` el error del transporte se registra en el log y se
    descarta.
    """

    def __init__(self, kind: NetworkErrorKind, cause: Optional[BaseException] = None):
        self.kind = kind
        self.cause = cause
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)
