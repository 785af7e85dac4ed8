import uuid
from contextvars import ContextVar

TRACE_HEADER = "X-Request-Id"

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def get_trace_id() -> str:
    return _trace_id.get()


def set_trace_id(value: str | None = None) -> str:
    """Ставит trace_id текущего запроса (новый, если не передан)."""
    value = value or uuid.uuid4().hex
    _trace_id.set(value)
    return value
