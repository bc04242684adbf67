"""Request Queue - FIFO buffer of pending registration requests."""

from registrar.request_queue.models import RegistrationRequest
from registrar.request_queue.queue import RequestQueue

__all__ = [
    "RegistrationRequest",
    "RequestQueue",
]
