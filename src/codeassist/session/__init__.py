"""Chat session module.

- models.py: chat messages, transcript, exchanges
- service.py: prompt builder -> completion client -> renderer pipeline
- controller.py: the one-exchange-at-a-time state machine
- selection.py: questions about the editor selection
"""

from .controller import (
    CANCELLED_MESSAGE,
    DEFAULT_EXCHANGE_TIMEOUT,
    FIX_PROCESSING_MESSAGE,
    PROCESSING_MESSAGE,
    ChatSessionController,
)
from .models import ChatMessage, Exchange, ExchangeKind, ExchangeState, MessageOrigin, Transcript
from .selection import SelectionQueryAdapter
from .service import AssistantService

__all__ = [
    "AssistantService",
    "CANCELLED_MESSAGE",
    "ChatMessage",
    "ChatSessionController",
    "DEFAULT_EXCHANGE_TIMEOUT",
    "Exchange",
    "ExchangeKind",
    "ExchangeState",
    "FIX_PROCESSING_MESSAGE",
    "MessageOrigin",
    "PROCESSING_MESSAGE",
    "SelectionQueryAdapter",
    "Transcript",
]
