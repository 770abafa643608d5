"""
API Module - In-process interface for UI layers.

A UI:
1. Sends action dicts (verb + payload)
2. Receives results with a structured rejection reason
3. Reads serializable snapshots to render

No network transport: the engine runs in the same process as the UI.
"""

from .schemas import (
    ActionRequest,
    ActionResponse,
    GameSnapshot,
    HexInfo,
    UnitInfo,
    CardInfo,
)
from .service import parse_action, snapshot, to_response, dispatch_request

__all__ = [
    "ActionRequest",
    "ActionResponse",
    "GameSnapshot",
    "HexInfo",
    "UnitInfo",
    "CardInfo",
    "parse_action",
    "snapshot",
    "to_response",
    "dispatch_request",
]
