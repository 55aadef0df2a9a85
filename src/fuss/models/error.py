"""
Graph API error envelope: {"error": {"type", "code", "message", ...}}.
"""

from typing import Any, Optional
from pydantic import BaseModel


class GraphErrorDetail(BaseModel):
    type: str
    code: Any
    message: str
    error_subcode: Optional[int] = None
    fbtrace_id: Optional[str] = None


class GraphErrorEnvelope(BaseModel):
    error: GraphErrorDetail
