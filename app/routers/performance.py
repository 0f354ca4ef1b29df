"""Performance report endpoint:
    GET  /api/v1/performance
"""

from __future__ import annotations

import logging
import os
import threading

import psutil

from fastapi import APIRouter

from app.models.schemas import PerformanceResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    tags=["Performance"],
)

_last_response_time_ms: float = 0.0  # updated by the timing middleware


def record_response_time(elapsed_ms: float) -> None:
    """Called by the timing middleware after every request."""
    global _last_response_time_ms
    _last_response_time_ms = elapsed_ms


def format_elapsed(total_ms: float) -> str:
    """Format milliseconds as HH:mm:ss.SSS."""
    total_seconds = total_ms / 1000
    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    millis = int(total_ms % 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def _get_memory_mb() -> str:
    """Return current process RSS memory in 'XXX.XX MB' format."""
    process = psutil.Process(os.getpid())
    mem_mb = process.memory_info().rss / (1024 * 1024)
    return f"{mem_mb:.2f} MB"


# ── Endpoint ──────────────────────────────────────────────────────────────

@router.get(
    "/performance",
    response_model=PerformanceResponse,
    summary="System performance metrics",
)
async def performance_report() -> PerformanceResponse:
    """Return last response time, memory usage, and active thread count."""
    return PerformanceResponse(
        time=format_elapsed(_last_response_time_ms),
        memory=_get_memory_mb(),
        threads=threading.active_count(),
    )
