"""
routes/health_routes.py

Responsibility: Liveness endpoint for load balancers and container probes.
Does NOT: check the Porkbun API or any other dependency.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """
    Returns application health as a JSON response.

    Returns:
        A dict with a "status" key set to "ok".
    """
    return {"status": "ok"}
