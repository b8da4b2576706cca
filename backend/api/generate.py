"""Graphic generation API endpoints

- POST /api/generate           prompt + color -> graphic + payload
- POST /api/generate/payload   payload only (diagnostics)
- GET  /api/generate/templates template catalogue in routing order
- GET/DELETE /api/generate/history  ephemeral per-session gallery
"""
import logging
import traceback
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from models.graphic import GeneratedGraphic, GenerationPayload, GenerateResponse
from services.graphic_generator import graphic_generator
from services.graphic_history import DEFAULT_SESSION, graphic_history
from services.payload_builder import build_payload
from services.template_router import template_router

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generate", tags=["generate"])

GENERIC_FAILURE = "Unable to generate graphic. Please try again."
INVALID_BODY = "Request body must be a JSON object"


class HistoryResponse(BaseModel):
    session_id: str
    graphics: List[GeneratedGraphic]
    total: int


def _require_text(body: Dict[str, Any], key: str, message: str) -> str:
    """Reject missing, empty or non-string fields with a 400."""
    value = body.get(key)
    if not value or not isinstance(value, str):
        raise HTTPException(status_code=400, detail=message)
    return value


async def _read_body(request: Request) -> Any:
    """Parse the JSON body; malformed or empty bodies get a plain 400."""
    try:
        return await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError
        raise HTTPException(status_code=400, detail=INVALID_BODY)


def _validated(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail=INVALID_BODY)
    return {
        "prompt": _require_text(body, "prompt", "Prompt is required"),
        "color": _require_text(body, "color", "Primary color is required"),
        "session_id": body.get("sessionId") if isinstance(body.get("sessionId"), str) else None,
    }


# =============================================================================
# API Endpoints
# =============================================================================

@router.post("", response_model=GenerateResponse)
async def generate_graphic(request: Request):
    """Generate a HUD graphic for a prompt and accent color."""
    fields = _validated(await _read_body(request))
    try:
        result = graphic_generator.generate_with_payload(fields["prompt"], fields["color"])
        await graphic_history.add(result.graphic, fields["session_id"] or DEFAULT_SESSION)
        logger.info(f"[GENERATE] {result.graphic.template.value} graphic for prompt_len={len(fields['prompt'])}")
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[GENERATE] Generation failed: {type(e).__name__}: {str(e)}")
        logger.error(f"[GENERATE] Traceback: {traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=GENERIC_FAILURE)


@router.post("/payload", response_model=GenerationPayload)
async def generate_payload(request: Request):
    """Build the generation payload without rendering."""
    fields = _validated(await _read_body(request))
    return build_payload(fields["prompt"], fields["color"])


@router.get("/templates")
async def list_templates():
    """List templates in the order prompts are routed to them."""
    return {"templates": template_router.list_templates()}


@router.get("/history", response_model=HistoryResponse)
async def get_history(
    session_id: str = Query(default=DEFAULT_SESSION),
    offset: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=1),
):
    """Recent graphics for a session, newest first."""
    everything = await graphic_history.list(session_id)
    end = None if limit is None else offset + limit
    return HistoryResponse(
        session_id=session_id,
        graphics=everything[offset:end],
        total=len(everything),
    )


@router.delete("/history")
async def clear_history(session_id: str = Query(default=DEFAULT_SESSION)):
    """Forget a session's graphics."""
    removed = await graphic_history.clear(session_id)
    logger.info(f"[HISTORY] Cleared {removed} graphics for session={session_id}")
    return {"success": True, "removed": removed}
