"""Frontend shell served for every unmatched GET (client-side routing)."""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from api.dependencies import AppContext, get_context
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["frontend"])


def resolve_static_file(static_dir: Path, full_path: str):
    """Return the file under ``static_dir`` for ``full_path``, or None if absent or outside it."""
    root = static_dir.resolve()
    candidate = (root / full_path).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    if candidate.is_file():
        return candidate
    return None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, ctx: AppContext = Depends(get_context)):
    """Serve a static asset if one matches, otherwise the index.html shell."""
    static_dir = Path(ctx.settings.static_dir)

    asset = resolve_static_file(static_dir, full_path) if full_path else None
    if asset:
        return FileResponse(asset)

    index = static_dir / "index.html"
    if index.is_file():
        logger.debug(f"Wildcard route accessed: /{full_path}")
        return FileResponse(index)

    return {"message": "Welcome to the HealthConnect Backend Server!"}
