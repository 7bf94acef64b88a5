"""FastAPI server for sector generation.

Stateless: every request generates a sector from its parameters and returns
it. Nothing is stored between requests.
"""

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse

from ..content.tags import tag_names, unknown_tags
from ..engine import SectorConfigError, SectorGenerationError, generate_sector
from ..interface.renderer import SectorRenderer
from ..models.sector import Sector
from ..utils.constants import EXTRA_STARS, LEGACY_EXTRA_STARS
from ..utils.format import OutputType
from ..utils.rng import SectorRNG
from ..utils.serialization import sector_to_dict
from .schemas.requests import CreateSectorRequest
from .schemas.responses import SectorResponse, TagListResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sectorgen API",
    description="Procedural starmap generation for science-fiction tabletop games",
    version="1.0.0",
)


def _generate(request: CreateSectorRequest) -> Sector:
    """Generate a sector for a request, mapping errors to HTTP responses."""
    unknown = unknown_tags(request.excludeTags)
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown world tags: {', '.join(unknown)}")

    try:
        return generate_sector(
            rows=request.rows,
            cols=request.cols,
            excluded_tags=request.excludeTags,
            poi_chance=request.poiChance,
            other_world_chance=request.otherWorldChance,
            rng=SectorRNG(request.seed),
            extra_stars=LEGACY_EXTRA_STARS if request.legacyCount else EXTRA_STARS,
        )
    except SectorConfigError as e:
        logger.warning(f"Rejected sector request: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except SectorGenerationError as e:
        logger.error(f"Sector generation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Sector generation failed: {e}")


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {"service": "Sectorgen", "status": "operational"}


@app.get("/api/tags", response_model=TagListResponse)
async def list_tags():
    """List the world tag names that can be excluded."""
    return TagListResponse(tags=tag_names())


@app.post("/api/sectors", response_model=SectorResponse)
async def create_sector(request: CreateSectorRequest):
    """Generate a sector and return it as JSON.

    Example:
        POST /api/sectors
        {
          "rows": 10,
          "cols": 8,
          "excludeTags": ["Zombies"],
          "poiChance": 30,
          "otherWorldChance": 10,
          "seed": 42
        }
    """
    sector = _generate(request)
    logger.info(f"Generated sector with {len(sector)} stars (seed {sector.seed})")

    data = sector_to_dict(sector)
    data["stars"].sort(key=lambda s: (s["row"], s["col"]))
    return SectorResponse.model_validate(data)


@app.post("/api/sectors/render", response_class=PlainTextResponse)
async def render_sector(
    request: CreateSectorRequest,
    output_format: OutputType = Query(OutputType.MARKDOWN, alias="format"),
):
    """Generate a sector and return it rendered as text or markdown.

    Example:
        POST /api/sectors/render?format=text
    """
    sector = _generate(request)
    return SectorRenderer().render(sector, output_format)
