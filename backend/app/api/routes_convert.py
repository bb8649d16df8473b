"""One-shot conversion endpoint."""

from fastapi import APIRouter

from app.api.routes_dimensions import get_dimension_or_404
from app.core.units.converter import convert_text
from app.models.schemas import ConvertRequest, ConvertResponse

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest):
    """Convert a single value. Unknown unit ids resolve to the first unit."""
    dim = get_dimension_or_404(req.dimension)
    from_unit = dim.registry.find_unit(req.from_unit)
    to_unit = dim.registry.find_unit(req.to_unit)
    return ConvertResponse(
        dimension=dim.id,
        value=req.value,
        from_unit=from_unit.id,
        to_unit=to_unit.id,
        result=convert_text(req.value, from_unit, to_unit, dim.format_policy),
    )
