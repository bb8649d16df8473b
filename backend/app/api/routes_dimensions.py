"""Catalog endpoints — list dimensions and their unit tables."""

from fastapi import APIRouter, HTTPException

from app.core.units.dimensions import Dimension, UnknownDimensionError, catalog
from app.models.schemas import DimensionDetail, DimensionSummary, PresetResponse, UnitResponse

router = APIRouter(tags=["dimensions"])


def get_dimension_or_404(dimension_id: str) -> Dimension:
    try:
        return catalog.get_dimension(dimension_id)
    except UnknownDimensionError as e:
        raise HTTPException(404, detail=str(e))


def _summary(dim: Dimension) -> dict:
    return {
        "id": dim.id,
        "title": dim.title,
        "description": dim.description,
        "default_source": dim.default_source,
        "default_target": dim.default_target,
        "format_policy": dim.format_policy.value,
        "unit_count": len(dim.registry),
    }


@router.get("/dimensions", response_model=list[DimensionSummary])
async def list_dimensions():
    """All converters in catalog order."""
    return [_summary(d) for d in catalog.list_dimensions()]


@router.get("/dimensions/{dimension_id}", response_model=DimensionDetail)
async def get_dimension(dimension_id: str):
    """Units (in dropdown order) and shortcut presets for one dimension."""
    dim = get_dimension_or_404(dimension_id)
    return DimensionDetail(
        **_summary(dim),
        base_unit=dim.registry.base_unit.id,
        units=[UnitResponse(id=u.id, name=u.name, is_base=u.is_base) for u in dim.registry.list_units()],
        presets=[
            PresetResponse(
                index=i,
                label=p.label,
                source_unit=p.source_unit,
                target_unit=p.target_unit,
                value=p.value,
            )
            for i, p in enumerate(dim.presets)
        ],
    )
