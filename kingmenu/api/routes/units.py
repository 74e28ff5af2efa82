from fastapi import APIRouter, Query

from kingmenu.logic.ingredients.units import convert_measurement, format_measurement, preferred_units

router = APIRouter(prefix="/api/units", tags=["units"])


@router.get("/convert")
def convert(value: float = Query(...), from_unit: str = Query(...), to_unit: str = Query(...),
            system: str = Query("metric", pattern=r'^(metric|imperial)$')):
    result = convert_measurement(value, from_unit, to_unit, system)
    return {
        "value": value,
        "from_unit": from_unit,
        "to_unit": to_unit,
        "system": system,
        "result": result,
        "formatted": format_measurement(result, to_unit),
    }


@router.get("/preferred")
def preferred(locale: str = Query("en")):
    return preferred_units(locale)
