# src/lifecost/routers/taxes.py
from fastapi import APIRouter, HTTPException, Query, status

from .. import schemas, taxes
from ..errors import InvalidInputError

router = APIRouter(
    prefix="/taxes",
    tags=["Taxes"],
)

@router.get("/savings", response_model=schemas.TaxSavings)
async def read_tax_savings(
    current: float = Query(..., allow_inf_nan=False, description="Current effective tax burden, percent"),
    compare: float = Query(..., allow_inf_nan=False, description="Tax burden of the place compared, percent"),
    income: float = Query(..., ge=0, allow_inf_nan=False, description="Annual income"),
):
    """
    Yearly and monthly savings from moving to a place with a different
    tax burden. Negative values mean paying more.
    """
    try:
        return taxes.calculate_tax_savings(current, compare, income)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
