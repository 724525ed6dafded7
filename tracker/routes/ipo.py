from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies.market_dependencies import get_ipo_service
from ..dto.ipo import IpoCalendarResponse
from ..services.ipo_service import IpoService

router = APIRouter(prefix="/ipo", tags=["ipo"])


@router.get("/calendar", response_model=IpoCalendarResponse)
async def ipo_calendar(
    from_date: Optional[str] = Query(None, alias="from", description="Start date, YYYY-MM-DD"),
    to_date: Optional[str] = Query(None, alias="to", description="End date, YYYY-MM-DD"),
    ipo_service: IpoService = Depends(get_ipo_service),
):
    offerings = await ipo_service.get_calendar(from_date, to_date)
    return IpoCalendarResponse(ipo_offerings=offerings, count=len(offerings), source=ipo_service.source)


@router.get("/calendar/current-month", response_model=IpoCalendarResponse)
async def ipo_calendar_current_month(ipo_service: IpoService = Depends(get_ipo_service)):
    offerings = await ipo_service.current_month()
    return IpoCalendarResponse(
        ipo_offerings=offerings,
        count=len(offerings),
        period="Current Month",
        source=ipo_service.source,
    )


@router.get("/calendar/next-30-days", response_model=IpoCalendarResponse)
async def ipo_calendar_next_30_days(ipo_service: IpoService = Depends(get_ipo_service)):
    offerings = await ipo_service.next_30_days()
    return IpoCalendarResponse(
        ipo_offerings=offerings,
        count=len(offerings),
        period="Next 30 Days",
        source=ipo_service.source,
    )
