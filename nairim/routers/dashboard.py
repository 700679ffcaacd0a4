import logging
from datetime import datetime, timedelta
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from nairim.config import get_settings
from nairim.schemas.dashboard import (
    ClientsMetrics, DashboardResponse, FinancialMetrics, GeolocationResponse, PortfolioMetrics,
)
from nairim.services.dashboard import DashboardService

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

END_OF_DAY = timedelta(days=1) - timedelta(milliseconds=1)


def get_dashboard_service() -> DashboardService:
    return DashboardService()


def _parse_day(value: str, name: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{name} must be a date in YYYY-MM-DD format")


def date_range(
    start_date: str = Query(..., alias="startDate"),
    end_date: str = Query(..., alias="endDate"),
) -> Tuple[datetime, datetime]:
    """
    Проверяет период дашборда: формат YYYY-MM-DD, начало не позже конца,
    длина не больше dashboard_max_range_days. Конец периода включает весь день
    """
    start = _parse_day(start_date, "startDate")
    end = _parse_day(end_date, "endDate")
    if start > end:
        raise HTTPException(status_code=400, detail="startDate must not be after endDate")
    if (end - start).days > settings.dashboard_max_range_days:
        raise HTTPException(
            status_code=400,
            detail=f"Date range must not exceed {settings.dashboard_max_range_days} days",
        )
    return start, end + END_OF_DAY


@router.get("/financial", response_model=FinancialMetrics)
async def get_financial(
    period: Tuple[datetime, datetime] = Depends(date_range),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Финансовые показатели за период"""
    return await service.get_financial_metrics(*period)


@router.get("/portfolio", response_model=PortfolioMetrics)
async def get_portfolio(
    period: Tuple[datetime, datetime] = Depends(date_range),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Показатели портфеля: документы, вакантность, заполняемость"""
    return await service.get_portfolio_metrics(*period)


@router.get("/clients", response_model=ClientsMetrics)
async def get_clients(
    period: Tuple[datetime, datetime] = Depends(date_range),
    service: DashboardService = Depends(get_dashboard_service),
):
    return await service.get_clients_metrics(*period)


@router.get("/map", response_model=GeolocationResponse)
async def get_map(
    period: Tuple[datetime, datetime] = Depends(date_range),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Координаты объектов, созданных за период"""
    return await service.get_geolocation(*period)


@router.get("/all", response_model=DashboardResponse)
async def get_all(
    period: Tuple[datetime, datetime] = Depends(date_range),
    service: DashboardService = Depends(get_dashboard_service),
):
    logger.info(f"Dashboard requested for {period[0]:%Y-%m-%d} - {period[1]:%Y-%m-%d}")
    return await service.get_all(*period)
