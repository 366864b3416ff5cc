from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.responses import envelope
from app.dependencies import get_db, month_param, months_param
from app.schemas.dashboard import CategorySalesResponse, RevenueSeriesResponse, StatsResponse
from app.services.dashboard_service import get_category_sales, get_revenue_series, get_stats

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(request: Request):
    templates = request.app.state.templates
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "app_name": settings.APP_NAME,
            "default_months": settings.REVENUE_SERIES_DEFAULT_MONTHS,
        },
    )


@router.get("/api/stats", response_model=StatsResponse, response_model_exclude_unset=True)
def stats(db: Session = Depends(get_db)):
    return envelope(get_stats(db))


@router.get("/api/revenue-series", response_model=RevenueSeriesResponse, response_model_exclude_unset=True)
def revenue_series(
    months: int | None = Depends(months_param),
    db: Session = Depends(get_db),
):
    return envelope(get_revenue_series(db, months_count=months))


@router.get("/api/category-sales", response_model=CategorySalesResponse, response_model_exclude_unset=True)
def category_sales(
    month: str | None = Depends(month_param),
    db: Session = Depends(get_db),
):
    return envelope(get_category_sales(db, month=month))


__all__ = ["router"]
