"""
Till-salary API router.

- GET /till-salary/how-much?pay_day=<n>: next pay date and days until it
- GET /till-salary/pay-day/<n>/list-dates: remaining pay dates this year

Both routes accept every method so that non-GET calls get the JSON 405 envelope
instead of the framework default, and checks run in order: method, URL, pay day.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .clock import get_now
from .config import settings
from .responses import envelope_response
from .services.pay_dates import compute_next_pay_day, compute_remaining_pay_dates
from .services.url_patterns import is_how_much_path, match_list_dates_path, parse_pay_day

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/till-salary", tags=["till-salary"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

METHOD_NOT_ALLOWED = "Method not allowed"
INVALID_HOW_MUCH_URL = "Invalid how-much url"
INVALID_PAY_DAY_URL = "Invalid pay-day url"
INVALID_PAY_DAY = "Invalid pay_day parameter"


class HowMuchData(BaseModel):
    next_pay_day: date
    days_until_pay_day: int


class PayDayDatesData(BaseModel):
    pay_day_dates: list[date]


def _ensure_get(request: Request) -> None:
    if request.method != "GET":
        logger.warning("Method not allowed: %s %s", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail=METHOD_NOT_ALLOWED,
            headers={"Allow": "GET"},
        )


def _bad_request(detail: str, request: Request) -> HTTPException:
    logger.warning("%s: %s", detail, request.url)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _how_much(request: Request, now: datetime) -> JSONResponse:
    _ensure_get(request)

    if not is_how_much_path(request.url.path):
        raise _bad_request(INVALID_HOW_MUCH_URL, request)

    # First value wins when pay_day is repeated.
    pay_day_values = request.query_params.getlist("pay_day")
    pay_day = parse_pay_day(pay_day_values[0] if pay_day_values else None)
    if pay_day is None:
        raise _bad_request(INVALID_PAY_DAY, request)

    result = compute_next_pay_day(pay_day, now)
    logger.debug("pay_day=%s next=%s days_until=%s", pay_day, result.next_pay_day, result.days_until_pay_day)

    return envelope_response(
        status.HTTP_201_CREATED,
        "Days until pay day",
        HowMuchData(
            next_pay_day=result.next_pay_day,
            days_until_pay_day=result.days_until_pay_day,
        ),
    )


@router.api_route("/how-much", methods=ALL_METHODS, status_code=status.HTTP_201_CREATED)
def how_much(request: Request, now: datetime = Depends(get_now)) -> JSONResponse:
    """
    Return the next pay date for `pay_day` and how many days remain until it.

    Example response:
    {
      "message": "Days until pay day",
      "data": {"next_pay_day": "2026-10-31", "days_until_pay_day": 13}
    }
    """
    return _how_much(request, now)


@router.api_route("/how-much/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
def how_much_malformed(rest: str, request: Request, now: datetime = Depends(get_now)) -> JSONResponse:
    # Anything below /how-much is rejected by the path check with the how-much message.
    return _how_much(request, now)


@router.api_route("/pay-day/{rest:path}", methods=ALL_METHODS, status_code=status.HTTP_201_CREATED)
def list_pay_day_dates(rest: str, request: Request, now: datetime = Depends(get_now)) -> JSONResponse:
    """
    Return the pay dates left in the current year for the pay day in the path.

    Example response:
    {
      "message": "Pay day dates",
      "data": {"pay_day_dates": ["2026-11-15", "2026-12-15"]}
    }
    """
    _ensure_get(request)

    pay_day_text = match_list_dates_path(request.url.path, settings.list_dates_suffix)
    if pay_day_text is None:
        raise _bad_request(INVALID_PAY_DAY_URL, request)

    pay_day = parse_pay_day(pay_day_text)
    if pay_day is None:
        raise _bad_request(INVALID_PAY_DAY, request)

    dates = compute_remaining_pay_dates(pay_day, now)
    logger.debug("pay_day=%s remaining=%s", pay_day, len(dates))

    return envelope_response(
        status.HTTP_201_CREATED,
        "Pay day dates",
        PayDayDatesData(pay_day_dates=dates),
    )
