from __future__ import annotations

import logging
from datetime import date, datetime
from functools import wraps

from flask import Flask, jsonify, request, session

from ..allowances.catalog import (
    ACTIVITY_TYPES,
    DESTINATIONS,
    activity_description,
    needs_accommodation_selection,
    needs_driving_selection,
)
from ..allowances.model import AllowanceEntry
from ..core.constants import DEFAULT_DESTINATION_ID
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _parse_date(value) -> date:
    try:
        return datetime.strptime(value or "", "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"日付の形式が不正です: {value!r}") from None


def _flag(payload: dict, key: str) -> bool:
    value = payload.get(key)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


def _entry_json(entry: AllowanceEntry) -> dict:
    return {
        "id": entry.entry_id,
        "date": entry.work_date.strftime("%Y-%m-%d"),
        "activity_id": entry.activity_id,
        "destination_id": entry.destination_id,
        "destination_detail": entry.destination_detail,
        "is_driving": entry.is_driving,
        "is_accommodation": entry.is_accommodation,
        "amount": entry.amount,
    }


def register(app: Flask, container: Container) -> None:
    service = container.allowance_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except AuthorizationError as e:
                return jsonify({"error": str(e)}), 403
            except Exception:
                logger.exception("unhandled error in %s", view.__name__)
                return jsonify({"error": "システムエラーが発生しました"}), 500

        return wrapper

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "ログインしてください"}), 401
            return view(*args, **kwargs)

        return wrapper

    def current_role() -> Role:
        try:
            return Role(session.get("role"))
        except ValueError:
            return Role.STAFF

    @app.route("/api/catalog", methods=["GET"], endpoint="api_catalog")
    def api_catalog():
        return jsonify(
            {
                "activities": [
                    {
                        "id": a.id,
                        "label": a.label,
                        "requires_holiday": a.requires_holiday,
                        "description": activity_description(a.id),
                        "needs_driving": needs_driving_selection(a.id),
                        "needs_accommodation": needs_accommodation_selection(a.id),
                    }
                    for a in ACTIVITY_TYPES
                ],
                "destinations": [{"id": d.id, "label": d.label} for d in DESTINATIONS],
            }
        )

    @app.route("/api/day-type", methods=["GET"], endpoint="api_day_type")
    @json_errors
    def api_day_type():
        work_date = _parse_date(request.args.get("date") or date.today().strftime("%Y-%m-%d"))
        day = service.day_type(work_date)
        return jsonify(
            {
                "date": work_date.strftime("%Y-%m-%d"),
                "label": day.label,
                "is_work_day": day.is_work_day,
                "holiday_name": day.holiday_name,
            }
        )

    @app.route("/api/allowances/quote", methods=["POST"], endpoint="api_allowance_quote")
    @json_errors
    def api_allowance_quote():
        payload = request.get_json(silent=True) or {}
        if payload.get("date"):
            is_work_day = service.day_type(_parse_date(payload["date"])).is_work_day
        else:
            is_work_day = _flag(payload, "is_work_day")

        quote = service.quote(
            activity_id=payload.get("activity_id") or "",
            is_work_day=is_work_day,
            is_driving=_flag(payload, "is_driving"),
            destination_id=payload.get("destination_id") or DEFAULT_DESTINATION_ID,
            is_accommodation=_flag(payload, "is_accommodation"),
            is_half_day=_flag(payload, "is_half_day"),
            custom_amount=payload.get("custom_amount"),
            custom_description=payload.get("custom_description"),
        )
        return jsonify(
            {
                "amount": quote.amount,
                "allowed": quote.check.allowed,
                "message": quote.check.message,
                "is_work_day": is_work_day,
            }
        )

    @app.route("/api/allowances", methods=["POST"], endpoint="api_allowance_save")
    @login_required
    @json_errors
    def api_allowance_save():
        payload = request.get_json(silent=True) or {}
        raw_dates = payload.get("dates") or ([payload["date"]] if payload.get("date") else [])
        if not isinstance(raw_dates, list):
            raise ValidationError("日付の形式が不正です")

        saved = service.record(
            user_id=str(session["user_id"]),
            work_dates=[_parse_date(d) for d in raw_dates],
            activity_id=payload.get("activity_id") or "",
            destination_id=payload.get("destination_id") or DEFAULT_DESTINATION_ID,
            is_driving=_flag(payload, "is_driving"),
            is_accommodation=_flag(payload, "is_accommodation"),
            is_half_day=_flag(payload, "is_half_day"),
            destination_detail=payload.get("destination_detail") or "",
            competition_name=payload.get("competition_name") or "",
            custom_amount=payload.get("custom_amount"),
            custom_description=payload.get("custom_description"),
        )
        return jsonify({"entries": [_entry_json(e) for e in saved]}), 201

    @app.route("/api/allowances/<work_date>", methods=["DELETE"], endpoint="api_allowance_delete")
    @login_required
    @json_errors
    def api_allowance_delete(work_date: str):
        service.remove(user_id=str(session["user_id"]), work_date=_parse_date(work_date))
        return jsonify({"deleted": work_date})

    @app.route("/api/allowances/monthly", methods=["GET"], endpoint="api_allowance_monthly")
    @login_required
    @json_errors
    def api_allowance_monthly():
        today = date.today()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            raise ValidationError("年月が不正です") from None

        summary = service.monthly_summary(user_id=str(session["user_id"]), year=year, month=month)
        return jsonify(
            {
                "year": summary.year,
                "month": summary.month,
                "count": summary.count,
                "total_amount": summary.total_amount,
                "entries": [_entry_json(e) for e in summary.entries],
            }
        )

    @app.route("/api/allowance-types", methods=["GET"], endpoint="api_allowance_types")
    @json_errors
    def api_allowance_types():
        return jsonify(
            [
                {
                    "code": t.code,
                    "display_name": t.display_name,
                    "base_amount": t.base_amount,
                    "requires_holiday": t.requires_holiday,
                }
                for t in service.list_master()
            ]
        )

    @app.route("/api/allowance-types/<code>", methods=["POST"], endpoint="api_allowance_type_update")
    @login_required
    @json_errors
    def api_allowance_type_update(code: str):
        payload = request.get_json(silent=True) or {}
        amount = service.update_master_amount(
            current_role=current_role(), code=code, base_amount=payload.get("base_amount")
        )
        return jsonify({"code": code, "base_amount": amount})
