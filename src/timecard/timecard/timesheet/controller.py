from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.timeutils import format_minutes
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..core.exceptions import RecordNotFoundError, ValidationError
from ..export.csv_export import build_summary_csv, csv_filename
from ..records.service import summarize
from .session import EditSession, FormFields

logger = logging.getLogger(__name__)

SESSION_KEY = "timecard"
FILTER_KEY = "employee_filter"


def register(app: Flask, container: Container) -> None:
    app.jinja_env.filters["hm"] = format_minutes
    roster = container.roster

    def _default_fields() -> FormFields:
        first = roster.first()
        return FormFields(employee_id=first.id if first else "", date=date.today().isoformat())

    def _load_edit() -> EditSession:
        edit = EditSession.from_mapping(session.get(SESSION_KEY), defaults=_default_fields())
        if not edit.month:
            edit.month = date.today().strftime("%Y-%m")
        return edit

    def _store_edit(edit: EditSession) -> None:
        session[SESSION_KEY] = edit.to_mapping()

    def _employee_filter() -> str:
        return session.get(FILTER_KEY) or ALL_EMPLOYEES

    def _fields_from_form() -> FormFields:
        f = request.form
        return FormFields(
            employee_id=f.get("employee_id", ""),
            date=f.get("date", ""),
            start=f.get("start", ""),
            end=f.get("end", ""),
            break_hours=f.get("break_hours", ""),
            overtime=f.get("overtime", ""),
        )

    @app.route("/", methods=["GET"], endpoint="timecard")
    def timecard():
        edit = _load_edit()
        if "month" in request.args:
            edit.month = request.args.get("month", "").strip()
        if "employee" in request.args:
            session[FILTER_KEY] = request.args.get("employee") or ALL_EMPLOYEES
        _store_edit(edit)

        employee_filter = _employee_filter()
        try:
            records = container.query_service.get_records_by_month(edit.month, employee_filter)
            summary = container.query_service.get_monthly_summary(edit.month, employee_filter)
        except Exception:
            logger.exception("Failed to load records for %s", edit.month)
            flash("記録の読み込み中にシステムエラーが発生しました。", "danger")
            records, summary = [], []

        return render_template(
            "timecard.html",
            edit=edit,
            roster=roster,
            all_employees=ALL_EMPLOYEES,
            employee_filter=employee_filter,
            rows=list(zip(records, summary)),
            summary=summary,
            totals=summarize(summary),
            summary_title=container.query_service.summary_title(employee_filter),
        )

    @app.route("/records", methods=["POST"], endpoint="save_record")
    def save_record():
        edit = _load_edit()
        fields = _fields_from_form()
        try:
            result = container.form_service.commit(edit, fields)
            flash("レコードを追加しました。" if result.created else "レコードを更新しました。", "success")
        except ValidationError as e:
            # Mode is unchanged; keep what the user typed.
            edit.fields = fields
            flash(str(e), "warning")
        except Exception:
            logger.exception("Failed to save record")
            flash("保存中にシステムエラーが発生しました。", "danger")
        _store_edit(edit)
        return redirect(url_for("timecard"))

    @app.route("/records/<record_id>/edit", methods=["POST"], endpoint="edit_record")
    def edit_record(record_id: str):
        edit = _load_edit()
        try:
            edit.select(container.form_service.find(record_id))
            flash("編集モードです。", "info")
        except RecordNotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Failed to open record %s", record_id)
            flash("記録を開く際にシステムエラーが発生しました。", "danger")
        _store_edit(edit)
        return redirect(url_for("timecard"))

    @app.route("/records/<record_id>/delete", methods=["POST"], endpoint="delete_record")
    def delete_record(record_id: str):
        edit = _load_edit()
        try:
            if container.form_service.delete(edit, record_id):
                flash("削除しました。", "success")
            else:
                flash("レコードが見つかりません。", "warning")
        except Exception:
            logger.exception("Failed to delete record %s", record_id)
            flash("削除中にシステムエラーが発生しました。", "danger")
        _store_edit(edit)
        return redirect(url_for("timecard"))

    @app.route("/form/reset", methods=["POST"], endpoint="reset_form")
    def reset_form():
        edit = _load_edit()
        edit.reset()
        _store_edit(edit)
        return redirect(url_for("timecard"))

    @app.route("/summary.csv", methods=["GET"], endpoint="summary_csv")
    def summary_csv():
        edit = _load_edit()
        try:
            summary = container.query_service.get_monthly_summary(edit.month, _employee_filter())
        except Exception:
            logger.exception("Failed to export %s", edit.month)
            flash("CSV出力中にシステムエラーが発生しました。", "danger")
            return redirect(url_for("timecard"))
        if not summary:
            flash("出力するデータがありません。", "warning")
            return redirect(url_for("timecard"))

        return app.response_class(
            build_summary_csv(summary),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={csv_filename(edit.month)}"},
        )
