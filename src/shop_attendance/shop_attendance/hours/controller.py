from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date
from ..common.web import role_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .service import REPORT_CSV_FIELDS, default_range


def register(app: Flask, container: Container) -> None:
    admin_required = role_required(Role.ADMIN)

    def _requested_range() -> tuple[date, date]:
        start_s = request.args.get("from")
        end_s = request.args.get("to")
        if not start_s or not end_s:
            return default_range(container.clock().date(), days=container.report_days)
        try:
            return parse_iso_date(start_s), parse_iso_date(end_s)
        except ValueError:
            raise ValidationError("Dates must use the YYYY-MM-DD format") from None

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        try:
            start, end = _requested_range()
            data = container.report_service.build_report(start=start, end=end)
        except ValidationError as e:
            flash(str(e), "warning")
            start, end = default_range(container.clock().date(), days=container.report_days)
            data = container.report_service.build_report(start=start, end=end)

        return render_template(
            "admin_dashboard.html",
            attendance=data.attendance,
            jobs=data.jobs,
            totals=data.totals,
            start=start.strftime("%Y-%m-%d"),
            end=end.strftime("%Y-%m-%d"),
        )

    @app.route("/admin/report.csv", endpoint="admin_report_csv")
    @admin_required
    def admin_report_csv():
        try:
            start, end = _requested_range()
            data = container.report_service.build_report(start=start, end=end)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_dashboard"))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS)
        writer.writeheader()
        for row in data.csv_rows():
            writer.writerow(row)

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
