from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, send_from_directory, session, url_for

from ..common.web import login_required, role_required
from ..container import Container
from ..core.enums import AttendanceOutcome, Role
from ..core.exceptions import ValidationError
from .model import state_of

OUTCOME_MESSAGES = {
    AttendanceOutcome.CHECKED_IN: ("Check-in recorded.", "success"),
    AttendanceOutcome.CHECKED_OUT: ("Check-out recorded.", "success"),
    AttendanceOutcome.ALREADY_CHECKED_IN: ("You already checked in today.", "info"),
    AttendanceOutcome.ALREADY_CHECKED_OUT: ("You already checked out today.", "info"),
    AttendanceOutcome.NOT_CHECKED_IN: ("You have to check in before checking out.", "warning"),
}

STORED_OUTCOMES = (AttendanceOutcome.CHECKED_IN, AttendanceOutcome.CHECKED_OUT)


def register(app: Flask, container: Container) -> None:
    mechanic_required = role_required(Role.MECHANIC)

    def _photo_or_none():
        upload = request.files.get("photo")
        if upload is None or not upload.filename:
            return None
        return upload

    def _record_with_photo(action, label: str):
        upload = _photo_or_none()
        if upload is None:
            return "Photo is required", 400

        photo_ref = None
        outcome = None
        try:
            photo_ref = container.photo_storage.save(upload)
            outcome = action(int(session["user_id"]), photo_ref=photo_ref)
            flash(*OUTCOME_MESSAGES[outcome])
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("%s failed for user %s", label, session.get("user_id"))
            flash(f"System error during {label}", "danger")
        finally:
            # no-op and failed requests keep no photo on disk
            if photo_ref and outcome not in STORED_OUTCOMES:
                container.photo_storage.discard(photo_ref)
        return redirect(url_for("mechanic_dashboard"))

    @app.route("/mechanic", endpoint="mechanic_dashboard")
    @mechanic_required
    def mechanic_dashboard():
        user_id = int(session["user_id"])
        now = container.clock()
        today = now.date()
        record = container.attendance_service.current_record(user_id, now=now)
        jobs = container.job_service.list_for_day(user_id, today)
        return render_template(
            "mechanic_dashboard.html",
            attendance=record,
            state=state_of(record),
            jobs=jobs,
            shift=container.policy.rule_for_day(record.work_date if record else today),
            today=today.strftime("%Y-%m-%d"),
        )

    @app.route("/mechanic/check-in", methods=["POST"], endpoint="check_in")
    @mechanic_required
    def check_in():
        return _record_with_photo(container.attendance_service.check_in, "check-in")

    @app.route("/mechanic/check-out", methods=["POST"], endpoint="check_out")
    @mechanic_required
    def check_out():
        return _record_with_photo(container.attendance_service.check_out, "check-out")

    @app.route("/uploads/<path:name>", endpoint="uploaded_photo")
    @login_required
    def uploaded_photo(name: str):
        if not container.photo_storage.directory.exists():
            abort(404)
        return send_from_directory(container.photo_storage.directory, name)
