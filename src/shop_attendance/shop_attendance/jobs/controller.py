from __future__ import annotations

from flask import Flask, flash, redirect, request, session, url_for

from ..common.web import role_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/mechanic/jobs", methods=["POST"], endpoint="record_job")
    @role_required(Role.MECHANIC)
    def record_job():
        try:
            container.job_service.record_job(
                int(session["user_id"]),
                plate=request.form.get("plate"),
                job_type=request.form.get("job_type"),
                description=request.form.get("description"),
            )
            flash("Job recorded.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("recording a job failed for user %s", session.get("user_id"))
            flash("System error while recording the job", "danger")
        return redirect(url_for("mechanic_dashboard"))
