from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role


def render_forbidden():
    current_user = {"full_name": session.get("name"), "role": session.get("role")}
    return render_template("403.html", current_user=current_user), 403


def role_required(role: Optional[Role] = None):
    """Require a logged-in session, and the given role when one is passed."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                flash("Please log in to continue.", "warning")
                return redirect(url_for("login"))

            if role is not None and session.get("role") != role.value:
                return render_forbidden()

            return view(*args, **kwargs)

        return wrapper

    return decorator


login_required = role_required()
