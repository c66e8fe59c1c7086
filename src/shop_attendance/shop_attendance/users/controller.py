from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError


def home_endpoint_for(role: str | None) -> str:
    return "admin_dashboard" if role == Role.ADMIN.value else "mechanic_dashboard"


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        if "user_id" not in session:
            return redirect(url_for("login"))
        return redirect(url_for(home_endpoint_for(session.get("role"))))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for(home_endpoint_for(session.get("role"))))

        error = None
        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                s_user = container.auth_service.authenticate(username, password)

                session.clear()
                session["user_id"] = s_user.user_id
                session["name"] = s_user.full_name
                session["role"] = s_user.role.value

                return redirect(url_for(home_endpoint_for(s_user.role.value)))
            except AuthenticationError as e:
                error = str(e)
            except Exception:
                app.logger.exception("login failed for %r", username)
                error = "System error while logging in"

        return render_template("login.html", error=error)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
