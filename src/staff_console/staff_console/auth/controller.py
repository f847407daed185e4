from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.web import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=7)
        session["user"] = s_user.username
        session["role"] = s_user.role
        return jsonify({"success": True, "user": s_user.username})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})
