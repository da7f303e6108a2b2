import logging

import streamlit as st

from domain.constants import (
    ERROR_COLOR, LOGIN_FAILED_PREFIX, LOGIN_REDIRECT_DELAY, LOGIN_SUCCESS, SUCCESS_COLOR,
)
from domain.models import FormFeedback, FormModel
from services.api import ApiError
from services.validation import FieldConstraint, check_validity
from ui.components import Field, render_feedback, render_form

logger = logging.getLogger(__name__)

FORM_ID = "loginForm"

FIELDS = [
    Field("email", "Email", kind="email", placeholder="user@domain.com"),
    Field("password", "Password", kind="password"),
]

CONSTRAINTS = [
    FieldConstraint("email", kind="email", required_message="Email is a required field."),
    FieldConstraint("password", required_message="Password is a required field."),
]


class LoginForm:
    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.form = FormModel(FORM_ID, tuple(f.name for f in FIELDS))
        self.feedback = FormFeedback()

    def submit(self, values) -> bool:
        self.feedback.clear()
        data = {
            "email": (values.get("email") or "").strip(),
            "password": (values.get("password") or "").strip(),
        }

        errors = check_validity(data, CONSTRAINTS)
        if errors:
            self.feedback.field_errors = errors
            return False

        self.feedback.begin()
        try:
            response = self.ctx.api.login_user(data["email"], data["password"])
            token = response.get("token") if isinstance(response, dict) else None
            if not token:
                raise ApiError("The server did not return a session token.")
            self.ctx.storage.set(token)

            self.feedback.show(LOGIN_SUCCESS, SUCCESS_COLOR)
            self.form.reset()
            self.scope.defer(LOGIN_REDIRECT_DELAY, lambda: self.ctx.navigate("#/board"))
            return True
        except ApiError as e:
            logger.warning(f"Login failed: {e}")
            self.feedback.show(f"{LOGIN_FAILED_PREFIX}{e}", ERROR_COLOR)
            return False
        finally:
            self.feedback.end()

    def render(self):
        submission = render_form(
            self.form, FIELDS, self.scope.key,
            buttons=[("Log in", "submit")],
            disabled=self.feedback.submit_disabled,
            errors=self.feedback.field_errors,
        )
        render_feedback(self.feedback)
        if submission:
            with st.spinner("Logging in..."):
                self.submit(submission.values)
            st.rerun()


def init(ctx, scope):
    if ctx.root.get_element_by_id(FORM_ID) is None:
        return
    scope.mount(LoginForm(ctx, scope))
