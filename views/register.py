import logging

import streamlit as st

from domain.constants import (
    ERROR_COLOR, PASSWORDS_DO_NOT_MATCH, REGISTER_FAILED, REGISTER_REDIRECT_DELAY,
    REGISTER_SUCCESS, SUCCESS_COLOR,
)
from domain.models import FormFeedback, FormModel
from services.api import ApiError
from services.validation import FieldConstraint, ValidationError, check_validity
from ui.components import Field, render_feedback, render_form

logger = logging.getLogger(__name__)

FORM_ID = "registerForm"

FIELDS = [
    Field("firstName", "First name"),
    Field("lastName", "Last name"),
    Field("age", "Age", kind="number"),
    Field("email", "Email", kind="email", placeholder="user@domain.com"),
    Field("password", "Password", kind="password"),
    Field("confirmPassword", "Confirm password", kind="password"),
]

CONSTRAINTS = [
    FieldConstraint("firstName"),
    FieldConstraint("lastName"),
    FieldConstraint("age", kind="number"),
    FieldConstraint("email", kind="email"),
    FieldConstraint("password", strong_password=True),
    FieldConstraint("confirmPassword"),
]


class RegisterForm:
    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.form = FormModel(FORM_ID, tuple(f.name for f in FIELDS))
        self.feedback = FormFeedback()

    def submit(self, values) -> bool:
        """Validate and send the registration; returns True on success."""
        self.feedback.clear()
        data = {name: (values.get(name) or "").strip() for name in self.form.fields}

        errors = check_validity(data, CONSTRAINTS)
        if errors:
            self.feedback.field_errors = errors
            return False

        try:
            if data["password"] != data["confirmPassword"]:
                raise ValidationError(PASSWORDS_DO_NOT_MATCH)

            self.feedback.begin()
            self.ctx.api.register_user(data)

            self.feedback.show(REGISTER_SUCCESS, SUCCESS_COLOR)
            self.form.reset()
            self.scope.defer(REGISTER_REDIRECT_DELAY, lambda: self.ctx.navigate("#/login"))
            return True
        except (ValidationError, ApiError) as e:
            self.feedback.show(str(e) or REGISTER_FAILED, ERROR_COLOR)
            return False
        finally:
            self.feedback.end()

    def render(self):
        submission = render_form(
            self.form, FIELDS, self.scope.key,
            buttons=[("Create account", "submit")],
            disabled=self.feedback.submit_disabled,
            errors=self.feedback.field_errors,
        )
        render_feedback(self.feedback)
        if submission:
            with st.spinner("Creating your account..."):
                self.submit(submission.values)
            st.rerun()


def init(ctx, scope):
    if ctx.root.get_element_by_id(FORM_ID) is None:
        logger.debug("register markup has no form; skipping")
        return
    scope.mount(RegisterForm(ctx, scope))
