"""Password recovery: request a reset email, or set a new password from an emailed link.

The flow has two states. Without a `token` query parameter the user is on
step 1 (request email); with one, step 3 (set new password). The state is
chosen once when the view starts and never moves back within the same load.
"""
import enum
import logging
from typing import Optional

import streamlit as st

from domain.constants import (
    ERROR_COLOR, GENERIC_FAILURE, PASSWORDS_DO_NOT_MATCH, RECOVERY_EMAIL_REQUIRED,
    RECOVERY_EMAIL_SENT, RESET_REDIRECT_DELAY, RESET_SUCCESS, RESET_WEAK_PASSWORD,
    SUCCESS_COLOR,
)
from domain.models import FormFeedback, FormModel
from services.api import ApiError
from services.validation import ValidationError, is_strong_password
from ui.components import Field, render_feedback, render_form

logger = logging.getLogger(__name__)


class RecoveryStep(enum.Enum):
    REQUEST_EMAIL = "1"
    SET_NEW_PASSWORD = "3"


STEP_SELECTORS = {
    RecoveryStep.REQUEST_EMAIL: ".step-1",
    RecoveryStep.SET_NEW_PASSWORD: ".step-3",
}

STEP_FIELDS = {
    RecoveryStep.REQUEST_EMAIL: [Field("email", "Email", kind="email", placeholder="user@domain.com")],
    RecoveryStep.SET_NEW_PASSWORD: [
        Field("newPassword", "New password", kind="password"),
        Field("confirmPassword", "Confirm new password", kind="password"),
    ],
}

STEP_BUTTONS = {
    RecoveryStep.REQUEST_EMAIL: ("Send recovery email", RecoveryStep.REQUEST_EMAIL.value),
    RecoveryStep.SET_NEW_PASSWORD: ("Reset password", RecoveryStep.SET_NEW_PASSWORD.value),
}

FORM_ID = "recoveryForm"


class PasswordRecoveryFlow:
    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.form = FormModel(FORM_ID, ("email", "newPassword", "confirmPassword"))
        self.feedback = FormFeedback()
        self.token: str = ""
        self.step = RecoveryStep.REQUEST_EMAIL

    def start(self):
        """Read the token once and activate the matching step."""
        self.token = self.ctx.location.query_param("token") or ""
        token_input = self.ctx.root.get_element_by_id("token")
        if token_input is not None:
            token_input["value"] = self.token

        self.step = RecoveryStep.SET_NEW_PASSWORD if self.token else RecoveryStep.REQUEST_EMAIL
        for step, selector in STEP_SELECTORS.items():
            el = self.ctx.root.select_one(selector)
            if el is None:
                continue
            classes = [c for c in el.get("class", []) if c != "active"]
            if step is self.step:
                classes.append("active")
            el["class"] = classes
        logger.debug(f"Password recovery started at step {self.step.value}")

    def submit(self, marker: Optional[str], values) -> bool:
        """Handle a submit from the button carrying step marker `marker`."""
        self.feedback.clear()
        self.feedback.begin()
        try:
            if marker == RecoveryStep.REQUEST_EMAIL.value:
                return self._request_email(values)
            if marker == RecoveryStep.SET_NEW_PASSWORD.value:
                return self._set_new_password(values)
            return False
        except (ValidationError, ApiError) as e:
            self.feedback.show(str(e) or GENERIC_FAILURE, ERROR_COLOR)
            return False
        finally:
            self.feedback.end()

    def _request_email(self, values) -> bool:
        email = (values.get("email") or "").strip()
        if not email:
            raise ValidationError(RECOVERY_EMAIL_REQUIRED)
        self.ctx.api.send_recovery_email(email)
        self.feedback.show(RECOVERY_EMAIL_SENT, SUCCESS_COLOR)
        self.form.reset()
        return True

    def _set_new_password(self, values) -> bool:
        new_password = (values.get("newPassword") or "").strip()
        confirm_password = (values.get("confirmPassword") or "").strip()
        if new_password != confirm_password:
            raise ValidationError(PASSWORDS_DO_NOT_MATCH)
        if not is_strong_password(new_password):
            raise ValidationError(RESET_WEAK_PASSWORD)

        self.ctx.api.reset_password(self.token, new_password, confirm_password)
        self.feedback.show(RESET_SUCCESS, SUCCESS_COLOR)
        self.scope.defer(RESET_REDIRECT_DELAY, lambda: self.ctx.navigate("#/login"))
        return True

    def render(self):
        submission = render_form(
            self.form, STEP_FIELDS[self.step], self.scope.key,
            buttons=[STEP_BUTTONS[self.step]],
            disabled=self.feedback.submit_disabled,
        )
        render_feedback(self.feedback)
        if submission:
            with st.spinner("Please wait..."):
                self.submit(submission.marker, submission.values)
            st.rerun()


def init(ctx, scope):
    if ctx.root.get_element_by_id(FORM_ID) is None:
        return
    flow = scope.mount(PasswordRecoveryFlow(ctx, scope))
    flow.start()
