import logging

import streamlit as st

from domain.constants import ERROR_COLOR, LIST_CREATE_FAILED_PREFIX
from domain.models import FormFeedback, FormModel
from services.api import ApiError
from ui.components import Field, render_feedback, render_form

logger = logging.getLogger(__name__)

MODAL_ID = "create-list-modal"
LIST_ID = "dynamic-ul"

FIELDS = [
    Field("name", "List name"),
    Field("description", "Description"),
]


class CreateListModal:
    """The "create list" dialog; new lists are linked from the sidebar list in the markup."""

    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.form = FormModel("create-list-form", ("name", "description"))
        self.feedback = FormFeedback()

    @property
    def is_open(self) -> bool:
        modal = self.ctx.root.get_element_by_id(MODAL_ID)
        return modal is not None and "hidden" not in modal.get("class", [])

    def _set_hidden(self, hidden: bool):
        modal = self.ctx.root.get_element_by_id(MODAL_ID)
        classes = [c for c in modal.get("class", []) if c != "hidden"]
        if hidden:
            classes.append("hidden")
        modal["class"] = classes

    def open(self):
        self._set_hidden(False)

    def close(self):
        self._set_hidden(True)
        self.feedback.clear()

    def submit(self, values) -> bool:
        self.feedback.clear()
        name = (values.get("name") or "").strip()
        description = (values.get("description") or "").strip()
        if not name:
            self.feedback.field_errors = {"name": "Please fill out this field."}
            return False

        self.feedback.begin()
        try:
            created = self.ctx.api.create_list(name, description)
        except ApiError as e:
            logger.warning(f"Error creating list: {e}")
            self.feedback.show(f"{LIST_CREATE_FAILED_PREFIX}{e}", ERROR_COLOR)
            return False
        finally:
            self.feedback.end()

        if not isinstance(created, dict):
            created = {}
        self._append_link(created.get("_id") or created.get("id"), created.get("name") or name)
        self.form.reset()
        self.close()
        return True

    def _append_link(self, list_id, label):
        if not list_id:
            logger.warning(f"Created list '{label}' came back without an id; not linking it")
            return
        ul = self.ctx.root.get_element_by_id(LIST_ID)
        li = self.ctx.root.new_tag("li")
        a = self.ctx.root.new_tag("a", {"href": f"#/lists/{list_id}"})
        a.string = label
        li.append(a)
        ul.append(li)

    def render(self):
        if not self.is_open:
            if st.button("＋ New list", key=f"{self.scope.key}_open"):
                self.open()
                st.rerun()
            return

        submission = render_form(
            self.form, FIELDS, self.scope.key,
            buttons=[("Create", "create")],
            disabled=self.feedback.submit_disabled,
            errors=self.feedback.field_errors,
        )
        render_feedback(self.feedback)
        if st.button("Close", key=f"{self.scope.key}_close"):
            self.close()
            st.rerun()
        if submission:
            with st.spinner("Creating list..."):
                self.submit(submission.values)
            st.rerun()


def init(ctx, scope):
    if ctx.root.get_element_by_id(MODAL_ID) is None or ctx.root.get_element_by_id(LIST_ID) is None:
        return
    scope.mount(CreateListModal(ctx, scope))
