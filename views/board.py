import logging
from typing import List

import streamlit as st

from domain.models import FormModel, TodoItem
from ui.components import Field, escape_markdown, render_form

logger = logging.getLogger(__name__)

ANCHORS = ("todoForm", "newTodo", "todoList")


class TaskBoard:
    """In-memory todo list; newest first, gone when the view is swapped out."""

    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.form = FormModel("todoForm", ("newTodo",))
        self.items: List[TodoItem] = []

    def add(self, title: str):
        title = (title or "").strip()
        if not title:
            return None
        item = TodoItem(title=title)
        self.items.insert(0, item)
        self.form.reset()
        return item

    def remove(self, item: TodoItem):
        self.items = [i for i in self.items if i is not item]

    def toggle(self, item: TodoItem, checked: bool):
        item.completed = bool(checked)

    def dispose(self):
        self.items = []

    def render(self):
        submission = render_form(
            self.form, [Field("newTodo", "New task", placeholder="What needs doing?")],
            self.scope.key, buttons=[("Add", "add")],
        )
        if submission:
            self.add(submission.values.get("newTodo", ""))
            st.rerun()

        if not self.items:
            st.caption("No tasks yet.")
        for item in list(self.items):
            col_check, col_remove = st.columns([6, 1])
            with col_check:
                title = escape_markdown(item.title)
                label = f"~~{title}~~" if item.completed else title
                checked = st.checkbox(label, value=item.completed, key=f"{item.key}_check")
                if checked != item.completed:
                    self.toggle(item, checked)
                    st.rerun()
            with col_remove:
                if st.button("Remove", key=f"{item.key}_remove"):
                    self.remove(item)
                    st.rerun()


def init(ctx, scope):
    if any(ctx.root.get_element_by_id(a) is None for a in ANCHORS):
        return
    scope.mount(TaskBoard(ctx, scope))
