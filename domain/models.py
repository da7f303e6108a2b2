from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from utils.ids import create_id_with_prefix


@dataclass
class FetchResponse:
    """Result of fetching a view fragment or stylesheet."""
    ok: bool
    status: int
    text: str = ""


@dataclass
class LinkElement:
    id: str
    rel: str
    href: Optional[str] = None


@dataclass
class TodoItem:
    title: str
    completed: bool = False
    # widget identity only, never sent anywhere
    key: str = field(default_factory=lambda: create_id_with_prefix('todo'))


@dataclass
class FormModel:
    """Field names of one form plus a generation counter.

    Widget keys embed the generation, so `reset()` hands the next render a
    fresh set of empty inputs.
    """
    form_id: str
    fields: Tuple[str, ...]
    generation: int = 0

    def key(self, scope_key: str, name: str) -> str:
        return f"{scope_key}_{self.form_id}_{self.generation}_{name}"

    def reset(self):
        self.generation += 1


@dataclass
class FormFeedback:
    """Visible state around a form: message line, submit control, spinner."""
    message: str = ""
    color: Optional[str] = None
    hidden: bool = True
    submit_disabled: bool = False
    spinner_visible: bool = False
    field_errors: Dict[str, str] = field(default_factory=dict)

    def clear(self):
        self.message = ""
        self.color = None
        self.hidden = True
        self.field_errors = {}

    def show(self, message: str, color: Optional[str] = None):
        self.message = message
        self.color = color
        self.hidden = False

    def begin(self):
        self.submit_disabled = True
        self.spinner_visible = True

    def end(self):
        self.submit_disabled = False
        self.spinner_visible = False


@dataclass
class ProfileInfo:
    full_name: str
    created_at: str
    email: str
