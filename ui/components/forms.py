import streamlit as st
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from domain.models import FormModel


@dataclass(frozen=True)
class Field:
    name: str
    label: str
    kind: str = "text"  # text | password | email | number
    placeholder: str = ""


@dataclass
class Submission:
    marker: str
    values: Dict[str, str]


def read_values(form: FormModel, scope_key: str) -> Dict[str, str]:
    return {name: st.session_state.get(form.key(scope_key, name), "") or "" for name in form.fields}


def render_form(form: FormModel, fields: Sequence[Field], scope_key: str,
                buttons: Sequence[Tuple[str, str]] = (("Submit", "submit"),),
                disabled: bool = False,
                errors: Optional[Dict[str, str]] = None) -> Optional[Submission]:
    """
    Renders the widgets of one form and reports which submit button fired.

    Args:
        form (FormModel): Field names and reset generation of the form.
        fields (Sequence[Field]): The inputs to draw, in order.
        scope_key (str): Key of the owning view scope; keeps widgets of
            different view activations apart.
        buttons: (label, marker) pairs, one submit control each.
        disabled (bool): Whether the submit controls are disabled.
        errors: Field name -> validation message shown under the input.

    Returns:
        Submission: Marker of the pressed button and the field values, or
        None if nothing was submitted.
    """
    pressed = None
    with st.form(f"{scope_key}_{form.form_id}_{form.generation}"):
        for f in fields:
            st.text_input(
                f.label,
                key=form.key(scope_key, f.name),
                type="password" if f.kind == "password" else "default",
                placeholder=f.placeholder,
            )
            if errors and f.name in errors:
                st.caption(f":red[{errors[f.name]}]")
        for label, marker in buttons:
            if st.form_submit_button(label, disabled=disabled):
                pressed = marker

    if pressed is None:
        return None
    return Submission(marker=pressed, values=read_values(form, scope_key))
