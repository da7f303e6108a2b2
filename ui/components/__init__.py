"""
This package provides the reusable UI components of the Streamlit shell.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection, root markup rendering, in-app link buttons and form feedback messages.
- `forms`: Keyed text-input forms with one or more submit controls.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    inject_view_css,
    render_markup,
    render_feedback,
    render_view_links,
    escape_markdown,
)

from .forms import (
    Field,
    Submission,
    render_form,
    read_values,
)
