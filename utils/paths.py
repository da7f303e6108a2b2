import os
from typing import Optional


def resolve_asset_dir(override: Optional[str] = None) -> str:
    """Resolve the view/style asset directory across local dev and container layouts.

    Strategy:
    1. An explicit override (LUMO_ASSET_DIR) wins when it exists.
    2. Try project-root relative (assets/) based on this file location.
    3. Try cwd + assets/ (in case working dir is project root).
    4. Try /mount/src/assets (Streamlit ephemeral container pattern).
    Returns the first existing directory, else the project-root candidate.
    """
    candidates = []
    if override:
        candidates.append(os.path.abspath(override))
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    candidates.append(os.path.join(base_dir, 'assets'))
    candidates.append(os.path.join(os.getcwd(), 'assets'))
    candidates.append('/mount/src/assets')
    for p in candidates:
        if os.path.isdir(p):
            return p
    return os.path.join(base_dir, 'assets')
