import datetime as dt
import logging
from typing import Optional

import streamlit as st

from domain.constants import PROFILE_LOAD_FAILED, PROFILE_PLACEHOLDER
from domain.models import ProfileInfo
from services.api import ApiError

logger = logging.getLogger(__name__)

ANCHORS = ("userFullName", "userCreatedAt", "userEmail")


def format_created_at(value) -> str:
    """ISO timestamp -> local date (MM/DD/YYYY); unparseable values pass through."""
    if not value:
        return PROFILE_PLACEHOLDER
    try:
        stamp = dt.datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone()
    return stamp.strftime("%m/%d/%Y")


class ProfileCard:
    def __init__(self, ctx, scope):
        self.ctx = ctx
        self.scope = scope
        self.info: Optional[ProfileInfo] = None
        self.failed = False

    def load(self):
        try:
            data = self.ctx.api.get_user_profile_info()
            if not isinstance(data, dict):
                raise ApiError("Unexpected profile response.")
            self.info = ProfileInfo(
                full_name=f"{data.get('firstName', '')} {data.get('lastName', '')}".strip(),
                created_at=format_created_at(data.get("createdAt")),
                email=data.get("email") or PROFILE_PLACEHOLDER,
            )
        except ApiError as e:
            logger.error(f"Couldn't fetch user profile: {e}")
            self.failed = True
            self.info = ProfileInfo(PROFILE_LOAD_FAILED, PROFILE_PLACEHOLDER, PROFILE_PLACEHOLDER)
        self._fill_markup()

    def _fill_markup(self):
        for element_id, text in zip(ANCHORS, (self.info.full_name, self.info.created_at, self.info.email)):
            el = self.ctx.root.get_element_by_id(element_id)
            if el is not None:
                el.string = text

    def render(self):
        if self.failed and st.button("Retry", key=f"{self.scope.key}_retry"):
            self.failed = False
            self.load()
            st.rerun()


def init(ctx, scope):
    if any(ctx.root.get_element_by_id(a) is None for a in ANCHORS):
        return
    card = scope.mount(ProfileCard(ctx, scope))
    card.load()
