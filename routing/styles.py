from domain.constants import VIEW_CSS_ID
from domain.models import LinkElement


class StyleSwapper:
    """Keeps a single managed view stylesheet in the document head."""

    def __init__(self, document):
        self.document = document

    def set_view_stylesheet(self, href: str) -> LinkElement:
        link = self.document.get_element_by_id(VIEW_CSS_ID)
        if link is None:
            link = LinkElement(id=VIEW_CSS_ID, rel="stylesheet")
            self.document.append_to_head(link)
        link.href = href
        return link
