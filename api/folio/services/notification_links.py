"""Known notification link shapes per content kind.

Notification links are plain relative URLs, so finding the notifications that
point at a removed document means rebuilding the URLs the site would have
generated for it. New content kinds register their shapes here.
"""

from __future__ import annotations

from typing import Iterable, Mapping

ID_PLACEHOLDER = "{id}"

DEFAULT_LINK_TEMPLATES: dict[str, tuple[str, ...]] = {
    "courses": ("/courses/view?id={id}", "/courses/{id}", "/learning/view?id={id}"),
    "events": ("/events?id={id}", "/events/{id}"),
    "posts": ("/blog/view?id={id}", "/blog/{id}"),
    "projects": ("/projects?id={id}",),
    "tools": ("/tools?id={id}",),
    "products": ("/shop?id={id}",),
}


class LinkTemplateRegistry:
    """Maps a content kind to the URL templates that can reference its items."""

    def __init__(self, templates: Mapping[str, Iterable[str]] | None = None) -> None:
        self._templates: dict[str, list[str]] = {}
        for kind, values in (templates or {}).items():
            for template in values:
                self.register(kind, template)

    def register(self, kind: str, template: str) -> None:
        if ID_PLACEHOLDER not in template:
            raise ValueError(f"Link template for {kind!r} must contain {ID_PLACEHOLDER}")
        bucket = self._templates.setdefault(kind, [])
        if template not in bucket:
            bucket.append(template)

    def kinds(self) -> list[str]:
        return list(self._templates)

    def templates_for(self, kind: str) -> tuple[str, ...]:
        return tuple(self._templates.get(kind, ()))

    def candidate_links(self, kind: str, item_id: str) -> list[str]:
        """Render every template for ``kind`` with ``item_id``, keeping order."""
        links: list[str] = []
        for template in self._templates.get(kind, ()):
            link = template.replace(ID_PLACEHOLDER, item_id)
            if link not in links:
                links.append(link)
        return links


link_templates = LinkTemplateRegistry(DEFAULT_LINK_TEMPLATES)


def register_link_template(kind: str, template: str) -> None:
    link_templates.register(kind, template)


def candidate_links(kind: str, item_id: str) -> list[str]:
    return link_templates.candidate_links(kind, item_id)
