"""Decide which discovered content files are published.

A page is withheld when it is a draft (and drafts are not allowed), when it
carries an excluded tag, or when its path starts with an excluded prefix.
Tag comparisons are case-insensitive and ignore surrounding whitespace.
"""

from __future__ import annotations

import logging
import typing as typ

from linkwise.config import FilterOptions

if typ.TYPE_CHECKING:
    from linkwise.content import ContentFile

logger = logging.getLogger(__name__)


def _normalize_tag(tag: object) -> str:
    return tag.strip().lower() if isinstance(tag, str) else ""


def _is_draft(frontmatter: typ.Mapping[str, typ.Any]) -> bool:
    draft = frontmatter.get("draft")
    return draft is True or draft == "true"


class ContentFilter:
    """Publish filter driven by :class:`~linkwise.config.FilterOptions`."""

    def __init__(self, options: FilterOptions | None = None) -> None:
        self.options = options or FilterOptions()
        self._excluded_tags = {_normalize_tag(tag) for tag in self.options.exclude_tags}

    def should_publish(self, content: ContentFile) -> bool:
        """Return whether ``content`` belongs in the published site."""
        frontmatter = content.frontmatter
        if _is_draft(frontmatter) and not self.options.allow_drafts:
            logger.debug("Skipping draft %s", content.file_path)
            return False

        if any(_normalize_tag(tag) in self._excluded_tags for tag in content.tags):
            logger.debug("Skipping %s with an excluded tag", content.file_path)
            return False

        normalized_path = content.file_path.replace("\\", "/")
        if normalized_path.startswith(tuple(self.options.exclude_path_prefixes)):
            logger.debug("Skipping %s under an excluded prefix", content.file_path)
            return False

        return True

    def select(self, files: typ.Iterable[ContentFile]) -> list[ContentFile]:
        """Return the publishable subset of ``files`` preserving order."""
        return [content for content in files if self.should_publish(content)]


__all__ = ["ContentFilter"]
