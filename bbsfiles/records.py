"""Records describing an article that belongs to a user."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class UserArticleRecord:
    """An article of a user: the board it is on, its title, owner and id."""

    board_id: str = ""
    title: str = ""
    owner: str = ""
    article_id: str = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> UserArticleRecord:
        """Build a record from a mapping; missing keys become empty strings."""
        return cls(
            board_id=mapping.get("board_id", ""),
            title=mapping.get("title", ""),
            owner=mapping.get("owner", ""),
            article_id=mapping.get("article_id", ""),
        )