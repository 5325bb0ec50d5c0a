"""Path rules for files inside a BBS home directory."""

from __future__ import annotations

from collections.abc import Iterable


def _initial(identifier: str) -> str:
    if not identifier:
        raise ValueError("identifier must not be empty")
    return identifier[0]


def get_passwds_path(work_directory: str) -> str:
    """Path of the system password file."""
    return f"{work_directory}/.PASSWDS"


def get_board_path(work_directory: str) -> str:
    """Path of the system board file."""
    return f"{work_directory}/.BRD"


def get_user_favorite_path(work_directory: str, user_id: str) -> str:
    """Path of a user's favorites file."""
    return f"{work_directory}/home/{_initial(user_id)}/{user_id}/.fav"


def get_user_mail_path(work_directory: str, user_id: str, filename: str) -> str:
    """Path of a file in a user's home; ``filename`` is not checked."""
    return f"{work_directory}/home/{_initial(user_id)}/{user_id}/{filename}"


def get_login_recent_path(work_directory: str, user_id: str) -> str:
    """Path of a user's recent-logins file."""
    return f"{work_directory}/home/{_initial(user_id)}/{user_id}/logins.recent"


def get_board_articles_directory_path(work_directory: str, board_id: str) -> str:
    """Path of a board's article index file."""
    return f"{work_directory}/boards/{_initial(board_id)}/{board_id}/.DIR"


def get_board_article_file_path(work_directory: str, board_id: str, filename: str) -> str:
    """Path of an article file on a board; ``filename`` is not checked."""
    return f"{work_directory}/boards/{_initial(board_id)}/{board_id}/{filename}"


def _treasure_subpath(path: Iterable[str]) -> str:
    return "/".join([*path, ""])


def get_board_treasures_directory_path(
    work_directory: str, board_id: str, path: Iterable[str]
) -> str:
    """Path of the index file of a treasure (announce) directory.

    ``path`` lists the nested directory names, e.g. ``["D690", "D6C2"]``.
    """
    sub = _treasure_subpath(path)
    return f"{work_directory}/man/boards/{_initial(board_id)}/{board_id}/{sub}.DIR"


def get_board_treasure_file_path(
    work_directory: str, board_id: str, path: Iterable[str], filename: str
) -> str:
    """Path of a file inside a treasure (announce) directory."""
    sub = _treasure_subpath(path)
    return f"{work_directory}/man/boards/{_initial(board_id)}/{board_id}/{sub}{filename}"


def get_board_name_file_path(work_directory: str, board_id: str) -> str:
    """Path of a board's name file."""
    return f"{work_directory}/boards/{_initial(board_id)}/{board_id}/.Name"