"""Reading and writing of a user's favorites (``.fav``) file.

The file starts with a 2-byte version followed by one folder. A folder is
a 4-byte header (board count, line count, folder count) followed by that
many items. Each item is a type byte, an attribute byte and a fixed-size
body. After the items come the contents of every sub-folder, in the order
the folder items appear.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import Optional, Union

from .encoding import big5_cstring_to_str, utf8_to_big5

TIME4T_BYTES = 4
FAV_PRE_ALLOC = 8
BOARD_TITLE_LENGTH = 48
FAV_BOARD_ITEM_SIZE = 12
FAV_FOLDER_ITEM_SIZE = 50
FAV_LINE_ITEM_SIZE = 1
LINE_TITLE = "------------------------------------------"

_MASK32 = 0xFFFFFFFF
_TITLE_FIELD = BOARD_TITLE_LENGTH + 1
_BOARD_STRUCT = struct.Struct("<III")
_FOLDER_HEADER = struct.Struct("<HBB")


class FavError(ValueError):
    """Base error for malformed favorites data."""


class InvalidFavTypeError(FavError):
    """An item carries an unknown type byte."""

    def __init__(self, message: str = "invalid Favorite type") -> None:
        super().__init__(message)


class IndexOutOfBoundError(FavError):
    """The data ends before a structure is complete."""

    def __init__(self, message: str = "index out of range, file format invalid") -> None:
        super().__init__(message)


class FavItemType(IntEnum):
    BOARD = 1
    FOLDER = 2
    LINE = 3


class FavAttr(IntFlag):
    FAV = 0x01
    TAG = 0x02
    UNREAD = 0x04
    ADM_TAG = 0x08


def _epoch() -> datetime:
    return datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class FavBoardItem:
    """A board entry; occupies 12 bytes."""

    board_id: int = 0
    last_visit: datetime = field(default_factory=_epoch)
    attr: int = 0
    board_name: str = ""

    def to_bytes(self) -> bytes:
        visited = int(self.last_visit.timestamp()) & _MASK32
        return _BOARD_STRUCT.pack(self.board_id & _MASK32, visited, self.attr & _MASK32)


@dataclass
class FavFolderItem:
    """A sub-folder entry; occupies 50 bytes."""

    folder_id: int = 0
    title: str = ""
    this_folder: Optional[FavFolder] = None

    def to_bytes(self) -> bytes:
        title = utf8_to_big5(self.title)[:_TITLE_FIELD]
        body = bytes([self.folder_id & 0xFF]) + title
        return body.ljust(FAV_FOLDER_ITEM_SIZE, b"\x00")


@dataclass
class FavLineItem:
    """A separator line entry; occupies 1 byte."""

    line_id: int = 0

    def to_bytes(self) -> bytes:
        return bytes([self.line_id & 0xFF])


FavPayload = Union[FavBoardItem, FavFolderItem, FavLineItem]


@dataclass
class FavItem:
    """One entry in a folder, wrapping a board, folder or line."""

    fav_type: FavItemType
    fav_attr: int = 0
    item: Optional[FavPayload] = None

    def board_id(self) -> str:
        """Name of the board this entry points at, or '' for other entries."""
        if self.fav_type != FavItemType.BOARD or not isinstance(self.item, FavBoardItem):
            return ""
        return self.item.board_name

    def title(self) -> str:
        """Title of a folder, a row of dashes for a line, '' for a board."""
        if self.fav_type == FavItemType.LINE:
            return LINE_TITLE
        if self.fav_type == FavItemType.FOLDER and isinstance(self.item, FavFolderItem):
            return self.item.title
        return ""

    def records(self) -> list[FavItem]:
        """Entries of the folder this entry holds; empty for non-folders."""
        if self.fav_type != FavItemType.FOLDER or not isinstance(self.item, FavFolderItem):
            return []
        if self.item.this_folder is None:
            return []
        return list(self.item.this_folder.items)

    def get_board(self) -> Optional[FavBoardItem]:
        return self.item if isinstance(self.item, FavBoardItem) else None

    def get_folder(self) -> Optional[FavFolderItem]:
        return self.item if isinstance(self.item, FavFolderItem) else None

    def get_line(self) -> Optional[FavLineItem]:
        return self.item if isinstance(self.item, FavLineItem) else None

    def to_bytes(self) -> bytes:
        if self.item is None:
            raise FavError("FavItem.item must be a board, folder or line item")
        return bytes([int(self.fav_type) & 0xFF, self.fav_attr & 0xFF]) + self.item.to_bytes()


@dataclass
class FavFolder:
    """A folder holding boards, lines and sub-folders."""

    n_alloc: int = 0
    data_tail: int = 0
    n_boards: int = 0
    n_lines: int = 0
    n_folders: int = 0
    line_id: int = 0
    folder_id: int = 0
    items: list[FavItem] = field(default_factory=list)

    def data_number(self) -> int:
        """Total number of entries declared by the header."""
        return self.n_boards + self.n_folders + self.n_lines

    def to_bytes(self) -> bytes:
        parts = [_FOLDER_HEADER.pack(self.n_boards, self.n_lines, self.n_folders)]
        parts.extend(item.to_bytes() for item in self.items)
        for item in self.items:
            if isinstance(item.item, FavFolderItem):
                if item.item.this_folder is None:
                    raise FavError("folder item has no folder contents")
                parts.append(item.item.this_folder.to_bytes())
        return b"".join(parts)


@dataclass
class FavFile:
    """A whole favorites file: version and root folder."""

    version: int = 0
    folder: FavFolder = field(default_factory=FavFolder)

    def to_bytes(self) -> bytes:
        return struct.pack("<H", self.version) + self.folder.to_bytes()


def open_fav_file(filename: str | Path) -> FavFile:
    """Read and parse a favorites file."""
    return unmarshal_fav_file(Path(filename).read_bytes())


def unmarshal_fav_file(data: bytes) -> FavFile:
    """Parse a whole favorites file."""
    if len(data) < 2:
        raise IndexOutOfBoundError()
    (version,) = struct.unpack_from("<H", data, 0)
    folder, _ = unmarshal_fav_folder(data, 2)
    return FavFile(version=version, folder=folder)


def unmarshal_fav_folder(data: bytes, start: int) -> tuple[FavFolder, int]:
    """Parse a folder at ``start``; return it and the index after it."""
    if len(data) < start + 4:
        raise IndexOutOfBoundError()
    n_boards, n_lines, n_folders = _FOLDER_HEADER.unpack_from(data, start)
    folder = FavFolder(n_boards=n_boards, n_lines=n_lines, n_folders=n_folders)
    folder.data_tail = folder.data_number()
    folder.n_alloc = folder.data_tail + FAV_PRE_ALLOC
    pos = start + 4

    for _ in range(folder.data_tail):
        item, pos = unmarshal_fav_item(data, pos)
        folder.items.append(item)

    for item in folder.items:
        if isinstance(item.item, FavFolderItem):
            sub, pos = unmarshal_fav_folder(data, pos)
            folder.folder_id += 1
            item.item.folder_id = folder.folder_id
            item.item.this_folder = sub
        elif isinstance(item.item, FavLineItem):
            folder.line_id += 1
            item.item.line_id = folder.line_id

    return folder, pos


def unmarshal_fav_item(data: bytes, start: int) -> tuple[FavItem, int]:
    """Parse one item at ``start``; return it and the index after it."""
    if len(data) < start + 2:
        raise IndexOutOfBoundError()
    try:
        fav_type = FavItemType(data[start])
    except ValueError:
        raise InvalidFavTypeError() from None
    fav_attr = data[start + 1]
    pos = start + 2
    parsers = {
        FavItemType.BOARD: unmarshal_fav_board_item,
        FavItemType.LINE: unmarshal_fav_line_item,
        FavItemType.FOLDER: unmarshal_fav_folder_item,
    }
    payload, pos = parsers[fav_type](data, pos)
    return FavItem(fav_type=fav_type, fav_attr=fav_attr, item=payload), pos


def unmarshal_fav_board_item(data: bytes, start: int) -> tuple[FavBoardItem, int]:
    """Parse a 12-byte board body at ``start``."""
    if len(data) < start + FAV_BOARD_ITEM_SIZE:
        raise IndexOutOfBoundError()
    board_id, visited, attr = _BOARD_STRUCT.unpack_from(data, start)
    item = FavBoardItem(
        board_id=board_id,
        last_visit=datetime.fromtimestamp(visited, tz=timezone.utc),
        attr=attr,
    )
    return item, start + FAV_BOARD_ITEM_SIZE


def unmarshal_fav_folder_item(data: bytes, start: int) -> tuple[FavFolderItem, int]:
    """Parse a 50-byte folder body at ``start``."""
    if len(data) < start + FAV_FOLDER_ITEM_SIZE:
        raise IndexOutOfBoundError()
    folder_id = data[start]
    title = big5_cstring_to_str(data[start + 1 : start + 1 + _TITLE_FIELD])
    return FavFolderItem(folder_id=folder_id, title=title), start + 1 + _TITLE_FIELD


def unmarshal_fav_line_item(data: bytes, start: int) -> tuple[FavLineItem, int]:
    """Parse a 1-byte line body at ``start``."""
    if len(data) < start + FAV_LINE_ITEM_SIZE:
        raise IndexOutOfBoundError()
    return FavLineItem(line_id=data[start]), start + FAV_LINE_ITEM_SIZE