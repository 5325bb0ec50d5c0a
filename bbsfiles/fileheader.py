"""Article file headers stored in a board's ``.DIR`` index file.

Each header is a fixed 128-byte record describing one article: its file
name, modification time, recommendation level, owner, date, title and
mode flags.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from .const import FILE_NAME_LENGTH, FILE_VOTE, ID_LENGTH, TITLE_LENGTH
from .encoding import big5_to_utf8, utf8_to_big5

FILE_HEADER_SIZE = 128

POS_FILENAME = 0
POS_MODIFIED = POS_FILENAME + FILE_NAME_LENGTH
POS_RECOMMEND = 1 + POS_MODIFIED + 4
POS_OWNER = POS_RECOMMEND + 1
POS_DATE = POS_OWNER + ID_LENGTH + 2
POS_TITLE = POS_DATE + 6
POS_UNION_MULTI = 1 + POS_TITLE + TITLE_LENGTH + 1
POS_FILEMODE = POS_UNION_MULTI + 4

_OWNER_FIELD = ID_LENGTH + 2
_DATE_FIELD = 6
_TITLE_FIELD = TITLE_LENGTH + 1
_UINT32 = struct.Struct("<I")
_MASK32 = 0xFFFFFFFF


def _epoch() -> datetime:
    return datetime.fromtimestamp(0, tz=timezone.utc)


def _field(data: bytes, start: int, length: int) -> bytes:
    return bytes(data[start : start + length]).strip(b"\x00")


def _put(buffer: bytearray, start: int, length: int, value: bytes) -> None:
    chunk = value[:length]
    buffer[start : start + len(chunk)] = chunk


@dataclass
class VoteLimits:
    """Requirements a user must meet to take part in a vote post."""

    posts: int = 0
    logins: int = 0
    regtime: int = 0
    badpost: int = 0


@dataclass
class FileHeader:
    """Metadata of one article, without its content."""

    filename: str = ""
    modified: datetime = field(default_factory=_epoch)
    recommend: int = 0
    owner: str = ""
    date: str = ""
    title: str = ""
    money: int = 0
    anno_uid: int = 0
    vote_limits: VoteLimits = field(default_factory=VoteLimits)
    refer_ref: int = 0
    refer_flag: bool = False
    filemode: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> FileHeader:
        """Parse one 128-byte header record."""
        if len(data) < FILE_HEADER_SIZE:
            raise ValueError(
                f"file header needs {FILE_HEADER_SIZE} bytes, got {len(data)}"
            )
        (modified,) = _UINT32.unpack_from(data, POS_MODIFIED)
        recommend = data[POS_RECOMMEND]
        if recommend >= 0x80:
            recommend -= 0x100
        (union_value,) = _UINT32.unpack_from(data, POS_UNION_MULTI)

        header = cls(
            filename=_field(data, POS_FILENAME, FILE_NAME_LENGTH).decode(
                "utf-8", errors="replace"
            ),
            modified=datetime.fromtimestamp(modified, tz=timezone.utc),
            recommend=recommend,
            owner=_field(data, POS_OWNER, _OWNER_FIELD).decode("utf-8", errors="replace"),
            date=_field(data, POS_DATE, _DATE_FIELD).decode("utf-8", errors="replace"),
            title=big5_to_utf8(_field(data, POS_TITLE, _TITLE_FIELD)),
            money=union_value,
            anno_uid=union_value,
            filemode=data[POS_FILEMODE],
        )
        if header.is_vote_post():
            posts, logins, regtime, badpost = data[POS_UNION_MULTI : POS_UNION_MULTI + 4]
            header.vote_limits = VoteLimits(posts, logins, regtime, badpost)
        return header

    def to_bytes(self) -> bytes:
        """Encode the header as a 128-byte record.

        Only file name, modification time, recommendation, owner, date and
        title are written; the remaining bytes are zero.
        """
        buffer = bytearray(FILE_HEADER_SIZE)
        _put(buffer, POS_FILENAME, FILE_NAME_LENGTH, self.filename.encode("utf-8"))
        _UINT32.pack_into(buffer, POS_MODIFIED, int(self.modified.timestamp()) & _MASK32)
        buffer[POS_RECOMMEND] = self.recommend & 0xFF
        _put(buffer, POS_OWNER, _OWNER_FIELD, self.owner.encode("utf-8"))
        _put(buffer, POS_DATE, _DATE_FIELD, self.date.encode("utf-8"))
        _put(buffer, POS_TITLE, _TITLE_FIELD, utf8_to_big5(self.title))
        return bytes(buffer)

    def is_vote_post(self) -> bool:
        """Whether the vote flag is set in the file mode."""
        return bool(self.filemode & FILE_VOTE)


def open_file_header_file(filename: str | Path) -> list[FileHeader]:
    """Read every header in a ``.DIR`` file.

    A short final record is padded with zero bytes before parsing.
    """
    headers: list[FileHeader] = []
    with open(filename, "rb") as stream:
        while chunk := stream.read(FILE_HEADER_SIZE):
            headers.append(FileHeader.from_bytes(chunk.ljust(FILE_HEADER_SIZE, b"\x00")))
    return headers