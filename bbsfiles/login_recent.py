"""Parsing of a user's ``logins.recent`` file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

_TIME_FORMAT = "%m/%d/%Y %H:%M:%S"


@dataclass(frozen=True)
class LoginRecentRecord:
    """One login: when it started and the host it came from."""

    login_start_time: datetime
    from_host: str

    @classmethod
    def parse(cls, line: str) -> LoginRecentRecord:
        """Parse a line of the form ``MM/DD/YYYY HH:MM:SS host ...``."""
        segments = line.split(" ")
        if len(segments) < 3:
            raise ValueError("format for login recent incorrect")
        started = datetime.strptime(f"{segments[0]} {segments[1]}", _TIME_FORMAT)
        return cls(
            login_start_time=started.replace(tzinfo=timezone.utc),
            from_host=segments[2],
        )


def open_login_recent_file(filename: str | Path) -> list[LoginRecentRecord]:
    """Read every record of a ``logins.recent`` file."""
    records: list[LoginRecentRecord] = []
    with open(filename, encoding="utf-8", errors="replace", newline="") as stream:
        for raw in stream:
            line = raw.removesuffix("\n").removesuffix("\r")
            records.append(LoginRecentRecord.parse(line))
    return records