from datetime import datetime, timezone

import pytest

from bbsfiles.const import FILE_VOTE
from bbsfiles.fileheader import (
    FILE_HEADER_SIZE,
    POS_FILEMODE,
    POS_RECOMMEND,
    POS_UNION_MULTI,
    FileHeader,
    VoteLimits,
    open_file_header_file,
)


def hex_to_bytes(text: str) -> bytes:
    return bytes.fromhex("".join(text.split()))


RECORD_1 = hex_to_bytes(
    """
4d2e 3135 3939 3035 3932 3436 2e41 2e43
4636 0000 0000 0000 0000 0000 d0ba 4f5f
0000 5359 534f 5000 0000 0000 0000 0000
2039 2f30 3200 5bb6 a2b2 e15d 20a6 dba4
76aa baa4 e5b3 b9a6 dba4 76bc 6700 0000
0000 0000 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
"""
)

RECORD_2 = hex_to_bytes(
    """
4d2e 3135 3939 3035 3934 3135 2e41 2e46
4241 0000 0000 0000 0000 0000 d9ba 4f5f
0000 5359 534f 5000 0000 0000 0000 0000
2039 2f30 3200 5bb0 51bd d75d 20bd e0a4
6abd 5fd1 4cb7 cfa4 f5bb b7c2 f7a4 48bc
e9a1 4900 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
"""
)

RECORD_3 = hex_to_bytes(
    """
4d2e 3135 3939 3035 3934 3936 2e41 2e32
4245 0000 0000 0000 0000 0000 e2ba 4f5f
0000 5359 534f 5000 0000 0000 0000 0000
2039 2f30 3200 5ba4 bda7 695d 20a6 f3a4
a3a1 4820 a4ad a46a bc65 ae65 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
0000 0000 0000 0000 0000 0000 0000 0000
"""
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


EXPECTED_FIELDS = [
    dict(
        filename="M.1599059246.A.CF6",
        modified=utc(2020, 9, 2, 15, 31, 28),
        recommend=0,
        owner="SYSOP",
        date=" 9/02",
        title="[閒聊] 自己的文章自己寫",
    ),
    dict(
        filename="M.1599059415.A.FBA",
        modified=utc(2020, 9, 2, 15, 31, 37),
        recommend=0,
        owner="SYSOP",
        date=" 9/02",
        title="[討論] 賞大稻埕煙火遠離人潮！",
    ),
    dict(
        filename="M.1599059496.A.2BE",
        modified=utc(2020, 9, 2, 15, 31, 46),
        recommend=0,
        owner="SYSOP",
        date=" 9/02",
        title="[公告] 何不？ 五大寬容",
    ),
]

EXPECTED = [FileHeader(**fields) for fields in EXPECTED_FIELDS]

RECORDS = [RECORD_1, RECORD_2, RECORD_3]


def assert_header_matches(actual: FileHeader, expected: FileHeader) -> None:
    assert actual.filename == expected.filename
    assert actual.modified == expected.modified
    assert actual.recommend == expected.recommend
    assert actual.owner == expected.owner
    assert actual.date == expected.date
    assert actual.title == expected.title
    assert actual.money == expected.money
    assert actual.anno_uid == expected.anno_uid
    assert actual.vote_limits == expected.vote_limits
    assert actual.refer_ref == expected.refer_ref
    assert actual.filemode == expected.filemode


@pytest.mark.parametrize("fields, expected", zip(EXPECTED_FIELDS, RECORDS))
def test_encoding_file_header(fields, expected):
    header = FileHeader(**fields)
    encoded = header.to_bytes()
    assert len(encoded) == FILE_HEADER_SIZE
    assert encoded == expected


@pytest.mark.parametrize("record, expected", zip(RECORDS, EXPECTED))
def test_parse_file_header_record(record, expected):
    assert_header_matches(FileHeader.from_bytes(record), expected)


def test_open_file_header_file(tmp_path):
    path = tmp_path / "01.DIR"
    path.write_bytes(b"".join(RECORDS))
    headers = open_file_header_file(path)
    assert len(headers) == 3
    for actual, expected in zip(headers, EXPECTED):
        assert_header_matches(actual, expected)


def test_parse_file_header_02(tmp_path):
    expected = FileHeader(
        filename="M.1604489415.A.C31",
        modified=utc(2020, 11, 4, 11, 30, 14),
        owner="pichu",
        date="11/04",
        title="[問題] test",
    )
    path = tmp_path / "02.DIR"
    path.write_bytes(expected.to_bytes())
    headers = open_file_header_file(path)
    assert len(headers) == 1
    assert_header_matches(headers[0], expected)


def test_parse_file_header_treasures(tmp_path):
    expected = FileHeader(
        filename="D6D8",
        modified=utc(1970, 1, 1, 0, 0, 0),
        owner="SYSOP",
        date="12/20",
        title="◆ Folder 1.1.1.1",
    )
    path = tmp_path / "03.DIR"
    path.write_bytes(expected.to_bytes())
    headers = open_file_header_file(path)
    assert len(headers) == 1
    assert_header_matches(headers[0], expected)


def test_empty_file_gives_no_headers(tmp_path):
    path = tmp_path / "empty.DIR"
    path.write_bytes(b"")
    assert open_file_header_file(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_file_header_file(tmp_path / "missing.DIR")


def test_from_bytes_rejects_short_data():
    with pytest.raises(ValueError):
        FileHeader.from_bytes(RECORD_1[:100])


def test_vote_post_reads_vote_limits():
    data = bytearray(RECORD_1)
    data[POS_FILEMODE] = FILE_VOTE
    data[POS_UNION_MULTI : POS_UNION_MULTI + 4] = bytes([5, 10, 3, 1])
    header = FileHeader.from_bytes(bytes(data))
    assert header.is_vote_post() is True
    assert header.filemode == FILE_VOTE
    assert header.vote_limits == VoteLimits(posts=5, logins=10, regtime=3, badpost=1)
    assert header.money == 0x01030A05


def test_non_vote_post_keeps_default_limits():
    data = bytearray(RECORD_1)
    data[POS_UNION_MULTI : POS_UNION_MULTI + 4] = (1234).to_bytes(4, "little")
    header = FileHeader.from_bytes(bytes(data))
    assert header.is_vote_post() is False
    assert header.vote_limits == VoteLimits()
    assert header.money == 1234
    assert header.anno_uid == 1234


def test_recommend_is_signed():
    data = bytearray(RECORD_1)
    data[POS_RECOMMEND] = 0xFF
    header = FileHeader.from_bytes(bytes(data))
    assert header.recommend == -1
    assert header.to_bytes()[POS_RECOMMEND] == 0xFF


def test_to_bytes_has_fixed_size_and_truncates_fields():
    header = FileHeader(filename="F" * 40, owner="O" * 20, date="1234567", title="t" * 100)
    encoded = header.to_bytes()
    assert len(encoded) == FILE_HEADER_SIZE
    parsed = FileHeader.from_bytes(encoded)
    assert parsed.filename == "F" * 28
    assert parsed.owner == "O" * 14
    assert parsed.date == "123456"
    assert parsed.title == "t" * 65


def test_to_bytes_does_not_write_money_or_filemode():
    header = FileHeader(filename="M.1.A", money=99, filemode=FILE_VOTE)
    encoded = header.to_bytes()
    assert encoded[POS_UNION_MULTI : POS_UNION_MULTI + 4] == b"\x00\x00\x00\x00"
    assert encoded[POS_FILEMODE] == 0