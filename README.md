# bbsfiles

A small library for reading and writing the binary and text record files
kept by a PTT-style bulletin board system. It has no dependencies outside
the standard library.

## What it covers

- `bbsfiles.path` – builds the paths of files inside a BBS home directory:
  `.PASSWDS`, `.BRD`, a user's `.fav` and `logins.recent`, a board's `.DIR`
  and `.Name`, article files, mail files, and treasure (announcement)
  directories and files. An empty user or board id raises `ValueError`.
- `bbsfiles.fav` – parses and re-encodes a user's favourites file
  (`FavFile`, `FavFolder`, `FavItem` and the `FavBoardItem`,
  `FavFolderItem` and `FavLineItem` entries, plus the `FavItemType` and
  `FavAttr` enums). Encoding a parsed file with `to_bytes()` gives back the
  original bytes.
- `bbsfiles.fileheader` – the 128-byte article header records of a `.DIR`
  file (`FileHeader`, `VoteLimits`, `open_file_header_file`).
- `bbsfiles.login_recent` – the `logins.recent` history
  (`LoginRecentRecord`, `open_login_recent_file`).
- `bbsfiles.encoding` – Big5 ↔ text conversion and NUL-terminated string
  helpers (`big5_to_utf8`, `utf8_to_big5`, `cstring_to_str`,
  `big5_cstring_to_str`).
- `bbsfiles.fnv` – a 32-bit FNV-1a hash with a configurable offset basis
  (`new32a_with`, `Fnv32a`, `PTT_FNV32_INIT`).
- `bbsfiles.records` – `UserArticleRecord`, a record of a user's article,
  built from a mapping with `UserArticleRecord.from_mapping`.
- `bbsfiles.const` – field sizes and file-mode flags of the record formats.

## Installation

```
pip install .
```

## Examples

Locate and read a user's favourites:

```python
from pathlib import Path

from bbsfiles.path import get_user_favorite_path
from bbsfiles.fav import open_fav_file

path = get_user_favorite_path("/home/bbs", "SYSOP")
fav = open_fav_file(path)
for item in fav.folder.items:
    print(item.fav_type.name, item.title())

assert fav.to_bytes() == Path(path).read_bytes()
```

Board entries carry the numeric board index in `FavBoardItem.board_id`;
the board name (`FavItem.board_id()`) stays empty unless you fill in
`FavBoardItem.board_name` yourself.

List the articles of a board:

```python
from bbsfiles.path import get_board_articles_directory_path
from bbsfiles.fileheader import open_file_header_file

for header in open_file_header_file(
    get_board_articles_directory_path("/home/bbs", "SYSOP")
):
    print(header.filename, header.owner, header.date, header.title)
```

Read login history:

```python
from bbsfiles.path import get_login_recent_path
from bbsfiles.login_recent import open_login_recent_file

for record in open_login_recent_file(get_login_recent_path("/home/bbs", "SYSOP")):
    print(record.login_start_time, record.from_host)
```

Hash with a custom FNV offset basis:

```python
from bbsfiles.fnv import new32a_with

h = new32a_with(0x811C9DC5)
h.update(b"abc")
assert h.intdigest() == 0x1A47E90B
```

## Errors

Malformed input raises an exception: `FavError` and its subclasses
`InvalidFavTypeError` and `IndexOutOfBoundError` for favourites data,
`ValueError` for short header records and badly formed login lines, and
`OSError` when a file cannot be opened.

## What it does not do

- It builds the paths of the `.PASSWDS` user file and the `.BRD` board
  file but does not parse either of them, so board names cannot be looked
  up from favourites entries.
- `FileHeader.to_bytes()` writes only the file name, modification time,
  recommendation, owner, date and title; money, vote limits and the file
  mode are left as zero bytes.
- There is no server, command-line tool or database layer; it is a
  library of file readers and writers only.

## Running the tests

```
pip install .[test]
pytest
```