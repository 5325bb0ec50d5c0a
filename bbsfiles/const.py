"""Field sizes and file-mode flags of the on-disk BBS structures."""

ID_LENGTH = 12  # length of board id / user id
IPV4_LENGTH = 15  # a.b.c.d form
PASSWORD_INPUT_LENGTH = 8  # valid input password length (DES)
PASSWORD_LENGTH = 14  # length of encrypted password field
REGISTRATION_LENGTH = 38  # length of registration data
REAL_NAME_SIZE = 20
NICKNAME_SIZE = 24
EMAIL_SIZE = 50
ADDRESS_SIZE = 50
CAREER_SIZE = 40
PHONE_SIZE = 20
PASSWD_VERSION = 4194
TITLE_LENGTH = 64  # length of an article title
FILE_NAME_LENGTH = 28  # length of an article file name

# File header mode flags. Several share a value; their meaning depends on
# whether the header belongs to mail, a board, or the announce area.
FILE_LOCAL = 0x01  # local saved, non-mail
FILE_READ = 0x01  # already read, mail only
FILE_MARKED = 0x02  # non-mail + mail
FILE_DIGEST = 0x04  # digest, non-mail
FILE_REPLIED = 0x04  # replied, mail only
FILE_BOTTOM = 0x08  # pushed to bottom, non-mail
FILE_MULTI = 0x08  # multi send, mail only
FILE_SOLVED = 0x10  # problem solved, sysop/BM non-mail only
FILE_HIDE = 0x20  # hidden, in announce
FILE_BOARD_ID = 0x20  # bid, in non-announce
FILE_BOARD_MASTER = 0x40  # BM only, in announce
FILE_VOTE = 0x40  # vote post, in non-announce
FILE_ANONYMOUS = 0x80  # anonymous file