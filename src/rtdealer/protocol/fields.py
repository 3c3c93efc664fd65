"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling. The
literal values are what goes on the wire and must not change.
"""

DELIMITER = b""

READY = b"Hi boss!"
WORK = b"Work harder"
FIRED = b"Fired!"

REPLIES = (WORK, FIRED)
