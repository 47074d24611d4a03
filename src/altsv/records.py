"""Line-oriented record decoding.

A "record" is a single line of labeled, tab separated fields:
    <key>:<value>\t<key>:<value>

Example:
    host:127.0.0.1\tpath:/index.html\treferer:

decodes to {"host": "127.0.0.1", "path": "/index.html", "referer": None}.

Design notes:
- Decoding is total: any text decodes to some Record, nothing is rejected.
- Only the first unescaped ':' of a field separates key from value.
- An empty value decodes to None, never to "".
- Fields with an empty key are dropped.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple

Record = Dict[str, Optional[str]]

# Characters a backslash turns into something else.
ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    ":": ":",
}


class ScanState(Enum):
    IN_KEY = "in_key"
    IN_VALUE = "in_value"


class Action(Enum):
    """What the scan loop must do after a transition."""

    APPEND = "append"
    COMMIT = "commit"
    STOP = "stop"
    SKIP = "skip"


def step(state: ScanState, escaping: bool, c: str) -> Tuple[ScanState, bool, Action, str]:
    """Compute one transition of the decoder.

    Returns (next_state, next_escaping, action, text). `text` is what gets
    appended to the active buffer when action is APPEND.
    """
    if c == "\r" or c == "\n":
        return state, False, Action.STOP, ""

    if escaping:
        if c in ESCAPES:
            return state, False, Action.APPEND, ESCAPES[c]
        # not a known escape: keep the backslash
        return state, False, Action.APPEND, "\\" + c

    if c == "\\":
        return state, True, Action.SKIP, ""
    if c == ":" and state is ScanState.IN_KEY:
        return ScanState.IN_VALUE, False, Action.SKIP, ""
    if c == "\t":
        return ScanState.IN_KEY, False, Action.COMMIT, ""
    return state, False, Action.APPEND, c


def _commit(record: Record, key: list[str], value: list[str]) -> None:
    if not key:
        return
    text = "".join(value)
    record["".join(key)] = text if text else None


def parse_line(line: str) -> Record:
    """Decode one ALTSV line into a Record.

    Never raises. A later duplicate key overwrites an earlier one.
    """
    record: Record = {}
    key: list[str] = []
    value: list[str] = []
    state = ScanState.IN_KEY
    escaping = False

    for c in line:
        state, escaping, action, text = step(state, escaping, c)
        if action is Action.APPEND:
            if state is ScanState.IN_VALUE:
                value.append(text)
            else:
                key.append(text)
        elif action is Action.COMMIT:
            _commit(record, key, value)
            key = []
            value = []
        elif action is Action.STOP:
            break

    # a line without trailing terminator still has its last field pending
    _commit(record, key, value)
    return record


decode_line = parse_line
