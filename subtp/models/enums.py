# subtp/models/enums.py
# -*- coding: utf-8 -*-
from enum import Enum


class Placement(Enum):
    """Where the text of a header description or NOTE block sits."""
    SIDE = 'side'    # on the keyword line itself
    BELOW = 'below'  # on the lines following the keyword


class Vertical(Enum):
    RL = 'rl'
    LR = 'lr'


class LineAlignment(Enum):
    START = 'start'
    CENTER = 'center'
    END = 'end'


class PositionAlignment(Enum):
    LINE_LEFT = 'line-left'
    CENTER = 'center'
    LINE_RIGHT = 'line-right'


class Alignment(Enum):
    START = 'start'
    CENTER = 'center'
    END = 'end'
    LEFT = 'left'
    RIGHT = 'right'


class Scroll(Enum):
    UP = 'up'


class NewlineStyle(Enum):
    LF = 'lf'
    CRLF = 'crlf'

    @property
    def sequence(self) -> str:
        return '\r\n' if self is NewlineStyle.CRLF else '\n'


class DuplicateKeyPolicy(Enum):
    """How repeated cue or region setting keys are handled."""
    LAST_WINS = 'last_wins'
    REJECT = 'reject'
