"""ANSI color codes for bibsort terminal output."""

import sys

_DEFAULTS = {
    'RED': '\033[0;31m',
    'GREEN': '\033[0;32m',
    'YELLOW': '\033[1;33m',
    'CYAN': '\033[0;36m',
    'DIM': '\033[2m',
    'NC': '\033[0m',  # No Color
}


class Colors:
    """ANSI color codes, blanked out when output is not a terminal."""
    RED = _DEFAULTS['RED']
    GREEN = _DEFAULTS['GREEN']
    YELLOW = _DEFAULTS['YELLOW']
    CYAN = _DEFAULTS['CYAN']
    DIM = _DEFAULTS['DIM']
    NC = _DEFAULTS['NC']

    @classmethod
    def disable(cls):
        """Blank every color code."""
        for name in _DEFAULTS:
            setattr(cls, name, '')

    @classmethod
    def enable(cls):
        """Restore the ANSI codes."""
        for name, code in _DEFAULTS.items():
            setattr(cls, name, code)

    @classmethod
    def auto(cls, stream=None):
        """Disable colors if the stream (stdout by default) is not a TTY."""
        stream = stream if stream is not None else sys.stdout
        if not stream.isatty():
            cls.disable()
