"""Channel-filtered debug logging, enabled through WRAPPED_DEBUG."""

import functools
import os
import reprlib
import sys
from typing import Text, Callable, Any, TypeVar, cast

import termcolor


ENV_VAR = 'WRAPPED_DEBUG'

F = TypeVar('F', bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80


def safe_repr(x: Any) -> Text:
    """Like `repr(x)`, but never raises; long reprs are abbreviated."""
    try:
        return _repr.repr(x)
    except Exception:
        return object.__repr__(x)


def _accepts(channel: Text) -> bool:
    setting = os.getenv(ENV_VAR, '')
    if not setting:
        return False
    if setting in ('all', '1'):
        return True
    starts = [start.strip() for start in setting.split(',')]
    return any(channel.startswith(start) for start in starts if start)


def log(channel: Text, s: Text, *args: Any) -> None:
    """Writes `s` to stderr if `channel` is on.

    Each `{}` field in `s` is filled with the `safe_repr` of the matching
    entry of `args`. Nothing is formatted while the channel is off.
    """
    if not _accepts(channel):
        return
    if args:
        s = s.format(*(safe_repr(a) for a in args))
    termcolor.cprint(f'[{channel}] {s}', color='yellow', file=sys.stderr)


def debugged(channel: Text,
             show_start: bool = False) -> Callable[[F], F]:
    def do_debug(f: F) -> F:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            if not _accepts(channel):
                return f(*args, **kwargs)

            args_str = ', '.join(safe_repr(a) for a in args)
            kwargs_str = '' if not kwargs else ', '.join(
                '{}={}'.format(k, safe_repr(v)) for k, v in kwargs.items())
            sep = ', ' if args and kwargs else ''

            if show_start:
                log(channel, '{}({}{}{}) <start>'.format(
                    f.__name__, args_str, sep, kwargs_str))
            result = f(*args, **kwargs)
            log(channel, '{}({}{}{}) => {}'.format(
                f.__name__, args_str, sep, kwargs_str, safe_repr(result)))
            return result
        return cast(F, wrapper)
    return do_debug
