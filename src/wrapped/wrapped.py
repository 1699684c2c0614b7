"""Single-value wrapper that provides call-chain style combinators."""

from typing import TypeVar, Generic, Text, Callable, Optional, Any, cast

from wrapped.elog import log, debugged


T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)
U = TypeVar('U')


class Wrapped(Generic[T_co]):
    """Wraps a value of type `T_co`.

    Combinators either return a new wrapper holding a new value or return
    this very instance; the stored value is never mutated.

        >>> wrap(5).map(lambda x: x * 2).value
        10
    """

    def __init__(self, value: T_co):
        self._value = value

    def __repr__(self) -> Text:
        return 'Wrapped({!r})'.format(self._value)

    @property
    def value(self) -> T_co:
        return self._value

    def map(self, fn: Callable[[T_co], U]) -> 'Wrapped[U]':
        """Returns a new wrapper holding `fn(value)`."""
        return Wrapped(fn(self._value))

    def tap(self, fn: Callable[[T_co], Any]) -> 'Wrapped[T_co]':
        """Calls `fn(value)` for its side effect and returns this wrapper.

        Whatever `fn` returns is discarded.
        """
        fn(self._value)
        return self

    def filter(self,
               predicate: Callable[[T_co], bool]) -> 'Optional[Wrapped[T_co]]':
        """Returns this wrapper if `predicate(value)` holds, else None.

            >>> w = wrap(5)
            >>> w.filter(lambda x: x > 3) is w
            True
            >>> w.filter(lambda x: x < 3) is None
            True
        """
        if predicate(self._value):
            return self
        log('wrapped:filter', 'filter rejected {}', self._value)
        return None

    def filter_not(
            self,
            predicate: Callable[[T_co], bool]) -> 'Optional[Wrapped[T_co]]':
        """Returns this wrapper if `predicate(value)` does not hold, else None.
        """
        if predicate(self._value):
            log('wrapped:filter', 'filter_not rejected {}', self._value)
            return None
        return self

    def compact_or_absent(
            self: 'Wrapped[Optional[U]]') -> 'Optional[Wrapped[U]]':
        """Returns this wrapper, narrowed to a non-None value, or None.

        Only None counts as absent; falsy values such as 0, '' and False are
        present.
        """
        if self._value is None:
            return None
        return cast('Wrapped[U]', self)

    def or_default(self: 'Wrapped[Optional[U]]', default: U) -> 'Wrapped[U]':
        """Returns a new wrapper holding `default` if the value is None.

        Otherwise returns this wrapper.
        """
        if self._value is None:
            log('wrapped:nil', 'or_default substituting {}', default)
            return Wrapped(default)
        return cast('Wrapped[U]', self)

    def or_else(self: 'Wrapped[Optional[U]]',
                supplier: Callable[[], U]) -> 'Wrapped[U]':
        """Like `or_default`, but the default comes from `supplier()`.

        `supplier` is only called when the value is None.
        """
        if self._value is None:
            value = supplier()
            log('wrapped:nil', 'or_else substituting {}', value)
            return Wrapped(value)
        return cast('Wrapped[U]', self)

    def get_or_default(self: 'Wrapped[Optional[U]]', default: U) -> U:
        value = self._value
        if value is None:
            log('wrapped:nil', 'get_or_default substituting {}', default)
            return default
        return value

    def get_or_else(self: 'Wrapped[Optional[U]]',
                    supplier: Callable[[], U]) -> U:
        value = self._value
        if value is None:
            fallback = supplier()
            log('wrapped:nil', 'get_or_else substituting {}', fallback)
            return fallback
        return value

    # Kotlin scope-function names.
    let = map
    also = tap
    take_if = filter
    take_unless = filter_not
    take_if_not_nil = compact_or_absent


@debugged('wrapped:wrap')
def wrap(value: T) -> Wrapped[T]:
    """Wraps `value` in a `Wrapped` instance."""
    return Wrapped(value)
