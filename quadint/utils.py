from dataclasses import dataclass, field
from functools import wraps
from threading import RLock
from typing import Any, Callable, Generator, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def check_int64(value: int, what: str = "value") -> int:
    """
    Verify that an integer fits in a signed 64-bit word.

    Returns:
        int: The value, unchanged.

    Raises:
        OverflowError: If the value is out of range.
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{what} {value} is outside the signed 64-bit range")
    return value


@dataclass
class _SharedStream(Generic[T]):
    lock: RLock = field(default_factory=RLock)
    items: list[T] = field(default_factory=list)
    source: Optional[Generator[T, None, None]] = None


def cache_generator(
    fn: Callable[..., Generator[T, None, None]],
) -> Callable[..., Generator[T, None, None]]:
    """
    Memoize an infinite (or long) generator function per argument tuple.

    Every call returns a fresh generator which first replays the items already
    produced for those arguments and then advances the one shared underlying
    generator, remembering whatever it yields. Used for the trial-division
    prime stream so repeated factorizations don't sieve again.

    Returns:
        Callable: The wrapped generator function.
    """
    streams: dict[Hashable, _SharedStream[T]] = {}
    streams_lock = RLock()

    @wraps(fn)
    def wrapper(*args: Any) -> Generator[T, None, None]:
        with streams_lock:
            stream = streams.get(args)
            if stream is None:
                stream = _SharedStream(source=fn(*args))
                streams[args] = stream

        def _iter() -> Generator[T, None, None]:
            i = 0
            while True:
                with stream.lock:
                    if i >= len(stream.items):
                        if stream.source is None:
                            return
                        try:
                            stream.items.append(next(stream.source))
                        except StopIteration:
                            stream.source = None
                            return
                    item = stream.items[i]
                i += 1
                yield item

        return _iter()

    return wrapper
