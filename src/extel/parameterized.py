#
# src/extel/parameterized.py
#
"""
Parameterized tests: one single-argument test body run once per input.
"""
import functools
from collections.abc import Callable, Iterable

from extel.outcome import invoke_guarded
from extel.protocols import Parameterized


def parameterize(func: Callable[[object], object], inputs: Iterable[object]) -> Callable[[], Parameterized]:
    """
    Lift `func` and a fixed sequence of inputs into a zero-argument thunk.

    The thunk calls `func` once per input in order and never stops early, so
    the report always holds one outcome per input at the same index.
    """
    values = tuple(inputs)

    def run_parameterized() -> Parameterized:
        return Parameterized(invoke_guarded(func, value) for value in values)

    functools.update_wrapper(run_parameterized, func)
    # update_wrapper exposes the single-argument signature through __wrapped__.
    del run_parameterized.__wrapped__
    run_parameterized.parameters = values
    return run_parameterized


def parameters(*inputs: object):
    """
    Decorator form of `parameterize`.

    Example:
        @parameters(1, 2, -2, 4)
        def non_negative(x):
            return check(x >= 0, f"{x} < 0")

    `non_negative` then takes no arguments and returns a `Parameterized`
    report, so it registers into a suite like any other test.
    """

    def decorator(func: Callable[[object], object]) -> Callable[[], Parameterized]:
        return parameterize(func, inputs)

    return decorator

# 🔼⚙️
