"""
Cause-chain resolution.

Every classification question is answered by the root cause of an error,
never by an intermediate wrapper, so that context added while an error
travels up the stack cannot change (or leak into) its classification.

Only the explicit ``HasCause`` capability is followed. Python's implicit
``__cause__``/``__context__`` links are not: ``raise public(...) from exc``
is the normal way to hide an internal failure behind a public one, and the
public error must remain the classified value.
"""
from __future__ import annotations

from typing import Optional

from .capabilities import HasCause


def resolve_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the root cause of ``err`` (``None`` for ``None``).

    Strips wrappers while the current error exposes a callable ``cause()``
    returning another error. There is no depth limit; a cyclic chain is a
    caller bug.
    """
    while err is not None and isinstance(err, HasCause) and callable(err.cause):
        nxt = err.cause()
        if nxt is None:
            break
        err = nxt
    return err


__all__ = ["resolve_cause"]
