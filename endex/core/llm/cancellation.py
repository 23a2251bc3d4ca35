from __future__ import annotations


class CancellationToken:
    """Single-shot signal owned by the caller of a completion request.

    Cancelling does not abort the HTTP exchange; it only prevents the result from
    being delivered once the exchange finishes.
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class SearchGenerations:
    """
    Newest-search-wins bookkeeping for an interactive caller that embeds the client
    (a search screen, a REPL). The HTTP API and the one-shot CLI serve independent
    lookups and do not use it.

    Each `begin()` invalidates the token handed out by the previous call, so a slow
    response to an older search is dropped instead of overwriting a newer one.
    `current` lets the caller tag rendered results with their generation.
    """

    def __init__(self) -> None:
        self._current = 0
        self._token: CancellationToken | None = None

    @property
    def current(self) -> int:
        return self._current

    def begin(self) -> CancellationToken:
        if self._token is not None:
            self._token.cancel()
        self._current += 1
        self._token = CancellationToken()
        return self._token
