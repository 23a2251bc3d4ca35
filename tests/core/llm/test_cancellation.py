from __future__ import annotations

from endex.core.llm.cancellation import CancellationToken, SearchGenerations


def test_token_starts_live_and_stays_cancelled() -> None:
    token = CancellationToken()
    assert not token.cancelled

    token.cancel()
    token.cancel()

    assert token.cancelled


def test_begin_invalidates_previous_generation() -> None:
    generations = SearchGenerations()
    assert generations.current == 0

    first = generations.begin()
    second = generations.begin()

    assert generations.current == 2
    assert first.cancelled
    assert not second.cancelled
