from __future__ import annotations

import httpx
import pytest

from endex.core.logging import setup_logging
from scripts import lookup_company
from tests._helpers import completion_body, make_client, respond_with

ANSWER = "**Name**:\nAcme Corp\n\n**Stage**:\nGrowth\n"


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    # main() points the root handler at the captured stderr; reset it for later tests.
    setup_logging()


def _use_upstream(monkeypatch: pytest.MonkeyPatch, handler) -> None:
    monkeypatch.setattr(lookup_company, "get_completion_client", lambda: make_client(handler))


def test_prints_only_paragraphs_and_exits_zero(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("endex.core.logging.LOG_LEVEL", "INFO")
    _use_upstream(monkeypatch, respond_with(completion_body(ANSWER)))
    monkeypatch.setattr("sys.argv", ["lookup_company.py", "Acme"])

    with pytest.raises(SystemExit) as exc_info:
        lookup_company.main()

    assert exc_info.value.code == 0
    out, err = capsys.readouterr()
    assert out == "**Name**:\n\nAcme Corp\n\n**Stage**:\n\nGrowth\n"
    # The completion log record is emitted, but on stderr.
    assert "endex.completion" in err


def test_transport_failure_exits_one_with_error_on_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    _use_upstream(monkeypatch, refuse)
    monkeypatch.setattr("sys.argv", ["lookup_company.py", "Acme"])

    with pytest.raises(SystemExit) as exc_info:
        lookup_company.main()

    assert exc_info.value.code == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Lookup failed (transport)" in err
