"""Tests for Diagnostic records and the DiagnosticSink."""

from __future__ import annotations

from molosser.diagnostics import Diagnostic, DiagnosticSink, ErrorCode
from molosser.template import SourcePosition


def _diagnostic(reason: str, is_fatal: bool = True, maybe_bug: bool = False) -> Diagnostic:
    return Diagnostic(
        code=ErrorCode.UnsupportedSyntaxError,
        reasons=[reason],
        is_fatal=is_fatal,
        maybe_bug=maybe_bug,
        position=SourcePosition(line=4, column=2, filename="page.pug"),
    )


class TestDiagnosticSink:
    def test_push_preserves_order(self):
        sink = DiagnosticSink()
        for reason in ("a", "b", "c"):
            sink.push(_diagnostic(reason))
        assert [d.reasons[0] for d in sink.diagnostics] == ["a", "b", "c"]
        assert len(sink) == 3

    def test_errors_and_warnings_split_on_fatality(self):
        sink = DiagnosticSink()
        sink.push(_diagnostic("fatal"))
        sink.push(_diagnostic("soft", is_fatal=False, maybe_bug=True))
        assert [d.reasons[0] for d in sink.errors] == ["fatal"]
        assert [d.reasons[0] for d in sink.warnings] == ["soft"]
        assert sink.has_fatal()

    def test_empty_sink_has_no_fatal(self):
        assert not DiagnosticSink().has_fatal()

    def test_diagnostics_property_is_a_copy(self):
        sink = DiagnosticSink()
        sink.diagnostics.append(_diagnostic("x"))
        assert len(sink) == 0


class TestDiagnosticFormatting:
    def test_fatal_format(self):
        assert str(_diagnostic("div is bad")) == (
            "page.pug:4:2: error: UnsupportedSyntaxError: div is bad"
        )

    def test_possible_bug_format(self):
        text = str(_diagnostic("node type X", is_fatal=False, maybe_bug=True))
        assert text.startswith("page.pug:4:2: warning:")
        assert text.endswith("(possible compiler bug)")
