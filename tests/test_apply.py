"""Unit tests for font_cycle.engine.apply.

Tests assert against the recording host's call log: primary then fallback
bindings per target, reconciliation of every spec, sizing, and propagation
of host errors.
"""

from __future__ import annotations

import pytest

from font_cycle import (
    BindMode,
    CodepointRange,
    FontCycler,
    HostEnvironmentError,
    NamedTarget,
    NotFoundError,
    RecordingHost,
)
from font_cycle.engine import Direction
from font_cycle.fonts import FontRequest

LATIN = NamedTarget("latin")
GREEK = NamedTarget("greek")
BOX = CodepointRange(0x2500, 0x257F)


class TestApplyEngine:
    """Tests for ApplyEngine.apply and apply_all."""

    def test_head_is_primary_rest_are_fallbacks(
        self, cycler: FontCycler, host: RecordingHost
    ) -> None:
        """One call per font per target; only the head is primary."""
        assert cycler.apply("l") == 3
        assert [(c.font.family, c.mode) for c in host.calls] == [
            ("A", BindMode.PRIMARY),
            ("B", BindMode.FALLBACK),
            ("C", BindMode.FALLBACK),
        ]
        assert [f.family for f in host.fontset.fonts_for(LATIN)] == ["A", "B", "C"]

    def test_every_target_is_bound(self, host: RecordingHost) -> None:
        cycler = FontCycler(host)
        cycler.configure([("l", ["A"], ["latin", (0x2500, 0x257F)])])
        cycler.apply("l")
        assert [c.target for c in host.calls] == [LATIN, BOX]

    def test_all_specs_are_reconciled(self, host: RecordingHost) -> None:
        """Applying one key re-binds the other keys' targets as well."""
        cycler = FontCycler(host)
        cycler.configure(
            [
                ("l", ["A", "B"], ["latin"]),
                ("g", ["C"], ["greek"]),
            ]
        )
        cycler.rotation.step("l", Direction.NEXT)
        assert host.applied(LATIN) == "B"
        assert host.applied(GREEK) == "C"
        assert {c.target for c in host.calls} == {LATIN, GREEK}

    def test_empty_spec_makes_no_host_calls(self, host: RecordingHost) -> None:
        """Applying a key with no available fonts leaves the host alone."""
        cycler = FontCycler(host)
        cycler.configure([("z", ["Z"], ["latin"]), ("l", ["A"], ["greek"])])
        assert cycler.apply("z") == 0
        assert host.calls == []

    def test_empty_specs_are_skipped_when_reconciling(self, host: RecordingHost) -> None:
        cycler = FontCycler(host)
        cycler.configure([("z", ["Z"], ["latin"]), ("l", ["A"], ["greek"])])
        cycler.apply("l")
        assert [c.target for c in host.calls] == [GREEK]

    def test_size_follows_base_size_and_scale(self) -> None:
        host = RecordingHost(["A"], base_size=10.0)
        cycler = FontCycler(host, size_scale=1.5)
        cycler.configure([("l", ["A"], ["latin"])])
        cycler.apply("l")
        assert host.calls[0].font == FontRequest("A", 15.0)

        host.base_size = 14.0
        cycler.apply("l")
        assert host.calls[-1].font.size == 21.0

    def test_primary_replaces_previous_bindings(
        self, cycler: FontCycler, host: RecordingHost
    ) -> None:
        """Re-applying does not pile up fallbacks in the host."""
        cycler.apply("l")
        cycler.apply("l")
        assert len(host.fontset.fonts_for(LATIN)) == 3

    def test_unknown_key_raises(self, cycler: FontCycler) -> None:
        with pytest.raises(NotFoundError):
            cycler.apply("nope")

    def test_apply_without_key_reconciles_everything(
        self, cycler: FontCycler, host: RecordingHost
    ) -> None:
        assert cycler.apply() == 3
        assert host.applied(LATIN) == "A"


class TestHostErrors:
    """Tests for host rejections propagating to the caller."""

    def test_unknown_script_propagates(self, host: RecordingHost) -> None:
        cycler = FontCycler(host)
        cycler.configure([("q", ["A"], ["klingon"])])
        with pytest.raises(HostEnvironmentError) as exc_info:
            cycler.apply("q")
        assert exc_info.value.target == NamedTarget("klingon")

    def test_inverted_range_propagates(self, host: RecordingHost) -> None:
        cycler = FontCycler(host)
        cycler.configure([("q", ["A"], [(0x257F, 0x2500)])])
        with pytest.raises(HostEnvironmentError):
            cycler.rotation.step("q", Direction.NEXT)

    def test_out_of_unicode_range_propagates(self, host: RecordingHost) -> None:
        cycler = FontCycler(host)
        cycler.configure([("q", ["A"], [(0x10FFFF, 0x110000)])])
        with pytest.raises(HostEnvironmentError):
            cycler.apply("q")
