from mdscan.models import (
    CodeHint,
    FenceContext,
    HeadingEntry,
    Outline,
    SurfaceMetrics,
)


def test_fence_context_defaults():
    ctx = FenceContext()

    assert ctx.inside is False
    assert ctx.markers_seen == 0


def test_outline_iteration_and_lookup():
    entries = (
        HeadingEntry("intro", "Intro", 1, "Intro", 0, 1),
        HeadingEntry("usage", "Usage", 2, "Usage", 1, 3),
    )
    outline = Outline(headings=entries, anchor_map={"Intro": "intro", "Usage": "usage"})

    assert len(outline) == 2
    assert list(outline) == list(entries)
    assert outline.identifiers == ["intro", "usage"]
    assert outline.identifier_at(0) == "intro"
    assert outline.identifier_at(-1) is None


def test_empty_outline():
    outline = Outline()

    assert len(outline) == 0
    assert outline.anchor_map == {}
    assert outline.identifier_at(0) is None


def test_code_hint_message():
    hint = CodeHint(line_number=3, snippet="x = 1")

    assert hint.message == "Line 3 may contain code, wrap it in a code block: ```x = 1```"


def test_surface_metrics_available_width_defaults_to_symmetric_padding():
    metrics = SurfaceMetrics(14, 21, 16, 16, 640, len)

    assert metrics.available_width == 624
    assert SurfaceMetrics(14, 21, 16, 16, 640, len, padding_right=4).available_width == 636
