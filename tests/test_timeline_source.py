"""Integration tests for `TimelineSource`: modes, year span and serialization."""

from __future__ import annotations

import json
import re
from typing import Any

import pytest

from chronoline.core.contracts.options import TimelineOptions
from chronoline.core.errors import ConfigurationError, DateFormatError, IncompleteRecordError
from chronoline.core.source import TimelineSource
from chronoline.core.vocabulary import DC_DATE, DC_TITLE
from chronoline.sources import RecordSource, make_finder

ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")

POOL = [
    RecordSource("http://example.org/works/Faust", {DC_DATE: ["1808"], "type": ["Work"]}),
    RecordSource("http://example.org/people/Goethe", {DC_DATE: ["1749/1832"], "type": "Person"}),
    RecordSource("http://example.org/works/Undated", {DC_TITLE: ["No date"], "type": ["Work"]}),
]


@pytest.mark.parametrize(  # type: ignore[misc]
    "options",
    [
        {},
        {"raw_events": [], "sources": []},
        {"sources": [], "source_finder": {}},
        {"raw_events": [], "sources": [], "source_finder": {}},
        {"raw_events": [], "start_property": DC_DATE},
        {"raw_events": [], "link_property": "homepage"},
        {"raw_events": [], "bogus": 1},
    ],
)
def test_invalid_configurations(options: dict[str, Any]) -> None:
    with pytest.raises(ConfigurationError):
        TimelineSource(options)


def test_each_single_mode_constructs() -> None:
    assert TimelineSource(raw_events=[]).options.mode == "raw_events"
    assert TimelineSource(sources=[]).options.mode == "sources"
    finder_tl = TimelineSource(source_finder={}, finder=make_finder([]))
    assert finder_tl.options.mode == "source_finder"


def test_options_model_is_accepted() -> None:
    opts = TimelineOptions(raw_events=[{"start": "1900", "title": "A"}])
    assert len(TimelineSource(opts)) == 1


def test_finder_is_required_for_finder_mode() -> None:
    with pytest.raises(ConfigurationError):
        TimelineSource(source_finder={"where": {}})


def test_incomplete_raw_record_aborts_construction() -> None:
    with pytest.raises(IncompleteRecordError):
        TimelineSource(raw_events=[{"start": "1900", "title": "ok"}, {"start": "1901"}])


def test_bad_date_aborts_construction() -> None:
    with pytest.raises(DateFormatError):
        TimelineSource(sources=[RecordSource("http://e.org/x", {DC_DATE: "whenever"})])


def test_year_span_over_raw_events() -> None:
    tl = TimelineSource(
        raw_events=[{"start": "1975", "title": "late"}, {"start": "1850", "title": "early"}]
    )
    assert tl.first_year() == 1850
    assert tl.last_year() == 1975


def test_year_overrides_win() -> None:
    tl = TimelineSource(
        raw_events=[{"start": "1850/1975", "title": "x"}], start_year=1800, final_year=2000
    )
    assert (tl.first_year(), tl.last_year()) == (1800, 2000)


def test_empty_timeline_defaults() -> None:
    tl = TimelineSource(raw_events=[])
    assert tl.is_empty()
    assert (tl.first_year(), tl.last_year()) == (1900, 2000)
    assert json.loads(tl.serialize()) == {"dateTimeFormat": "iso8601", "events": []}


def test_sources_mode_keeps_order_and_skips_undated() -> None:
    tl = TimelineSource(sources=POOL)
    assert not tl.is_empty()
    assert [e.title for e in tl] == ["Faust", "Goethe"]
    assert (tl.first_year(), tl.last_year()) == (1749, 1832)


def test_only_undated_sources_leave_span_at_defaults() -> None:
    tl = TimelineSource(sources=[POOL[2]])
    assert tl.is_empty()
    assert (tl.first_year(), tl.last_year()) == (1900, 2000)


def test_single_source_object_is_wrapped() -> None:
    assert len(TimelineSource(sources=POOL[0])) == 1


def test_finder_mode_uses_query() -> None:
    tl = TimelineSource(source_finder={"where": {"type": "Work"}}, finder=make_finder(POOL))
    assert [e.title for e in tl] == ["Faust"]


def test_serialized_payload_shape() -> None:
    tl = TimelineSource(
        raw_events=[
            {"start": "1900/1950", "title": "A"},
            {"start": "10-09-1976", "title": "B", "link": "http://b.example"},
        ],
        color="red",
    )
    payload = json.loads(tl.serialize())
    assert payload["dateTimeFormat"] == "iso8601"
    first, second = payload["events"]
    assert first == {
        "start": "1900-01-01T00:00:00Z",
        "end": "1950-01-01T00:00:00Z",
        "title": "A",
        "description": "A",
        "color": "red",
        "textColor": "black",
    }
    assert second["start"] == "1976-09-10T00:00:00Z"
    assert second["durationEvent"] is True
    assert "end" not in second
    for event in payload["events"]:
        assert ISO_RE.match(event["start"])
        assert "end" not in event or ISO_RE.match(event["end"])


def test_input_events_are_not_mutated() -> None:
    events = [{"start": "1900/1950", "title": "A"}]
    TimelineSource(raw_events=events)
    assert events == [{"start": "1900/1950", "title": "A"}]


def test_out_of_range_utc_conversion_is_a_date_error() -> None:
    with pytest.raises(DateFormatError):
        TimelineSource(raw_events=[{"start": "9999-12-31T23:00:00-05:00", "title": "x"}])
