from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from hafas_client.logic.query_string import encode_query, merge_query


def test_encode_flat_params_in_order() -> None:
    assert encode_query({"results": 3, "query": "Hauptbahnhof"}) == "results=3&query=Hauptbahnhof"


def test_encode_nested_mapping_uses_dots() -> None:
    params = {"from": {"type": "location", "latitude": 52.52, "longitude": 13.4}}
    assert encode_query(params) == "from.type=location&from.latitude=52.52&from.longitude=13.4"


def test_encode_deeply_nested_mapping() -> None:
    assert encode_query({"a": {"b": {"c": 1}}}) == "a.b.c=1"


def test_encode_list_uses_encoded_indices() -> None:
    assert encode_query({"via": ["a", "b"]}) == "via%5B0%5D=a&via%5B1%5D=b"


def test_encode_scalars() -> None:
    params = {
        "stopovers": True,
        "remarks": False,
        "duration": 10.0,
        "walkingSpeed": 1.5,
        "when": datetime(2026, 10, 18, 8, 30, tzinfo=timezone.utc),
    }
    assert encode_query(params) == (
        "stopovers=true&remarks=false&duration=10&walkingSpeed=1.5"
        "&when=2026-10-18T08%3A30%3A00.000Z"
    )


def test_encode_skips_none_and_empty_containers() -> None:
    assert encode_query({"lineName": None, "products": {}, "via": [], "results": 1}) == "results=1"


def test_encode_keeps_empty_strings() -> None:
    assert encode_query({"language": ""}) == "language="


def test_encode_percent_encodes_reserved_characters() -> None:
    assert encode_query({"query": "S+U Alex/platz & co"}) == "query=S%2BU%20Alex%2Fplatz%20%26%20co"
    assert encode_query({"q": "a-b_c.d~e"}) == "q=a-b_c.d~e"


def test_encode_empty() -> None:
    assert encode_query({}) == ""


def test_merge_url_entries_come_first() -> None:
    merged = merge_query("duration=10&when=now", {"results": 5})
    assert list(merged.items()) == [("duration", "10"), ("when", "now"), ("results", 5)]


def test_merge_explicit_params_win_and_keep_position() -> None:
    merged = merge_query("results=3&language=de", {"results": 7})
    assert list(merged.items()) == [("results", 7), ("language", "de")]


def test_merge_keeps_blank_url_values() -> None:
    assert merge_query("foo=&bar=1", None) == {"foo": "", "bar": "1"}


def test_encode_list_of_mappings_combines_indices_and_dots() -> None:
    params = {"via": [{"id": "900000100003"}, {"id": "900000003201", "type": "stop"}]}
    assert encode_query(params) == (
        "via%5B0%5D.id=900000100003&via%5B1%5D.id=900000003201&via%5B1%5D.type=stop"
    )


def test_encode_datetime_converts_to_utc_with_milliseconds() -> None:
    berlin = timezone(timedelta(hours=2))
    when = datetime(2026, 10, 18, 10, 30, 15, 123456, tzinfo=berlin)
    assert encode_query({"when": when}) == "when=2026-10-18T08%3A30%3A15.123Z"


def test_encode_plain_date() -> None:
    assert encode_query({"date": date(2026, 10, 18)}) == "date=2026-10-18"
