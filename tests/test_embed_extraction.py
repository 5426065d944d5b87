import json
from typing import Any, Dict, List, Optional

from mixtape.core import ImportErrorKind, Track
from mixtape.spotify import extract_playlist, parse_candidate


def _page_props(entity: Optional[Dict[str, Any]]) -> str:
    return json.dumps(
        {"props": {"pageProps": {"state": {"data": {"entity": entity}}}}}
    )


def _html(*scripts: str) -> str:
    blocks = "\n".join(f'<script type="application/json">{s}</script>' for s in scripts)
    return f"<html><head><title>Spotify</title></head><body>{blocks}</body></html>"


def _entity(track_list: List[Any], **extra: Any) -> Dict[str, Any]:
    entity: Dict[str, Any] = {"name": "Chill", "subtitle": "Alice", "trackList": track_list}
    entity.update(extra)
    return entity


def test_extracts_single_script_page() -> None:
    html = _html(
        _page_props(
            _entity([{"uri": "spotify:track:abc123", "title": "T1", "subtitle": "A1"}])
        )
    )

    result = extract_playlist(html)

    assert result.ok
    assert result.error is None
    record = result.record
    assert record.name == "Chill"
    assert record.owner == "Alice"
    assert record.description == ""
    assert record.tracks == (Track(id="abc123", name="T1", artist="A1"),)


def test_keeps_track_order_and_raw_description() -> None:
    tracks = [
        {"uri": f"spotify:track:id{i}", "title": f"T{i}", "subtitle": f"A{i}"}
        for i in range(5)
    ]
    html = _html(_page_props(_entity(tracks, description="<b>Raw</b> text")))

    record = extract_playlist(html).record

    assert [t.id for t in record.tracks] == ["id0", "id1", "id2", "id3", "id4"]
    # Sanitizing happens later, in the import service
    assert record.description == "<b>Raw</b> text"


def test_skips_non_matching_scripts() -> None:
    html = _html(
        "window.__analytics = {enabled: true};",
        json.dumps({"pageProps": {"unrelated": True}}),
        _page_props(None),
        _page_props(_entity([{"uri": "spotify:track:zzz", "title": "Z", "subtitle": "Y"}])),
    )

    result = extract_playlist(html)

    assert result.ok
    assert result.record.tracks[0].id == "zzz"


def test_first_matching_entity_wins() -> None:
    html = _html(
        _page_props(_entity([{"uri": "spotify:track:first"}], name="First")),
        _page_props(_entity([{"uri": "spotify:track:second"}], name="Second")),
    )
    assert extract_playlist(html).record.name == "First"


def test_empty_track_list_is_empty_result() -> None:
    result = extract_playlist(_html(_page_props(_entity([]))))
    assert not result.ok
    assert result.record is None
    assert result.error == ImportErrorKind.EMPTY_RESULT


def test_missing_track_list_is_empty_result() -> None:
    result = extract_playlist(_html(_page_props({"name": "No tracks"})))
    assert result.error == ImportErrorKind.EMPTY_RESULT


def test_only_malformed_entries_is_empty_result() -> None:
    result = extract_playlist(_html(_page_props(_entity(["oops", {"title": "no uri"}, {"uri": ""}]))))
    assert result.error == ImportErrorKind.EMPTY_RESULT


def test_malformed_entries_are_skipped() -> None:
    tracks = [
        {"uri": "spotify:track:good1", "title": "G1", "subtitle": "A"},
        {"title": "missing uri"},
        42,
        {"uri": "spotify:track:good2"},
    ]
    record = extract_playlist(_html(_page_props(_entity(tracks)))).record

    assert [t.id for t in record.tracks] == ["good1", "good2"]
    assert record.tracks[1] == Track(id="good2", name="", artist="")


def test_page_without_entity_is_unparseable() -> None:
    assert extract_playlist("").error == ImportErrorKind.UNPARSEABLE
    assert extract_playlist("<html><body>nothing</body></html>").error == ImportErrorKind.UNPARSEABLE
    assert extract_playlist(_html('{"pageProps": ')).error == ImportErrorKind.UNPARSEABLE


def test_entity_without_name_is_not_a_candidate() -> None:
    text = _page_props({"subtitle": "Alice", "trackList": [{"uri": "spotify:track:x"}]})
    assert parse_candidate(text) is None
    assert extract_playlist(_html(text)).error == ImportErrorKind.UNPARSEABLE


def test_parse_candidate_rejects_non_json() -> None:
    assert parse_candidate("var x = 1;") is None
    assert parse_candidate('["pageProps"]') is None
