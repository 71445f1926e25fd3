"""JSON export - tests for the search page export envelope.

Tests cover:
    - envelope fields: format_version, query, page, exported_at, result
    - exported_at normalized to UTC in the timestamp wire format
    - file written as UTF-8 with parent directories created
"""

import json
from datetime import datetime, timedelta, timezone

from adapters.json_exporter import (
    EXPORT_FORMAT_VERSION,
    build_search_export,
    export_search_result_json,
)
from core.decoding import JSONObject
from core.domain.models import Repository, SearchResult


def _result(make_repository, make_search, **overrides):
    payload = make_search(make_repository(**overrides))
    return SearchResult[Repository].from_json(JSONObject(payload))


def test_envelope_records_query_and_page(make_repository, make_search):
    result = _result(make_repository, make_search)
    stamp = datetime(2018, 2, 8, 10, 20, 30, tzinfo=timezone.utc)

    export = build_search_export(result=result, query="language:swift", page=2, exported_at=stamp)

    assert export["format_version"] == EXPORT_FORMAT_VERSION
    assert export["query"] == "language:swift"
    assert export["page"] == 2
    assert export["exported_at"] == "2018-02-08T10:20:30Z"
    assert export["result"]["total_count"] == 1
    assert export["result"]["items"][0]["full_name"] == "a/foo"


def test_exported_at_is_converted_to_utc(make_repository, make_search):
    result = _result(make_repository, make_search)
    tokyo = timezone(timedelta(hours=9))
    stamp = datetime(2018, 2, 8, 19, 20, 30, tzinfo=tokyo)

    export = build_search_export(result=result, query="q", page=1, exported_at=stamp)

    assert export["exported_at"] == "2018-02-08T10:20:30Z"


def test_export_writes_utf8_file(make_repository, make_search, tmp_path):
    result = _result(make_repository, make_search, description="はてなのリポジトリ")
    target = tmp_path / "nested" / "page.json"

    path = export_search_result_json(result=result, query="Hatena", page=1, output_path=target)

    assert path == target
    text = target.read_text(encoding="utf-8")
    assert "はてなのリポジトリ" in text
    data = json.loads(text)
    assert data["query"] == "Hatena"
    assert data["result"]["items"][0]["description"] == "はてなのリポジトリ"
