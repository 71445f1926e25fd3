"""GitHub endpoints - tests for the declarative descriptors.

Tests cover:
    - URL joining against the API origin
    - Default Accept header and its override
    - SearchRepositories query and response type
"""

import pytest

from adapters.github import GITHUB_ACCEPT_HEADER, SearchRepositories
from core.domain.models import Repository, SearchResult
from core.interfaces.endpoint import APIEndpoint, HTTPMethod


def test_search_repositories_url():
    endpoint = SearchRepositories("Hatena", 1)
    assert endpoint.url == "https://api.github.com/search/repositories"


def test_url_joins_with_custom_base_url_with_or_without_slash():
    assert (
        SearchRepositories("q", base_url="https://ghe.example.com/api/v3").url
        == "https://ghe.example.com/api/v3/search/repositories"
    )
    assert (
        SearchRepositories("q", base_url="https://ghe.example.com/api/v3/").url
        == "https://ghe.example.com/api/v3/search/repositories"
    )


def test_search_repositories_query_and_method():
    endpoint = SearchRepositories("language:swift", 3)
    assert endpoint.method is HTTPMethod.GET
    assert endpoint.query == {"q": "language:swift", "page": "3"}


def test_page_defaults_to_first_page():
    assert SearchRepositories("q").query == {"q": "q", "page": "1"}


def test_default_accept_header():
    assert SearchRepositories("q").headers == {"Accept": GITHUB_ACCEPT_HEADER}
    assert GITHUB_ACCEPT_HEADER == "application/vnd.github.v3+json"


def test_extra_headers_override_and_extend_defaults():
    endpoint = SearchRepositories(
        "q",
        extra_headers={"Accept": "application/vnd.github.text-match+json", "X-Trace": "1"},
    )
    assert endpoint.headers == {
        "Accept": "application/vnd.github.text-match+json",
        "X-Trace": "1",
    }


def test_response_type_is_search_result_of_repository():
    assert SearchRepositories.response_type is SearchResult[Repository]


def test_endpoint_is_an_immutable_value():
    endpoint = SearchRepositories("q", 2)
    assert endpoint == SearchRepositories("q", 2)
    with pytest.raises(AttributeError):
        endpoint.page = 3


def test_endpoint_satisfies_api_endpoint_protocol():
    assert isinstance(SearchRepositories("q"), APIEndpoint)


def test_extra_header_replaces_default_regardless_of_case():
    endpoint = SearchRepositories("q", extra_headers={"accept": "application/vnd.github.text-match+json"})
    assert endpoint.headers == {"accept": "application/vnd.github.text-match+json"}
