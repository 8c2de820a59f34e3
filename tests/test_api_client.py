from unittest.mock import MagicMock

import pytest

from reports.api.api_client import GitHubAPI
from reports.api.github_exceptions import RequestFailure
from reports.api.models import Event, Gist, Repo

API = "https://api.github.com"


def _next_link(url):
    return {"Link": f'<{url}>; rel="next", <{API}/last>; rel="last"'}


def test_public_events_single_page(api, session, make_response, requested):
    session.request.return_value = make_response(
        200, [{"type": "PushEvent", "repo": {"name": "a/b"}}]
    )

    events = api.public_events_for_user("octocat")

    assert events == [Event(type="PushEvent", repo_name="a/b")]
    assert requested() == [("GET", f"{API}/users/octocat/events/public")]


def test_fetch_all_pages_concatenates_pages_in_order(api, session, make_response, requested):
    session.request.side_effect = [
        make_response(200, [1, 2], headers=_next_link(f"{API}/items?page=2")),
        make_response(200, [3], headers=_next_link(f"{API}/items?page=3")),
        make_response(200, [4, 5], headers={"Link": f'<{API}/items?page=1>; rel="first"'}),
    ]

    assert api.fetch_all_pages(f"{API}/items") == [1, 2, 3, 4, 5]
    assert requested() == [
        ("GET", f"{API}/items"),
        ("GET", f"{API}/items?page=2"),
        ("GET", f"{API}/items?page=3"),
    ]


def test_fetch_all_pages_without_link_header_fetches_one_page(api, session, make_response):
    session.request.return_value = make_response(200, [{"id": 1}])

    assert api.fetch_all_pages(f"{API}/items") == [{"id": 1}]
    assert session.request.call_count == 1


def test_fetch_all_pages_reads_lowercase_link_header(api, session, make_response):
    session.request.side_effect = [
        make_response(200, ["a"], headers={"link": f'<{API}/items?page=2>; rel="next"'}),
        make_response(200, ["b"]),
    ]

    assert api.fetch_all_pages(f"{API}/items") == ["a", "b"]


def test_fetch_all_pages_aborts_on_failed_page(api, session, make_response):
    session.request.side_effect = [
        make_response(200, [1], headers=_next_link(f"{API}/items?page=2")),
        make_response(502, text="Bad Gateway"),
    ]

    with pytest.raises(RequestFailure) as exc_info:
        api.fetch_all_pages(f"{API}/items")

    assert exc_info.value.status == 502
    assert exc_info.value.url == f"{API}/items?page=2"


def _repos_session(session, make_response, listing, languages):
    def respond(method, url, **kwargs):
        if url.endswith("/repos"):
            return make_response(200, listing)
        full_name = url[len(f"{API}/repos/"):-len("/languages")]
        return make_response(200, languages[full_name])

    session.request.side_effect = respond


def test_public_repos_skips_forks_by_default(api, session, make_response, requested):
    listing = [
        {"name": "one", "full_name": "octocat/one", "fork": False},
        {"name": "forked", "full_name": "octocat/forked", "fork": True},
        {"name": "two", "full_name": "octocat/two", "fork": False},
    ]
    languages = {
        "octocat/one": {"Python": 1200},
        "octocat/forked": {"C": 10},
        "octocat/two": {"Ruby": 300, "Shell": 20},
    }
    _repos_session(session, make_response, listing, languages)

    repos = api.public_repos_for_user("octocat")

    assert repos == [
        Repo(name="one", languages={"Python": 1200}),
        Repo(name="two", languages={"Ruby": 300, "Shell": 20}),
    ]
    assert ("GET", f"{API}/repos/octocat/forked/languages") not in requested()


def test_public_repos_includes_forks_when_requested(api, session, make_response):
    listing = [
        {"name": "forked", "full_name": "octocat/forked", "fork": True},
        {"name": "one", "full_name": "octocat/one", "fork": False},
    ]
    languages = {"octocat/forked": {"C": 10}, "octocat/one": {}}
    _repos_session(session, make_response, listing, languages)

    repos = api.public_repos_for_user("octocat", forks=True)

    assert [repo.name for repo in repos] == ["forked", "one"]
    assert repos[0].languages == {"C": 10}


def test_public_repos_propagates_language_lookup_failure(api, session, make_response):
    session.request.side_effect = [
        make_response(200, [{"name": "one", "full_name": "octocat/one", "fork": False}]),
        make_response(404, text='{"message": "Not Found"}'),
    ]

    with pytest.raises(RequestFailure):
        api.public_repos_for_user("octocat")


def test_create_private_gist(api, session, make_response):
    session.request.return_value = make_response(
        201, {"html_url": "https://gist.github.com/abc123", "id": "abc123"}
    )

    gist = api.create_private_gist("notes", "notes.txt", "hello")

    assert gist == Gist(url="https://gist.github.com/abc123")
    args, kwargs = session.request.call_args
    assert args == ("POST", f"{API}/gists")
    assert kwargs["json"] == {
        "description": "notes",
        "public": False,
        "files": {"notes.txt": {"content": "hello"}},
    }


@pytest.mark.parametrize("status, expected", [(204, True), (404, False)])
def test_repo_starred(api, session, make_response, requested, status, expected):
    session.request.return_value = make_response(status)

    assert api.repo_starred("octocat/hello") is expected
    assert requested() == [("GET", f"{API}/user/starred/octocat/hello")]


def test_repo_starred_raises_on_server_error(api, session, make_response):
    session.request.return_value = make_response(500, text="boom")

    with pytest.raises(RequestFailure):
        api.repo_starred("octocat/hello")


def test_star_and_unstar(api, session, make_response, requested):
    session.request.return_value = make_response(204)

    assert api.star_repo("octocat/hello") is None
    assert api.unstar_repo("octocat/hello") is None
    assert requested() == [
        ("PUT", f"{API}/user/starred/octocat/hello"),
        ("DELETE", f"{API}/user/starred/octocat/hello"),
    ]


def test_star_repo_rejects_other_success_codes(api, session, make_response):
    session.request.return_value = make_response(200, {})

    with pytest.raises(RequestFailure) as exc_info:
        api.star_repo("octocat/hello")

    assert exc_info.value.method == "PUT"
    assert exc_info.value.status == 200


def test_perform_accepts_listed_statuses_only(api, session, make_response):
    url = f"{API}/user/starred/a/b"
    for status in (204, 404):
        session.request.return_value = make_response(status)
        assert api.perform("GET", url, accepted_statuses={204, 404}).status_code == status

    session.request.return_value = make_response(500, text="Internal Server Error")
    with pytest.raises(RequestFailure) as exc_info:
        api.perform("GET", url, accepted_statuses={204, 404})

    failure = exc_info.value
    assert (failure.method, failure.url, failure.status) == ("GET", url, 500)
    assert failure.body == "Internal Server Error"
    assert str(failure) == f"GET to {url} returned 500\nInternal Server Error"


def test_perform_default_accepts_200_and_201(api, session, make_response):
    session.request.return_value = make_response(201, {})
    assert api.perform("POST", f"{API}/gists", body={}).status_code == 201

    session.request.return_value = make_response(202, {})
    with pytest.raises(RequestFailure):
        api.perform("POST", f"{API}/gists", body={})


def test_perform_sends_token_authorization(api, session, make_response):
    session.request.return_value = make_response(200, [])

    api.perform("get", f"{API}/users/octocat/repos")

    args, kwargs = session.request.call_args
    assert args[0] == "GET"
    assert kwargs["headers"]["Authorization"] == "token test-token"
    assert kwargs["json"] is None


def test_perform_rejects_unsupported_method(api, session):
    with pytest.raises(ValueError):
        api.perform("PATCH", f"{API}/gists/1")

    session.request.assert_not_called()


def test_custom_base_url_is_used(session, make_response):
    connection_manager = MagicMock()
    connection_manager.get_session.return_value = session
    client = GitHubAPI("t", base_url="https://github.example.com/api/v3/", connection_manager=connection_manager)
    session.request.return_value = make_response(204)

    client.star_repo("a/b")

    assert session.request.call_args.args[1] == "https://github.example.com/api/v3/user/starred/a/b"
