"""Tests for the GitHub Contents API client helpers."""

import base64
import json

import pytest
import requests
import responses

from comment_service.services.github_contents import (
    build_commit_body,
    build_contents_url,
    build_headers,
    commit_succeeded,
    create_file,
    encode_content,
)

FILE_URL = "https://api.github.com/repos/me/blog/contents/data/comments/hello-world/comment-1.json"


def test_build_contents_url():
    url = build_contents_url(
        "https://api.github.com/", "me", "blog", "/data/comments/", "hello-world", "comment-1.json"
    )

    assert url == FILE_URL


def test_build_headers():
    headers = build_headers("secret-token", "2022-11-28")

    assert headers == {
        "Authorization": "Bearer secret-token",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }


def test_encode_content_round_trips_unicode():
    data = {"name": "Zoë", "comment": "こんにちは"}

    encoded = encode_content(data)

    assert json.loads(base64.b64decode(encoded).decode("utf-8")) == data


def test_build_commit_body():
    body = build_commit_body("New comment in hello-world by Ada", "e30=", "Monalisa Octocat", "octocat@github.com")

    assert body == {
        "message": "New comment in hello-world by Ada",
        "committer": {"name": "Monalisa Octocat", "email": "octocat@github.com"},
        "content": "e30=",
    }


@pytest.mark.parametrize("payload, expected", [
    ({"content": {}, "commit": {}}, True),
    ({"status": "409"}, False),
    ({}, False),
    (None, False),
    (["commit"], False),
])
def test_commit_succeeded(payload, expected):
    assert commit_succeeded(payload) is expected


@responses.activate
def test_create_file_sends_single_put():
    responses.add(responses.PUT, FILE_URL, json={"commit": {}}, status=201)
    body = build_commit_body("msg", "e30=", "n", "e")

    response = create_file(FILE_URL, build_headers("secret-token", "2022-11-28"), body)

    assert response.status_code == 201
    assert len(responses.calls) == 1
    sent = responses.calls[0].request
    assert sent.headers["Authorization"] == "Bearer secret-token"
    assert json.loads(sent.body) == body


@responses.activate
def test_create_file_propagates_transport_errors():
    responses.add(responses.PUT, FILE_URL, body=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(requests.exceptions.ConnectionError):
        create_file(FILE_URL, build_headers("t", "2022-11-28"), {})


@pytest.mark.parametrize("slug, segment", [
    ("hello-world", "hello-world"),
    ("../../content/posts", "..%2F..%2Fcontent%2Fposts"),
    ("a?b", "a%3Fb"),
    ("a#b", "a%23b"),
    ("..", "%252E%252E"),
    (".", "%252E"),
])
def test_slug_stays_one_path_segment(slug, segment):
    url = build_contents_url("https://api.github.com", "me", "blog", "data/comments", slug, "comment-1.json")

    assert url == f"https://api.github.com/repos/me/blog/contents/data/comments/{segment}/comment-1.json"
