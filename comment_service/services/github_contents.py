# comment_service/services/github_contents.py
"""
GitHub Contents API client.

A comment is persisted by creating one JSON file in the blog repository:

    PUT https://api.github.com/repos/{owner}/{repo}/contents/{path}

API Documentation:
    https://docs.github.com/en/rest/repos/contents#create-or-update-file-contents
"""

import base64
import json
from urllib.parse import quote

import requests


def quote_path_segment(value):
    """
    Escapes a value so it stays one path segment under the comments directory.
    Slashes, '?' and '#' are percent-encoded. A bare '.' or '..' is escaped
    twice because requests turns %2E back into a dot, which would then be
    collapsed as a dot segment.
    """
    segment = quote(value, safe='')
    if segment in ('.', '..'):
        segment = segment.replace('.', '%252E')
    return segment


def build_contents_url(api_url, owner, repo, content_path, slug, filename):
    """
    Builds the file URL for a comment.

    Example:
        build_contents_url('https://api.github.com', 'me', 'blog',
                           'data/comments', 'hello-world', 'comment-1.json')
        -> https://api.github.com/repos/me/blog/contents/data/comments/hello-world/comment-1.json
    """
    base = f"{api_url.rstrip('/')}/repos/{owner}/{repo}/contents/{content_path.strip('/')}"
    return f"{base}/{quote_path_segment(slug)}/{filename}"


def build_headers(token, api_version):
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": api_version,
    }


def encode_content(data):
    """JSON-encodes a dict and base64-encodes the UTF-8 bytes, as the API expects."""
    raw = json.dumps(data, ensure_ascii=False, separators=(',', ':'))
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def build_commit_body(message, content, committer_name, committer_email):
    return {
        "message": message,
        "committer": {
            "name": committer_name,
            "email": committer_email,
        },
        "content": content,
    }


def create_file(url, headers, body, timeout=None):
    """
    Sends the file-creation request. Exactly one attempt, no retries.

    Returns:
        requests.Response: Whatever GitHub answered, successful or not

    Raises:
        requests.exceptions.RequestException: If GitHub could not be reached
    """
    return requests.put(url, json=body, headers=headers, timeout=timeout)


def commit_succeeded(payload):
    """
    GitHub answers a created file with an object holding 'content' and 'commit'.
    Anything without 'commit' means the file was not written.
    """
    return isinstance(payload, dict) and 'commit' in payload
