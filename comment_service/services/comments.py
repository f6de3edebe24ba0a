# comment_service/services/comments.py
# This file holds the logic for accepting a comment and committing it to GitHub.

import requests
from flask import current_app

from comment_service.config import Config
from comment_service.models import CommentRecord, CommentSubmission
from comment_service.services.github_contents import (
    build_commit_body,
    build_contents_url,
    build_headers,
    commit_succeeded,
    create_file,
    encode_content,
)
from comment_service.services.validation import CommentValidationError, validate_submission

ERROR_MSG = "There was an error processing your request. Please try again later."
SUCCESS_MSG = "Thank you! Your comment has been received and will be published shortly :)"
UNREACHABLE_MSG = "Error: Failed to reach API. Please try again later."


def _result(status_code, msg):
    return {"statusCode": status_code, "msg": msg}


def submit_comment(payload):
    """
    Validates a comment form submission and commits it as a new JSON file.

    Flow:
    1. Parse the body into a CommentSubmission
    2. Apply the validation rules (422 on the first failure, no API call)
    3. Build the CommentRecord (hashed email, UUIDv6 id, timestamp)
    4. PUT the record to the GitHub Contents API, once
    5. Translate GitHub's answer into {statusCode, msg}

    Args:
        payload (dict): Parsed form or JSON body (may be None)

    Returns:
        dict: {"statusCode": int, "msg": str}
    """
    config = current_app.config
    submission = CommentSubmission.from_payload(payload)

    try:
        validate_submission(
            submission,
            name_max_length=config['NAME_MAX_LENGTH'],
            email_max_length=config['EMAIL_MAX_LENGTH'],
        )
    except CommentValidationError as e:
        current_app.logger.info(f"Rejected comment submission: {e.message}")
        return _result(e.status_code, e.message)

    try:
        Config.validate_github_config(config)
    except ValueError as e:
        current_app.logger.error(f"Comment endpoint misconfigured: {e}")
        return _result(500, ERROR_MSG)

    slug = submission.slug.strip()
    record = CommentRecord.from_submission(submission)

    url = build_contents_url(
        config['GITHUB_API_URL'],
        config['GITHUB_USER'],
        config['GITHUB_REPO'],
        config['COMMENTS_CONTENT_PATH'],
        slug,
        record.filename,
    )
    body = build_commit_body(
        f"New comment in {slug} by {submission.name}",
        encode_content(record.to_dict()),
        config['COMMITTER_NAME'],
        config['COMMITTER_EMAIL'],
    )
    headers = build_headers(config['GITHUB_COMMENT_PAT'], config['GITHUB_API_VERSION'])

    current_app.logger.info(f"Committing comment {record.id} for '{slug}'")

    try:
        response = create_file(url, headers, body, timeout=config.get('GITHUB_TIMEOUT'))
    except requests.exceptions.RequestException as e:
        current_app.logger.error(f"Could not reach GitHub for comment {record.id}: {str(e)}")
        return _result(500, f"{ERROR_MSG} {str(e)}")

    return interpret_github_response(response, record.id)


def interpret_github_response(response, record_id=None):
    """
    Maps GitHub's answer onto the status object sent to the browser.

    - non-2xx status   -> that status, UNREACHABLE_MSG
    - 2xx with commit  -> 200, SUCCESS_MSG
    - 2xx otherwise    -> 422, GitHub's 'status' text or ERROR_MSG
    """
    if not 200 <= response.status_code < 300:
        current_app.logger.warning(
            f"GitHub rejected comment {record_id} with HTTP {response.status_code}"
        )
        return _result(response.status_code, UNREACHABLE_MSG)

    try:
        data = response.json()
    except ValueError:
        data = None

    if commit_succeeded(data):
        current_app.logger.info(f"Comment {record_id} committed")
        return _result(200, SUCCESS_MSG)

    msg = ERROR_MSG
    if isinstance(data, dict) and data.get('status'):
        msg = str(data['status'])

    current_app.logger.warning(f"GitHub did not commit comment {record_id}: {msg}")
    return _result(422, msg)
