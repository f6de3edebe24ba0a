# comment_service/utils/general.py
"""
General-purpose helpers for turning service results into HTTP responses.
"""

from flask import current_app, jsonify


def _handle_service_result(result, mirror_status=None):
    """
    Wraps a {statusCode, msg} result into a JSON response.

    The comment form only looks at the body, so the HTTP status stays 200
    unless MIRROR_STATUS_CODE is enabled (or mirror_status is passed), in
    which case statusCode is also used as the HTTP status.
    """
    if mirror_status is None:
        mirror_status = current_app.config.get('MIRROR_STATUS_CODE', False)

    http_status = result["statusCode"] if mirror_status else 200
    return jsonify(result), http_status


def read_submission_payload(request):
    """
    Returns the submitted fields as a dict, accepting JSON or form encoding.
    An empty or unparsable body yields an empty dict.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()
