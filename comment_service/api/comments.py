# comment_service/api/comments.py
# (This file holds the route the blog's comment form posts to.)

from flask import Blueprint, request

from comment_service.services.comments import submit_comment
from comment_service.utils import _handle_service_result, read_submission_payload

bp = Blueprint('comments', __name__)


@bp.route('/post', methods=['POST'])
def post_comment_route():
    """
    Receives a comment from the form (slug, name, email, replyTo, comment)
    and answers with {"statusCode": ..., "msg": ...}.
    """
    payload = read_submission_payload(request)
    result = submit_comment(payload)
    return _handle_service_result(result)
