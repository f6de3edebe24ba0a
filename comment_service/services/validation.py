# comment_service/services/validation.py
# Input checks for comment submissions. First failing rule wins.


class CommentValidationError(Exception):
    """Raised when a submission fails one of the form rules"""
    def __init__(self, message, status_code=422):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


REQUIRED_FIELDS = ('slug', 'name', 'email', 'comment')


def form_length(value):
    """Length in UTF-16 code units, as JavaScript's String.length counts them."""
    return len(value.encode('utf-16-le')) // 2


def validate_submission(submission, name_max_length=25, email_max_length=60):
    """
    Applies the form rules in order and stops at the first failure.

    1. slug, name, email and comment must be non-empty once trimmed
    2. name must be at most name_max_length characters (UTF-16 units)
    3. email must be at most email_max_length characters

    Nothing else is checked: slug existence, email format and the reply target
    are left to the site.

    Raises:
        CommentValidationError: With the message the comment form displays
    """
    for field_name in REQUIRED_FIELDS:
        if getattr(submission, field_name).strip() == "":
            raise CommentValidationError(f"Error: {field_name} cannot be empty.")

    if form_length(submission.name.strip()) > name_max_length:
        raise CommentValidationError(
            f"Error: name cannot be more than {name_max_length} characters."
        )

    if form_length(submission.email.strip()) > email_max_length:
        raise CommentValidationError(
            f"Error: email cannot be more than {email_max_length} characters."
        )
