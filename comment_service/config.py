# comment_service/config.py

import os
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# Local development reads secrets from a .env file in the repository root.
load_dotenv(os.path.join(basedir, '..', '.env'))
# --------------------------------------

FUNCTION_NAME = 'comment'


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_float(name):
    value = os.environ.get(name)
    if not value:
        return None
    return float(value)


class Config:
    """
    Contains all the configuration variables for the comment endpoint.
    Everything environment-specific is read from the process environment.
    """
    # --- Runtime Mode ---
    # 'dev' selects local routing and allows any origin through CORS.
    APP_ENV = os.environ.get('APP_ENV', 'production')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # --- Site Settings ---
    SITE_DOMAIN = os.environ.get('SITE_DOMAIN', '')

    # Route prefix; the serverless runtime mounts functions under /api.
    ROUTER_BASE_PATH = os.environ.get('COMMENT_BASE_PATH') or \
        (f'/{FUNCTION_NAME}' if APP_ENV == 'dev' else f'/api/{FUNCTION_NAME}')

    # --- GitHub Contents API ---
    # The token is a secret: it must never be logged or echoed back.
    GITHUB_COMMENT_PAT = os.environ.get('GITHUB_COMMENT_PAT')
    GITHUB_USER = os.environ.get('GITHUB_USER', '')
    GITHUB_REPO = os.environ.get('GITHUB_REPO', '')
    GITHUB_API_URL = os.environ.get('GITHUB_API_URL') or 'https://api.github.com'
    GITHUB_API_VERSION = '2022-11-28'
    # No timeout unless one is configured explicitly.
    GITHUB_TIMEOUT = _env_float('GITHUB_TIMEOUT')
    COMMENTS_CONTENT_PATH = os.environ.get('COMMENTS_CONTENT_PATH') or 'data/comments'

    # Placeholder identity used as the commit author.
    COMMITTER_NAME = os.environ.get('COMMITTER_NAME') or 'Monalisa Octocat'
    COMMITTER_EMAIL = os.environ.get('COMMITTER_EMAIL') or 'octocat@github.com'

    # --- Validation Limits ---
    NAME_MAX_LENGTH = 25
    EMAIL_MAX_LENGTH = 60

    # --- Response Behaviour ---
    # The comment form only reads the JSON body, so by default every answer is
    # sent as HTTP 200. Enable this to send statusCode as the HTTP status too.
    MIRROR_STATUS_CODE = _env_flag('MIRROR_STATUS_CODE')

    @staticmethod
    def validate_github_config(config):
        """
        Checks that everything needed to commit a comment is configured.

        Args:
            config: A mapping such as Flask's app.config

        Raises:
            ValueError: Naming the missing settings (never their values)
        """
        missing = [
            key for key in ('GITHUB_COMMENT_PAT', 'GITHUB_USER', 'GITHUB_REPO')
            if not config.get(key)
        ]
        if missing:
            raise ValueError(f"Missing GitHub configuration: {', '.join(missing)}")


class DevelopmentConfig(Config):
    APP_ENV = 'dev'
    ROUTER_BASE_PATH = os.environ.get('COMMENT_BASE_PATH') or f'/{FUNCTION_NAME}'
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    TESTING = True
    APP_ENV = 'production'
    LOG_LEVEL = 'CRITICAL'
    SITE_DOMAIN = 'blog.example.com'
    ROUTER_BASE_PATH = f'/api/{FUNCTION_NAME}'
    GITHUB_COMMENT_PAT = 'test-token'
    GITHUB_USER = 'octo-user'
    GITHUB_REPO = 'octo-blog'
    GITHUB_API_URL = 'https://api.github.com'
    GITHUB_TIMEOUT = None
    COMMENTS_CONTENT_PATH = 'data/comments'
    COMMITTER_NAME = 'Monalisa Octocat'
    COMMITTER_EMAIL = 'octocat@github.com'
    MIRROR_STATUS_CODE = False
