# comment_service/services/__init__.py
