from comment_service import create_app
from comment_service.config import DevelopmentConfig

# This is the entry point for local development.
# The endpoint is served at http://127.0.0.1:5000/comment/post
app = create_app(DevelopmentConfig)

if __name__ == '__main__':
    # 'debug=True' allows for hot-reloading when you save changes.
    app.run(debug=True)
