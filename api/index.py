"""
Serverless Entry Point

This file serves as the bridge between the serverless runtime and the Flask application.
The runtime looks for this file to bootstrap the comment endpoint.

Architecture:
- The runtime calls this file for every request to /api/*
- This file imports and exposes the Flask app factory
- The comments blueprint answers POST /api/comment/post
"""

from comment_service import create_app

# Create the Flask application instance
# This will be invoked by the Python runtime for each request
app = create_app()

# The runtime detects the WSGI callable through the name 'app'
