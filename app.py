"""
Portfolio Contact Service - Main Application Entry Point
Built with the Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration, contact store and middleware. Route handling is delegated
to blueprints.
"""

import os
import logging
from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import db
from utils.security import RateLimiter
from utils.store import build_store

from blueprints.api import api_bp


def create_app(config_name=None, store=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store (ContactStore): Contact store to use instead of the
            configured backend (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    # Client IPs come from X-Forwarded-For only behind configured proxies
    proxy_count = app.config.get('TRUST_PROXY_COUNT', 0)
    if proxy_count:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_count)

    # Initialize extensions with app
    initialize_extensions(app)

    # Contact store and rate limiter live for the lifetime of the app
    app.extensions['contact_store'] = store if store is not None else build_store(app)
    app.extensions['contact_rate_limiter'] = RateLimiter(
        max_requests=app.config['CONTACT_RATE_LIMIT'],
        window=app.config['CONTACT_RATE_WINDOW'])
    app.logger.info(f"✓ Contact store ready: {type(app.extensions['contact_store']).__name__}")

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    if app.config.get('CONTACT_STORE') != 'database':
        return

    # Create tables if they don't exist
    with app.app_context():
        from sqlalchemy import text
        from sqlalchemy.exc import SQLAlchemyError
        import models  # noqa: F401  registers ContactMessage on db.metadata
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({'success': False, 'message': 'Bad request'}), 400

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({'success': False, 'message': 'Request is too large'}), 413

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'success': False, 'message': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
