"""Flask application factory."""
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
import os


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # app.logger is the 'alubill' logger, so service module loggers share its handler
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize Sentry for error tracking in production
    if app.config.get('SENTRY_DSN') and app.config.get('ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            environment=app.config.get('ENV'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Setup Prometheus metrics instrumentation
    from alubill.blueprints.metrics import setup_metrics_instrumentation
    setup_metrics_instrumentation(app)

    # Production: Enable ProxyFix for HTTPS behind Nginx reverse proxy
    if app.config.get('ENV') == 'production':
        from werkzeug.middleware.proxy_fix import ProxyFix
        app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_for=1,      # Trust X-Forwarded-For with 1 proxy
            x_proto=1,    # Trust X-Forwarded-Proto
            x_host=1,     # Trust X-Forwarded-Host
            x_port=1,     # Trust X-Forwarded-Port
            x_prefix=0    # No prefix (not behind a URL prefix)
        )

    # Error Handlers
    from alubill.exceptions import AppError

    @app.errorhandler(AppError)
    def handle_app_error(error):
        """Handle custom application exceptions."""
        if error.status_code >= 500:
            app.logger.error(f"AppError [{error.status_code}]: {error.message}")
        else:
            app.logger.warning(f"AppError [{error.status_code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'status': 'error', 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.exception(f"Unhandled Exception: {error}")
        return jsonify({'status': 'error', 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from alubill.blueprints.main import main_bp
    from alubill.blueprints.bills import bills_bp
    from alubill.blueprints.documents import documents_bp
    from alubill.blueprints.returns import returns_bp
    from alubill.blueprints.metrics import metrics_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(bills_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(returns_bp)
    app.register_blueprint(metrics_bp)

    # Register CLI commands
    from alubill.cli_commands import init_cli_commands
    init_cli_commands(app)

    app.logger.info(f"BUSINESS_NAME={app.config.get('BUSINESS_NAME')}")
    app.logger.info(f"DOCUMENT_NUMBER_DIGITS={app.config.get('DOCUMENT_NUMBER_DIGITS')}")

    return app
