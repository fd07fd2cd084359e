import os
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from casarubia.models.reservation import db
from casarubia.routes.room import room_bp
from casarubia.routes.reservation import reservation_bp


def create_app(config=None):
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'casa-rubia-dev-secret')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///reservas.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['CORS_ORIGINS'] = os.getenv('CORS_ORIGINS', '*')
    if config:
        app.config.update(config)

    # Initialize extensions
    db.init_app(app)
    CORS(
        app,
        resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}},
        send_wildcard=app.config['CORS_ORIGINS'] == '*'
    )

    # Register blueprints
    app.register_blueprint(room_bp, url_prefix='/api')
    app.register_blueprint(reservation_bp, url_prefix='/api')

    # Create database tables
    with app.app_context():
        db.create_all()

    register_error_handlers(app)
    return app


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'The requested resource was not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(Exception)
    def server_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code
        app.logger.exception('Unhandled error while serving request')
        db.session.rollback()
        return jsonify({'error': 'An internal server error occurred'}), 500


def run(host=None, port=None, debug=False):
    app = create_app()
    host = host or os.getenv('HOST', '0.0.0.0')
    port = int(port or os.getenv('PORT', 3000))
    app.logger.info('Casa Rubia server listening on port %s', port)
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    run(debug=True)
