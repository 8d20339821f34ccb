import logging
import os

from config import config
from flask import Flask, jsonify
from flask_cors import CORS


def create_app(config_name=None):
    """Application factory pattern"""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Initialize CORS for React frontend
    CORS(
        app,
        resources={
            r"/api/*": {"origins": app.config["ALLOWED_ORIGINS"]},
            r"/translation/*": {"origins": app.config["ALLOWED_ORIGINS"]},
        },
    )

    # Build the translation pipeline once; the remote translator is created lazily
    from services.translation_service import TranslationResolver, get_remote_translator

    app.extensions["translation_resolver"] = TranslationResolver(
        remote_translator=get_remote_translator(app.config),
        confidence_threshold=app.config["CONFIDENCE_THRESHOLD"],
    )

    # Register API blueprints
    from routes.api import bp as api_bp
    from routes.translation import bp as translation_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(translation_bp)

    # Home route
    @app.route("/")
    def home():
        return jsonify({"message": "Welcome to NoCrioulo!", "version": "1.0.0"})

    # Health check route
    @app.route("/health")
    def health_check():
        from services.vocabulary_service import vocabulary_service

        return jsonify({
            "status": "healthy",
            "vocabulary": {
                "pt_to_kriol": len(vocabulary_service.pt_to_kriol),
                "kriol_to_pt": len(vocabulary_service.kriol_to_pt),
                "phrases": len(vocabulary_service.phrases),
            },
            "remote_translator": app.config["REMOTE_TRANSLATOR"] or "disabled",
        }), 200

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s - %(name)s - %(message)s'
    )
    app = create_app()
    app.run(debug=True, port=5001)
