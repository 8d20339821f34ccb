import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class"""

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    DEBUG = os.getenv("DEBUG", "True") == "True"

    # Comma separated list of frontend origins allowed by CORS
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")

    # Remote fallback translator: "llm" (LLM provider), "http" (translation endpoint)
    # or empty to disable the AI fallback entirely
    REMOTE_TRANSLATOR = os.getenv("REMOTE_TRANSLATOR", "llm")

    # LLM provider used by the "llm" translator (the API key is read by the provider)
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "mistral")

    # Endpoint used by the "http" translator
    TRANSLATION_ENDPOINT_URL = os.getenv("TRANSLATION_ENDPOINT_URL")
    TRANSLATION_API_KEY = os.getenv("TRANSLATION_API_KEY")
    TRANSLATION_TIMEOUT = float(os.getenv("TRANSLATION_TIMEOUT", "30"))

    # Share of dictionary hits above which the AI fallback is skipped
    CONFIDENCE_THRESHOLD = float(os.getenv("CONFIDENCE_THRESHOLD", "0.3"))

    FREE_TRANSLATIONS_LIMIT = int(os.getenv("FREE_TRANSLATIONS_LIMIT", "10"))


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False


class TestingConfig(Config):
    """Testing environment configuration"""

    TESTING = True
    DEBUG = True
    # No outbound calls from tests; the resolver degrades to the vocabulary result
    REMOTE_TRANSLATOR = None


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
