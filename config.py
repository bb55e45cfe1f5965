"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '0') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Document numbering (PO-0001, INV-0001, ...)
    DOCUMENT_NUMBER_DIGITS = int(os.getenv('DOCUMENT_NUMBER_DIGITS', '4'))

    # Business Information (for bills and receipts)
    BUSINESS_NAME = os.getenv('BUSINESS_NAME', 'Aluminium Traders')
    CURRENCY_CODE = os.getenv('CURRENCY_CODE', 'PKR')

    # Error tracking (production only)
    SENTRY_DSN = os.getenv('SENTRY_DSN')
