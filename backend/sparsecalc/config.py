import os


class Config:
    """Base configuration, read from the environment"""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    MATRIX_OUTPUT_DIR = os.environ.get('MATRIX_OUTPUT_DIR', '.')
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_BYTES', 2 * 1024 * 1024))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = 'WARNING'
    LOG_FILE = None


config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
}
