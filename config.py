import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Contact store backend: 'database' or 'memory'
    CONTACT_STORE = os.environ.get('CONTACT_STORE', 'database')

    # Contact form rate limiting (requests per window, per client IP)
    CONTACT_RATE_LIMIT = int(os.environ.get('CONTACT_RATE_LIMIT', '5'))
    CONTACT_RATE_WINDOW = int(os.environ.get('CONTACT_RATE_WINDOW', '60'))

    # Number of reverse proxies whose X-Forwarded-For is trusted (0: none)
    TRUST_PROXY_COUNT = int(os.environ.get('TRUST_PROXY_COUNT', '0'))

    # Resume download
    RESUME_PATH = os.environ.get(
        'RESUME_PATH',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), 'attached_assets', 'resume.pdf'))
    RESUME_DOWNLOAD_NAME = os.environ.get('RESUME_DOWNLOAD_NAME', 'Resume.pdf')

    # Request size
    MAX_CONTENT_LENGTH = 64 * 1024  # 64KB

    # JSON Settings
    JSON_AS_ASCII = False

    # Owner Notification Settings
    OWNER_TELEGRAM_BOT_TOKEN = os.environ.get('OWNER_TELEGRAM_BOT_TOKEN')
    OWNER_TELEGRAM_CHAT_ID = os.environ.get('OWNER_TELEGRAM_CHAT_ID')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite uses StaticPool; pool options would be rejected.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CONTACT_STORE = 'memory'
    OWNER_TELEGRAM_BOT_TOKEN = None
    OWNER_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
