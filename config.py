import os


class Config:
    """Base configuration"""

    # JSON Settings
    JSON_AS_ASCII = False

    # Site Settings
    SITE_URL = os.environ.get('SITE_URL')  # absolute links in sitemap.xml; request root if unset
    SITE_NAME = os.environ.get('SITE_NAME', 'YourName.dev')
    OWNER_NAME = os.environ.get('OWNER_NAME', 'Your Name')

    # Contact Settings
    # Seconds the contact endpoint waits to emulate asynchronous processing
    CONTACT_SIMULATED_DELAY = float(os.environ.get('CONTACT_SIMULATED_DELAY', '1.0'))

    # Admin Notification Settings (optional forwarding of contact messages)
    ADMIN_TELEGRAM_BOT_TOKEN = os.environ.get('ADMIN_TELEGRAM_BOT_TOKEN')
    ADMIN_TELEGRAM_CHAT_ID = os.environ.get('ADMIN_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    CONTACT_SIMULATED_DELAY = 0
    # Never forward messages from the test suite
    ADMIN_TELEGRAM_BOT_TOKEN = None
    ADMIN_TELEGRAM_CHAT_ID = None


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
