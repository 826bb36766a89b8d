"""
Configuration settings for Financial Metric Forecasting
"""

import os


class Config:
    """Base configuration"""
    # App
    APP_NAME = "Financial Metric Forecasting"
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Holt-Winters forecaster
    FORECAST_HORIZON_MONTHS = int(os.environ.get('FORECAST_HORIZON_MONTHS', '12'))
    FORECAST_CONFIDENCE_LEVEL = float(os.environ.get('FORECAST_CONFIDENCE_LEVEL', '0.95'))
    FORECAST_SEASONAL_PERIOD = int(os.environ.get('FORECAST_SEASONAL_PERIOD', '12'))

    # Anomaly detection
    ANOMALY_THRESHOLD_STD_DEVS = float(os.environ.get('ANOMALY_THRESHOLD_STD_DEVS', '2.0'))

    # Burn rate
    BURN_PREDICTION_MONTHS = int(os.environ.get('BURN_PREDICTION_MONTHS', '12'))

    # Demo data
    DEMO_SEED = None


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    FORECAST_HORIZON_MONTHS = 6
    FORECAST_CONFIDENCE_LEVEL = 0.95
    FORECAST_SEASONAL_PERIOD = 12
    ANOMALY_THRESHOLD_STD_DEVS = 2.0
    BURN_PREDICTION_MONTHS = 3
    DEMO_SEED = 42


# Config mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get config based on environment"""
    env = os.environ.get('FINFORECAST_ENV', 'development')
    return config.get(env, config['default'])
