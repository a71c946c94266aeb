import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Database Configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///salon.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = os.environ.get('SQLALCHEMY_ECHO', 'False').lower() in ('true', '1', 't')

    # Startup Configuration
    SEED_ON_STARTUP = os.environ.get('SEED_ON_STARTUP', 'True').lower() in ('true', '1', 't')
    WAIT_FOR_SEED = os.environ.get('WAIT_FOR_SEED', 'True').lower() in ('true', '1', 't')

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
