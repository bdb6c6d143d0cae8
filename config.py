import os


# Determine the folder of the top-level directory of this project
BASEDIR = os.path.abspath(os.path.dirname(__file__))
INSTANCE_FOLDER = os.path.join(BASEDIR, 'instance')


class Config(object):
    FLASK_ENV = 'development'
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv('SECRET_KEY', default='BAD_SECRET_KEY')
    # Since SQLAlchemy 1.4.x has removed support for the 'postgres://' URI scheme,
    # update the URI to the postgres database to use the supported 'postgresql://' scheme
    if os.getenv('DATABASE_URL'):
        SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL').replace("postgres://", "postgresql://", 1)
    else:
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{os.path.join(INSTANCE_FOLDER, 'app.db')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Folder holding the SQLite database and the log files
    INSTANCE_FOLDER = INSTANCE_FOLDER
    # Logging
    LOG_TO_STDOUT = os.getenv('LOG_TO_STDOUT', default=False)
    # Lifetime (in seconds) of an authentication token
    AUTH_TOKEN_MAX_AGE = int(os.getenv('AUTH_TOKEN_MAX_AGE', default=3600))
    # APIFairy
    APIFAIRY_TITLE = 'Blog List API'
    APIFAIRY_VERSION = '0.1'
    APIFAIRY_UI = 'elements'


class ProductionConfig(Config):
    FLASK_ENV = 'production'


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv('TEST_DATABASE_URI', default='sqlite://')
    LOG_TO_STDOUT = True
    SECRET_KEY = 'testing-secret-key'
