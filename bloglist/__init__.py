"""
Welcome to the documentation for the Blog List API!

## Introduction

The Blog List API is an API (Application Programming Interface) for sharing **blog posts** worth reading,
along with the number of likes each post has received.

## Key Functionality

The Blog List API has the following functionality:

1. Work with blog posts:
  * Add a new blog post (authenticated users only)
  * Update a blog post (for example, its likes)
  * Delete a blog post (only the user that added it)
  * View all blog posts
  * View statistics (total likes, favorite blog, most prolific author, most liked author)
2. User management:
  * Register new users
  * Retrieve authentication token

## Key Modules

The project utilizes the following modules:

* **Flask**: micro-framework for web application development which includes the following dependencies:
  * **click**: package for creating command-line interfaces (CLI)
  * **itsdangerous**: cryptographically sign data
  * **Werkzeug**: set of utilities for creating a Python application that can talk to a WSGI server
* **APIFairy**: API framework for Flask which includes the following dependencies:
  * **Flask-Marshmallow** - Flask extension for using Marshmallow (object serialization/deserialization library)
  * **Flask-HTTPAuth** - Flask extension for HTTP authentication
  * **apispec** - API specification generator that supports the OpenAPI specification
* **Flask-SQLAlchemy** and **Flask-Migrate**: database access and migrations
* **pytest**: framework for testing Python projects
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from apifairy import APIFairy
from click import echo
from flask import Flask, json
from flask.logging import default_handler
from flask_httpauth import HTTPBasicAuth, HTTPTokenAuth
from flask_marshmallow import Marshmallow
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData
from werkzeug.exceptions import HTTPException


# -------------
# Configuration
# -------------

# Create a naming convention for the database tables
convention = {
    "ix": 'ix_%(column_0_label)s',
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}
metadata = MetaData(naming_convention=convention)

# Create the instances of the Flask extensions in the global scope,
# but without any arguments passed in. These instances are not
# attached to the Flask application at this point.
apifairy = APIFairy()
ma = Marshmallow()
database = SQLAlchemy(metadata=metadata)
db_migration = Migrate()
basic_auth = HTTPBasicAuth()
token_auth = HTTPTokenAuth(scheme='Bearer')


# ----------------------------
# Application Factory Function
# ----------------------------

def create_app():
    # Create the Flask application
    app = Flask(__name__)

    # Configure the Flask application
    config_type = os.getenv('CONFIG_TYPE', default='config.DevelopmentConfig')
    app.config.from_object(config_type)
    os.makedirs(app.config['INSTANCE_FOLDER'], exist_ok=True)

    initialize_extensions(app)
    register_blueprints(app)
    configure_logging(app)
    register_error_handlers(app)
    register_cli_commands(app)
    return app


# ----------------
# Helper Functions
# ----------------

def initialize_extensions(app):
    # Since the application instance is now created, pass it to each Flask
    # extension instance to bind it to the Flask application instance (app)
    apifairy.init_app(app)
    ma.init_app(app)
    database.init_app(app)
    db_migration.init_app(app, database, render_as_batch=True)


def register_blueprints(app):
    # Import the blueprints
    from bloglist.blogs_api import blogs_api_blueprint
    from bloglist.users_api import users_api_blueprint

    # Since the application instance is now created, register each Blueprint
    # with the Flask application instance (app)
    app.register_blueprint(blogs_api_blueprint, url_prefix='/api/blogs')
    app.register_blueprint(users_api_blueprint, url_prefix='/api/users')


def configure_logging(app):
    if app.config['LOG_TO_STDOUT']:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.INFO)
        app.logger.addHandler(stream_handler)
    else:
        file_handler = RotatingFileHandler(os.path.join(app.config['INSTANCE_FOLDER'], 'bloglist-api.log'),
                                           maxBytes=16384,
                                           backupCount=20)
        file_formatter = logging.Formatter('%(asctime)s %(levelname)s %(threadName)s-%(thread)d: %(message)s [in %(filename)s:%(lineno)d]')
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

    # Remove the default logger configured by Flask
    app.logger.removeHandler(default_handler)
    app.logger.setLevel(logging.INFO)
    app.logger.info('Starting the Blog List API...')


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Return JSON instead of HTML for HTTP errors."""
        # Start with the correct headers and status code from the error
        response = e.get_response()
        # Replace the body with JSON
        response.data = json.dumps({
            'code': e.code,
            'name': e.name,
            'description': e.description,
        })
        response.content_type = 'application/json'
        return response

    @apifairy.error_handler
    def handle_validation_error(status_code, messages):
        """Return the field errors from a request that failed validation."""
        return {
            'code': status_code,
            'name': 'Validation Error',
            'description': 'The request body or query string is invalid.',
            'errors': messages,
        }, status_code


def register_cli_commands(app):
    @app.cli.command('init_db')
    def initialize_database():
        """Initialize the database."""
        database.drop_all()
        database.create_all()
        echo('Initializing the database!')

    @app.cli.command('fill_db')
    def fill_database():
        """Fill the database with initial data."""
        from bloglist.models import Blog, User

        # Add a default set of users to the database
        new_users = [
            User(username='mluukkai', password_plaintext='salainen', name='Matti Luukkainen'),
            User(username='hellas', password_plaintext='FlaskIsTheBest456', name='Arto Hellas')
        ]
        for user in new_users:
            database.session.add(user)
        database.session.commit()

        # Add the classic set of blog posts to the database
        owner = new_users[0]
        new_blogs = [
            Blog(title='React patterns', author='Michael Chan', url='https://reactpatterns.com/', likes=7, user_id=owner.id),
            Blog(title='Go To Statement Considered Harmful', author='Edsger W. Dijkstra',
                 url='http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html', likes=5, user_id=owner.id),
            Blog(title='Canonical string reduction', author='Edsger W. Dijkstra',
                 url='http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html', likes=12, user_id=owner.id),
            Blog(title='First class tests', author='Robert C. Martin',
                 url='http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll', likes=10, user_id=owner.id),
            Blog(title='TDD harms architecture', author='Robert C. Martin',
                 url='http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html', likes=0, user_id=owner.id),
            Blog(title='Type wars', author='Robert C. Martin',
                 url='http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html', likes=2, user_id=owner.id)
        ]
        for blog in new_blogs:
            database.session.add(blog)

        database.session.commit()
        echo(f'Filled the database with {len(new_users)} users and {len(new_blogs)} blogs!')
