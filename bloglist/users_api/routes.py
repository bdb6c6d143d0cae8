import click
from apifairy import authenticate, body, other_responses, response
from flask import abort, current_app
from sqlalchemy.exc import IntegrityError

from bloglist import basic_auth, database, token_auth
from bloglist.models import User
from bloglist.schemas import NewUserSchema, TokenSchema, UserSchema

from . import users_api_blueprint


# -------
# Schemas
# -------

new_user_schema = NewUserSchema()
user_schema = UserSchema()
users_schema = UserSchema(many=True)
token_schema = TokenSchema()


# ------------
# CLI Commands
# ------------

@users_api_blueprint.cli.command('create_user')
@click.argument('username')
@click.argument('password')
@click.option('--name', default=None, help='Full name of the user')
def create(username, password, name):
    """Create a new user and add it to the database."""
    new_user = User(username, password, name=name)
    database.session.add(new_user)
    database.session.commit()
    click.echo(f'Created new user ({username})!')


# ------
# Routes
# ------

@users_api_blueprint.route('/', methods=['POST'])
@body(new_user_schema)
@response(user_schema, 201)
@other_responses({400: 'Bad Request'})
def register(kwargs):
    """Create a new user"""
    try:
        new_user = User(**kwargs)
        database.session.add(new_user)
        database.session.commit()
    except IntegrityError:
        database.session.rollback()
        current_app.logger.info(f"Registration attempted with a duplicate username: {kwargs['username']}")
        abort(400, 'Username must be unique.')

    current_app.logger.info(f'Registered new user: {new_user.username}')
    return new_user


@users_api_blueprint.route('/', methods=['GET'])
@response(users_schema)
def user_list():
    """Return all users along with their blog posts"""
    return User.query.order_by(User.id).all()


@users_api_blueprint.route('/get-auth-token', methods=['POST'])
@authenticate(basic_auth)
@response(token_schema)
@other_responses({401: 'Invalid username or password'})
def get_auth_token():
    """Get authentication token"""
    user = basic_auth.current_user()
    token = user.generate_auth_token()
    current_app.logger.info(f'Authentication token issued for: {user.username}')
    return dict(token=token)


@users_api_blueprint.route('/account', methods=['GET'])
@authenticate(token_auth)
@response(user_schema)
def user_profile():
    """Retrieve the user profile"""
    return token_auth.current_user()
