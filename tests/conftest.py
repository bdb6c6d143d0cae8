import os
from base64 import b64encode

import pytest

from bloglist import create_app, database
from bloglist.models import Blog, User


# --------
# Fixtures
# --------

@pytest.fixture(scope='module')
def new_user():
    user = User('mluukkai', 'salainen', name='Matti Luukkainen')
    return user


@pytest.fixture(scope='module')
def new_blog():
    blog = Blog('React patterns', 'https://reactpatterns.com/', author='Michael Chan', likes=7)
    return blog


@pytest.fixture(scope='module')
def list_with_one_blog():
    return [
        {
            'title': 'Go To Statement Considered Harmful',
            'author': 'Edsger W. Dijkstra',
            'url': 'https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf',
            'likes': 5,
        },
    ]


@pytest.fixture(scope='module')
def list_with_six_blogs():
    return [
        {'title': 'React patterns', 'author': 'Michael Chan',
         'url': 'https://reactpatterns.com/', 'likes': 7},
        {'title': 'Go To Statement Considered Harmful', 'author': 'Edsger W. Dijkstra',
         'url': 'http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html', 'likes': 5},
        {'title': 'Canonical string reduction', 'author': 'Edsger W. Dijkstra',
         'url': 'http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html', 'likes': 12},
        {'title': 'First class tests', 'author': 'Robert C. Martin',
         'url': 'http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll', 'likes': 10},
        {'title': 'TDD harms architecture', 'author': 'Robert C. Martin',
         'url': 'http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html', 'likes': 0},
        {'title': 'Type wars', 'author': 'Robert C. Martin',
         'url': 'http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html', 'likes': 2},
    ]


@pytest.fixture(scope='function')
def test_client():
    # Set the Testing configuration prior to creating the Flask application
    os.environ['CONFIG_TYPE'] = 'config.TestingConfig'
    flask_app = create_app()

    # Create a test client using the Flask application configured for testing
    with flask_app.test_client() as testing_client:
        # Establish an application context and create the database tables
        with flask_app.app_context():
            database.create_all()
            yield testing_client  # this is where the testing happens!
            database.session.remove()
            database.drop_all()


def basic_auth_headers(username, password):
    credentials = b64encode(f'{username}:{password}'.encode('utf-8')).decode('utf-8')
    return {'Authorization': f'Basic {credentials}'}


def get_token_headers(client, username, password):
    response = client.post('/api/users/get-auth-token', headers=basic_auth_headers(username, password))
    return {'Authorization': f"Bearer {response.get_json()['token']}"}


@pytest.fixture(scope='function')
def register_default_user(test_client):
    test_client.post('/api/users/', json={'username': 'mluukkai',
                                          'name': 'Matti Luukkainen',
                                          'password_plaintext': 'salainen'})
    return


@pytest.fixture(scope='function')
def register_second_user(test_client):
    test_client.post('/api/users/', json={'username': 'hellas',
                                          'name': 'Arto Hellas',
                                          'password_plaintext': 'FlaskIsTheBest456'})
    return


@pytest.fixture(scope='function')
def default_user_token(test_client, register_default_user):
    return get_token_headers(test_client, 'mluukkai', 'salainen')


@pytest.fixture(scope='function')
def second_user_token(test_client, register_second_user):
    return get_token_headers(test_client, 'hellas', 'FlaskIsTheBest456')


@pytest.fixture(scope='function')
def add_blogs(test_client, default_user_token, list_with_six_blogs):
    # Add the six blogs as the default user
    for blog in list_with_six_blogs:
        test_client.post('/api/blogs/', json=blog, headers=default_user_token)
    return
