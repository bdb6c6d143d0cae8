from datetime import datetime

from flask import current_app
from itsdangerous import URLSafeTimedSerializer
from itsdangerous.exc import BadSignature
from werkzeug.security import check_password_hash, generate_password_hash

from bloglist import database


class Blog(database.Model):
    """
    Class that represents a blog post.

    The following attributes of a blog post are stored in this table:
        * title - title of the blog post
        * author - author of the blog post
        * url - link to the blog post
        * likes - number of likes the blog post has received
        * user_id - ID of the user that added this blog post
        * created_on - date and time (in UTC) when the blog post was added
    """
    __tablename__ = 'blogs'

    id = database.Column(database.Integer, primary_key=True)
    title = database.Column(database.String, nullable=False)
    author = database.Column(database.String)
    url = database.Column(database.String, nullable=False)
    likes = database.Column(database.Integer, nullable=False, default=0)
    user_id = database.Column(database.Integer, database.ForeignKey('users.id'))
    created_on = database.Column(database.DateTime)

    def __init__(self, title: str, url: str, author: str = None, likes: int = 0, user_id: int = None):
        """Create a new blog post."""
        self.title = title
        self.author = author
        self.url = url
        self.likes = likes
        self.user_id = user_id
        self.created_on = datetime.utcnow()

    def update(self, **fields):
        """Update the given fields of the blog post."""
        for name in ('title', 'author', 'url', 'likes'):
            if name in fields:
                setattr(self, name, fields[name])

    def is_owned_by(self, user) -> bool:
        return user is not None and self.user_id == user.id

    def __repr__(self):
        return f"<Blog: {self.title}>"


class User(database.Model):
    """
    Class that represents a user of the application.

    The following attributes of a user are stored in this table:
        * username - unique name used to log in
        * name - full name of the user
        * hashed password - hashed password (using werkzeug.security)
        * registered_on - date and time (in UTC) when the user registered

    Authentication tokens are not stored: they are signed with the
    application's SECRET_KEY and carry the ID of the user.

    REMEMBER: Never store the plaintext password in a database!
    """
    __tablename__ = 'users'

    id = database.Column(database.Integer, primary_key=True)
    username = database.Column(database.String, unique=True, nullable=False)
    name = database.Column(database.String)
    password_hashed = database.Column(database.String(256), nullable=False)
    blogs = database.relationship('Blog', backref='user', order_by='Blog.id')
    registered_on = database.Column(database.DateTime)

    def __init__(self, username: str, password_plaintext: str, name: str = None):
        """Create a new User object."""
        self.username = username
        self.name = name
        self.password_hashed = self._generate_password_hash(password_plaintext)
        self.registered_on = datetime.utcnow()

    def is_password_correct(self, password_plaintext: str):
        return check_password_hash(self.password_hashed, password_plaintext)

    def set_password(self, password_plaintext: str):
        self.password_hashed = self._generate_password_hash(password_plaintext)

    @staticmethod
    def _generate_password_hash(password_plaintext):
        return generate_password_hash(password_plaintext)

    @staticmethod
    def _token_serializer():
        return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt='auth-token-salt')

    def generate_auth_token(self):
        return self._token_serializer().dumps({'id': self.id, 'username': self.username})

    @staticmethod
    def verify_auth_token(auth_token):
        try:
            data = User._token_serializer().loads(auth_token,
                                                  max_age=current_app.config['AUTH_TOKEN_MAX_AGE'])
        except BadSignature:
            current_app.logger.info('Invalid or expired authentication token received.')
            return None

        user = database.session.get(User, data.get('id'))
        if user and user.username == data.get('username'):
            return user
        return None

    def __repr__(self):
        return f'<User: {self.username}>'
