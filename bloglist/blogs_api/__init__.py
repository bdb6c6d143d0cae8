"""
The 'blogs_api' blueprint handles the API for managing blog posts.
Specifically, this blueprint allows for blog posts to be added, edited,
and deleted, as well as for statistics to be computed over all of them.
"""
from flask import Blueprint


blogs_api_blueprint = Blueprint('blogs_api', __name__)

from . import routes
