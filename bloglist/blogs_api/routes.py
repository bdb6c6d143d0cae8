from apifairy import authenticate, body, other_responses, response
from flask import abort, current_app

from bloglist import database, token_auth
from bloglist.list_helper import (favorite_blog, most_blogs, most_likes,
                                  total_likes)
from bloglist.models import Blog
from bloglist.schemas import (BlogSchema, BlogStatsSchema, NewBlogSchema,
                              UpdateBlogSchema)

from . import blogs_api_blueprint


# -------
# Schemas
# -------

new_blog_schema = NewBlogSchema()
update_blog_schema = UpdateBlogSchema()
blog_schema = BlogSchema()
blogs_schema = BlogSchema(many=True)
blog_stats_schema = BlogStatsSchema()


# ------
# Routes
# ------

@blogs_api_blueprint.route('/', methods=['GET'])
@response(blogs_schema)
def blog_list():
    """Return all blog posts"""
    return Blog.query.order_by(Blog.id).all()


@blogs_api_blueprint.route('/', methods=['POST'])
@authenticate(token_auth)
@body(new_blog_schema)
@response(blog_schema, 201)
@other_responses({400: 'Bad Request', 401: 'Invalid authentication token'})
def add_blog(kwargs):
    """Add a new blog post"""
    user = token_auth.current_user()
    new_blog = Blog(user_id=user.id, **kwargs)
    database.session.add(new_blog)
    database.session.commit()
    current_app.logger.info(f'Blog added by {user.username}: {new_blog.title}')
    return new_blog


@blogs_api_blueprint.route('/stats', methods=['GET'])
@response(blog_stats_schema)
def blog_stats():
    """Return statistics over all blog posts"""
    blogs = Blog.query.order_by(Blog.id).all()
    return {
        'total_likes': total_likes(blogs),
        'favorite_blog': favorite_blog(blogs),
        'most_blogs': most_blogs(blogs),
        'most_likes': most_likes(blogs),
    }


@blogs_api_blueprint.route('/<int:index>', methods=['GET'])
@response(blog_schema)
@other_responses({404: 'Blog not found'})
def get_blog(index):
    """Retrieve a blog post"""
    return Blog.query.filter_by(id=index).first_or_404()


@blogs_api_blueprint.route('/<int:index>', methods=['PUT'])
@body(update_blog_schema)
@response(blog_schema)
@other_responses({400: 'Bad Request', 404: 'Blog not found'})
def update_blog(data, index):
    """Update a blog post"""
    blog = Blog.query.filter_by(id=index).first_or_404()
    blog.update(**data)
    database.session.add(blog)
    database.session.commit()
    current_app.logger.info(f'Blog updated: {blog.title} ({blog.likes} likes)')
    return blog


@blogs_api_blueprint.route('/<int:index>', methods=['DELETE'])
@authenticate(token_auth)
@other_responses({401: 'Invalid authentication token', 403: 'Blog owned by another user', 404: 'Blog not found'})
def delete_blog(index):
    """Delete a blog post"""
    user = token_auth.current_user()
    blog = Blog.query.filter_by(id=index).first_or_404()

    if not blog.is_owned_by(user):
        current_app.logger.info(f'User {user.username} attempted to delete blog {blog.id} owned by another user')
        abort(403)

    database.session.delete(blog)
    database.session.commit()
    current_app.logger.info(f'Blog deleted by {user.username}: {blog.title}')
    return '', 204
