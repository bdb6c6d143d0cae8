from marshmallow import validate

from bloglist import ma


# -------
# Schemas
# -------

class NewBlogSchema(ma.Schema):
    """Schema defining the attributes when adding a new blog post."""
    title = ma.String(required=True, validate=validate.Length(min=1))
    author = ma.String()
    url = ma.String(required=True, validate=validate.Length(min=1))
    likes = ma.Integer(load_default=0, validate=validate.Range(min=0))


class UpdateBlogSchema(ma.Schema):
    """Schema defining the attributes that can be changed in a blog post."""
    title = ma.String(validate=validate.Length(min=1))
    author = ma.String()
    url = ma.String(validate=validate.Length(min=1))
    likes = ma.Integer(validate=validate.Range(min=0))


class BlogOwnerSchema(ma.Schema):
    """Schema defining the attributes of the user that added a blog post."""
    id = ma.Integer()
    username = ma.String()
    name = ma.String()


class BlogSchema(ma.Schema):
    """Schema defining the attributes in a blog post."""
    id = ma.Integer()
    title = ma.String()
    author = ma.String()
    url = ma.String()
    likes = ma.Integer()
    user = ma.Nested(BlogOwnerSchema)
    created_on = ma.DateTime()


class UserBlogSchema(ma.Schema):
    """Schema defining the attributes of a blog post listed under its user."""
    id = ma.Integer()
    title = ma.String()
    author = ma.String()
    url = ma.String()
    likes = ma.Integer()


class NewUserSchema(ma.Schema):
    """Schema defining the attributes when creating a new user."""
    username = ma.String(required=True, validate=validate.Length(min=3))
    name = ma.String()
    password_plaintext = ma.String(required=True, validate=validate.Length(min=3))


class UserSchema(ma.Schema):
    """Schema defining the attributes of a user."""
    id = ma.Integer()
    username = ma.String()
    name = ma.String()
    registered_on = ma.DateTime()
    blogs = ma.Nested(UserBlogSchema, many=True)


class TokenSchema(ma.Schema):
    """Schema defining the attributes of a token."""
    token = ma.String()


class FavoriteBlogSchema(ma.Schema):
    """Schema defining the summary of the most liked blog post."""
    title = ma.String()
    author = ma.String()
    likes = ma.Integer()


class BlogStatsSchema(ma.Schema):
    """Schema defining the statistics computed over all blog posts."""
    total_likes = ma.Integer()
    favorite_blog = ma.Nested(FavoriteBlogSchema)
    most_blogs = ma.String()
    most_likes = ma.String()
