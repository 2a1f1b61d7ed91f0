"""
rpel.db.repositories.posts

Repository for `Post` entities. Regular and GO posts share the table; the
`go` flag is written and listed like any other column.
"""

from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import Post, PostList


class PostRepo(CrudRepo[Post, PostList]):
    model = models.Post
    record = Post
    list_record = PostList
    entity = "post"
