from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import User, UserList


class UserRepo(CrudRepo[User, UserList]):
    model = models.User
    record = User
    list_record = UserList
    entity = "user"
