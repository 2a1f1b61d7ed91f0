from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import Scope, ScopeList


class ScopeRepo(CrudRepo[Scope, ScopeList]):
    model = models.Scope
    record = Scope
    list_record = ScopeList
    entity = "scope"
