from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import Kind, KindList


class KindRepo(CrudRepo[Kind, KindList]):
    model = models.Kind
    record = Kind
    list_record = KindList
    entity = "kind"
