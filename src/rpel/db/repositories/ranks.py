from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import Rank, RankList


class RankRepo(CrudRepo[Rank, RankList]):
    model = models.Rank
    record = Rank
    list_record = RankList
    entity = "rank"
