"""Siren type reference table (name, coverage radius)."""

from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import SirenType, SirenTypeList


class SirenTypeRepo(CrudRepo[SirenType, SirenTypeList]):
    model = models.SirenType
    record = SirenType
    list_record = SirenTypeList
    entity = "siren type"
