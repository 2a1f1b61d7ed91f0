from __future__ import annotations

from rpel.db import models
from rpel.db.repositories.base import CrudRepo
from rpel.schemas import Department, DepartmentList


class DepartmentRepo(CrudRepo[Department, DepartmentList]):
    model = models.Department
    record = Department
    list_record = DepartmentList
    entity = "department"
