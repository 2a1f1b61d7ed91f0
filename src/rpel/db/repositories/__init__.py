"""
rpel.db.repositories

Repository package.

Responsibilities:
- One repository per table (get/insert/update/delete/list), plus `SelectRepo`
  for dropdown options.
"""

from rpel.db.repositories.companies import CompanyRepo
from rpel.db.repositories.contacts import ContactRepo
from rpel.db.repositories.departments import DepartmentRepo
from rpel.db.repositories.educations import EducationRepo
from rpel.db.repositories.emails import EmailRepo
from rpel.db.repositories.kinds import KindRepo
from rpel.db.repositories.phones import PhoneRepo
from rpel.db.repositories.posts import PostRepo
from rpel.db.repositories.practices import PracticeRepo
from rpel.db.repositories.ranks import RankRepo
from rpel.db.repositories.scopes import ScopeRepo
from rpel.db.repositories.select import SelectRepo
from rpel.db.repositories.siren_types import SirenTypeRepo
from rpel.db.repositories.users import UserRepo

__all__ = [
    "CompanyRepo",
    "ContactRepo",
    "DepartmentRepo",
    "EducationRepo",
    "EmailRepo",
    "KindRepo",
    "PhoneRepo",
    "PostRepo",
    "PracticeRepo",
    "RankRepo",
    "ScopeRepo",
    "SelectRepo",
    "SirenTypeRepo",
    "UserRepo",
]


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; they never commit (see `db.session.session_scope`).
