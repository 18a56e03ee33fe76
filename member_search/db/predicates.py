"""Условия WHERE для поиска участников.

Каждая функция возвращает условие или None, если значение не задано.
``select().where(*search_predicates(condition))`` объединяет через AND только
заданные поля.
"""

from typing import Optional

from sqlalchemy import ColumnElement, and_, true

from member_search.db.models import Member, Team
from member_search.schemas.member import MemberSearchCondition


def has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def username_eq(username: Optional[str]) -> Optional[ColumnElement[bool]]:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: Optional[str]) -> Optional[ColumnElement[bool]]:
    return Team.name == team_name if has_text(team_name) else None


def age_goe(age: Optional[int]) -> Optional[ColumnElement[bool]]:
    return Member.age >= age if age is not None else None


def age_loe(age: Optional[int]) -> Optional[ColumnElement[bool]]:
    return Member.age <= age if age is not None else None


def search_predicates(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
    """Заданные условия поиска в порядке username, teamName, ageGoe, ageLoe."""
    clauses = (
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    )
    return [clause for clause in clauses if clause is not None]


def build_search_clause(condition: MemberSearchCondition) -> ColumnElement[bool]:
    """То же условие, накопленное по одному полю за раз."""
    clause = true()
    if has_text(condition.username):
        clause = and_(clause, Member.username == condition.username)
    if has_text(condition.team_name):
        clause = and_(clause, Team.name == condition.team_name)
    if condition.age_goe is not None:
        clause = and_(clause, Member.age >= condition.age_goe)
    if condition.age_loe is not None:
        clause = and_(clause, Member.age <= condition.age_loe)
    return clause


def references_team(condition: MemberSearchCondition) -> bool:
    """Ссылается ли условие на поля Team (тогда count-запросу нужен join)."""
    return has_text(condition.team_name)
