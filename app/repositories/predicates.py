"""회원 검색 조건절 — 동적 쿼리용 조건 함수 모음.

Member search predicates — building blocks for dynamic queries.
Each function maps one optional condition value to either a SQLAlchemy
clause or None. None means "no constraint" and is dropped when the clauses
are combined, so a condition with every field absent matches all rows.

The functions are pure: they read only their argument and return a new
clause object, so they can be reused freely across concurrent requests.

Usage:
    query = select(Member).outerjoin(Member.team).where(*build_where(condition))
"""

from typing import Callable

from sqlalchemy import ColumnElement, and_, true

from app.models.member import Member
from app.models.team import Team
from app.schemas.member import MemberSearchCondition

# 조건 하나를 절 하나(또는 None)로 변환하는 함수 타입
# A predicate factory: condition -> clause or None
ConditionPredicate = Callable[[MemberSearchCondition], ColumnElement[bool] | None]


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def username_eq(username: str | None) -> ColumnElement[bool] | None:
    """회원 이름 일치 조건 (member.username = :username). 빈 문자열은 조건 없음."""
    return Member.username == username if _has_text(username) else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    """팀 이름 일치 조건 (team.name = :team_name). 빈 문자열은 조건 없음."""
    return Team.name == team_name if _has_text(team_name) else None


def age_eq(age: int | None) -> ColumnElement[bool] | None:
    """나이 일치 조건 (member.age = :age)."""
    return Member.age == age if age is not None else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    """나이 하한 조건 (member.age >= :age)."""
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    """나이 상한 조건 (member.age <= :age)."""
    return Member.age <= age if age is not None else None


def all_of(*clauses: ColumnElement[bool] | None) -> ColumnElement[bool]:
    """존재하는 절만 AND로 결합합니다.

    Combine the present clauses with AND, skipping None.
    With nothing present the result is ``true()``, which matches every row.
    """
    present: list[ColumnElement[bool]] = [c for c in clauses if c is not None]
    if not present:
        return true()
    if len(present) == 1:
        return present[0]
    return and_(*present)


def age_between(goe: int | None, loe: int | None) -> ColumnElement[bool] | None:
    """나이 범위 조건 — 양 끝 모두 선택값, 포함 범위.

    Inclusive age range; either bound may be absent. Returns None when both are.
    """
    if goe is None and loe is None:
        return None
    return all_of(age_goe(goe), age_loe(loe))


# 검색 조건에 적용되는 조건 함수 목록 — 순서는 생성되는 SQL의 WHERE 순서
# Predicates applied to a MemberSearchCondition; order only affects the SQL text
MEMBER_SEARCH_PREDICATES: tuple[ConditionPredicate, ...] = (
    lambda c: username_eq(c.username),
    lambda c: team_name_eq(c.team_name),
    lambda c: age_goe(c.age_goe),
    lambda c: age_loe(c.age_loe),
)


def build_where(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
    """검색 조건을 WHERE 절 목록으로 변환합니다.

    Translate a search condition into its list of WHERE clauses.
    Absent fields produce nothing; ``select().where(*[])`` is unconstrained.

    Args:
        condition: 회원 검색 조건 (Member search condition)

    Returns:
        list[ColumnElement[bool]]: 존재하는 조건절 목록 (Present clauses, in order)
    """
    clauses: list[ColumnElement[bool]] = []
    for predicate in MEMBER_SEARCH_PREDICATES:
        clause: ColumnElement[bool] | None = predicate(condition)
        if clause is not None:
            clauses.append(clause)
    return clauses


def references_team(condition: MemberSearchCondition) -> bool:
    """조건이 팀 컬럼을 참조하는지 여부 — count 쿼리의 조인 생략 판단용.

    Whether the condition filters on a team column. When it does not, the
    count query can skip the join entirely.
    """
    return _has_text(condition.team_name)
