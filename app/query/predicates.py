"""회원 검색 술어 조립기 — 선택적 조건을 AND로 결합.

Member search predicate composer.
Each optional search field has a dedicated single-field constructor that
returns None when the field is absent. The composer folds the present
predicates with AND in field-declaration order; when nothing is present
it returns None so the caller omits the WHERE clause entirely.

Usage:
    condition = MemberSearchCondition(age_goe=35, team_name="teamB")
    query = apply(select(Member).outerjoin(Member.team), compose(condition))
"""

from typing import Callable, TypeVar

from sqlalchemy import ColumnElement, Delete, Select, Update, and_

from app.models.member import Member
from app.models.team import Team
from app.schemas.member import MemberSearchCondition

# 단일 불리언 조건 — A single boolean SQL expression
Predicate = ColumnElement[bool]

StatementType = TypeVar("StatementType", Select, Update, Delete)


# ---------------------------------------------------------------------------
# 단일 필드 술어 — Single-field predicate constructors
# ---------------------------------------------------------------------------
def username_eq(username: str | None) -> Predicate | None:
    """이름 일치 조건 (username = :username)."""
    return (Member.username == username) if username is not None else None


def age_eq(age: int | None) -> Predicate | None:
    """나이 일치 조건 (age = :age)."""
    return (Member.age == age) if age is not None else None


def age_goe(age: int | None) -> Predicate | None:
    """최소 나이 조건 (age >= :age)."""
    return (Member.age >= age) if age is not None else None


def age_loe(age: int | None) -> Predicate | None:
    """최대 나이 조건 (age <= :age)."""
    return (Member.age <= age) if age is not None else None


def team_name_eq(team_name: str | None) -> Predicate | None:
    """팀 이름 일치 조건 (teams.name = :team_name).

    The statement must join `teams` for this predicate to apply.
    """
    return (Team.name == team_name) if team_name is not None else None


# 검색 조건 필드 → 술어 생성기, 필드 선언 순서대로
# Search condition field -> predicate constructor, in declaration order
_CONDITION_PREDICATES: tuple[tuple[str, Callable[..., Predicate | None]], ...] = (
    ("username", username_eq),
    ("age_goe", age_goe),
    ("age_loe", age_loe),
    ("team_name", team_name_eq),
)


# ---------------------------------------------------------------------------
# 결합 — Composition
# ---------------------------------------------------------------------------
def all_of(*predicates: Predicate | None) -> Predicate | None:
    """존재하는 술어만 인자 순서대로 AND로 결합합니다.

    Combine the given predicates with AND, skipping None entries.

    Args:
        predicates: 술어 또는 None (Predicates; None means "no condition")

    Returns:
        Predicate | None: None if no predicate is present, the predicate
            itself if exactly one is present, otherwise and_() of all
            present predicates in argument order.
    """
    present: list[Predicate] = [p for p in predicates if p is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def compose(condition: MemberSearchCondition) -> Predicate | None:
    """검색 조건을 하나의 결합 술어로 변환합니다.

    Build the conjunctive predicate for a search condition. Absent fields
    are omitted, not replaced by an always-true expression.

    Args:
        condition: 회원 검색 조건 (Member search condition)

    Returns:
        Predicate | None: 결합 술어, 조건이 모두 없으면 None
            (Combined predicate, or None when every field is absent)
    """
    return all_of(
        *(build(getattr(condition, field)) for field, build in _CONDITION_PREDICATES)
    )


def apply(statement: StatementType, predicate: Predicate | None) -> StatementType:
    """술어를 구문의 WHERE 절에 붙입니다. None이면 구문을 그대로 반환.

    Attach a predicate to a SELECT/UPDATE/DELETE statement; a None
    predicate leaves the statement without a filter clause.
    """
    if predicate is None:
        return statement
    return statement.where(predicate)
