"""검색 술어 조립기 테스트.

Predicate composer tests — absent fields are omitted, present fields are
ANDed in declaration order, and composing is repeatable. The DB-backed
tests apply the composed filter to the sample members.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.team import Team
from app.query.predicates import (
    _CONDITION_PREDICATES,
    age_eq,
    age_goe,
    age_loe,
    all_of,
    apply,
    compose,
    team_name_eq,
    username_eq,
)
from app.repositories.member_repository import member_repository
from app.schemas.member import MemberSearchCondition


def render(expr) -> str:
    """바인드 값을 리터럴로 넣은 SQL 문자열."""
    return str(expr.compile(compile_kwargs={"literal_binds": True}))


class TestSingleFieldPredicates:
    """단일 필드 술어 생성기."""

    def test_absent_values_give_no_predicate(self):
        assert username_eq(None) is None
        assert age_eq(None) is None
        assert age_goe(None) is None
        assert age_loe(None) is None
        assert team_name_eq(None) is None

    def test_present_values(self):
        assert render(username_eq("member1")) == "members.username = 'member1'"
        assert render(age_eq(10)) == "members.age = 10"
        assert render(age_goe(35)) == "members.age >= 35"
        assert render(age_loe(40)) == "members.age <= 40"
        assert render(team_name_eq("teamB")) == "teams.name = 'teamB'"

    def test_falsy_values_are_present(self):
        """빈 문자열과 0은 '없음'이 아니라 값입니다."""
        assert render(username_eq("")) == "members.username = ''"
        assert render(age_goe(0)) == "members.age >= 0"


class TestAllOf:
    """all_of 결합."""

    def test_empty(self):
        assert all_of() is None
        assert all_of(None, None) is None

    def test_single_predicate_is_returned_as_is(self):
        p = age_goe(35)
        assert all_of(None, p, None) is p

    def test_order_follows_arguments(self):
        combined = all_of(age_loe(40), None, username_eq("member1"))
        assert render(combined) == "members.age <= 40 AND members.username = 'member1'"


class TestCompose:
    """검색 조건 → 결합 술어."""

    def test_all_absent_is_no_filter(self):
        assert compose(MemberSearchCondition()) is None

    def test_one_field_equals_its_predicate(self):
        predicate = compose(MemberSearchCondition(age_loe=40))
        assert render(predicate) == render(Member.age <= 40)
        assert predicate.compare(Member.age <= 40)

    def test_many_fields_in_declaration_order(self):
        condition = MemberSearchCondition(team_name="teamB", age_loe=40, age_goe=35)
        predicate = compose(condition)
        assert render(predicate) == (
            "members.age >= 35 AND members.age <= 40 AND teams.name = 'teamB'"
        )
        assert predicate.compare(
            and_(Member.age >= 35, Member.age <= 40, Team.name == "teamB")
        )

    def test_all_fields(self):
        condition = MemberSearchCondition(
            username="member4", age_goe=35, age_loe=40, team_name="teamB"
        )
        assert render(compose(condition)) == (
            "members.username = 'member4' AND members.age >= 35 "
            "AND members.age <= 40 AND teams.name = 'teamB'"
        )

    def test_repeatable_for_equal_conditions(self):
        first = compose(MemberSearchCondition(username="member1", age_goe=5))
        second = compose(MemberSearchCondition(username="member1", age_goe=5))
        assert first is not second
        assert first.compare(second)
        assert render(first) == render(second)

    def test_every_condition_field_has_a_constructor(self):
        """검색 조건의 필드 목록/순서와 술어 생성기 목록이 일치."""
        fields = [field for field, _ in _CONDITION_PREDICATES]
        assert fields == list(MemberSearchCondition.model_fields)

    def test_condition_is_immutable(self):
        condition = MemberSearchCondition(username="member1")
        with pytest.raises(ValidationError):
            condition.username = "member2"


class TestApply:
    """구문에 술어 부착."""

    def test_none_leaves_statement_without_where(self):
        stmt = apply(select(Member), None)
        assert stmt.whereclause is None
        assert "WHERE" not in render(stmt)

    def test_predicate_becomes_where_clause(self):
        stmt = apply(select(Member), age_goe(35))
        assert "WHERE members.age >= 35" in render(stmt)


class TestComposedFilterOnSampleData:
    """샘플 데이터에 결합 필터 적용."""

    async def test_age_range_and_team(self, db: AsyncSession, members):
        condition = MemberSearchCondition(age_goe=35, age_loe=40, team_name="teamB")
        result = await member_repository.search(db, condition)
        assert [r.username for r in result] == ["member4"]

    async def test_no_filter_returns_everything(self, db: AsyncSession, members):
        stmt = apply(select(Member).order_by(Member.username), compose(MemberSearchCondition()))
        rows = (await db.execute(stmt)).scalars().all()
        assert [m.username for m in rows] == ["member1", "member2", "member3", "member4"]
