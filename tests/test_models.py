"""모델 테스트.

Model tests — relationship bookkeeping on transient objects.
"""

from app.models import Member, Team


class TestMemberTeam:
    """회원-팀 연관관계 테스트."""

    def test_constructor_assigns_team(self):
        team_a = Team("teamA")
        member = Member("m", 1, team_a)

        assert member.team is team_a
        assert member in team_a.members

    def test_change_team_updates_both_sides(self):
        team_a = Team("teamA")
        team_b = Team("teamB")
        member = Member("m", 1, team_a)

        member.change_team(team_b)

        assert member.team is team_b
        assert member in team_b.members
        assert member not in team_a.members

    def test_member_without_team(self):
        member = Member("loner")
        assert member.team is None
        assert member.age == 0
