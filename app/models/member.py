"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.
The member owns the Member ↔ Team association (it holds ``team_id``).

Tables:
    - member: 회원 (Member with optional team assignment)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.team import Team


class Member(Base):
    """회원 모델 — 팀과의 연관관계의 주인.

    Member model — Owning side of the association with Team.
    A member may exist without a team (``team_id`` is nullable).

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        username: 회원 이름 (Member name, nullable)
        age: 나이 (Age in years)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Team this member belongs to)
    """

    __tablename__ = "member"

    # 회원 고유 식별자 — Member primary key (auto-increment)
    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — NULL 허용 (Nullable member name)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 나이 — Age in years
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — 팀이 없는 회원도 허용 (Nullable: member may have no team)
    team_id: Mapped[int | None] = mapped_column(ForeignKey("team.team_id"), nullable=True, index=True)

    # 관계 — 연관관계의 주인 (Owning side)
    team: Mapped[Team | None] = relationship("Team", back_populates="members")

    def __init__(self, username: str | None, age: int = 0, team: Team | None = None) -> None:
        """회원을 생성합니다. 팀이 주어지면 양방향 연관관계를 함께 설정합니다.

        Create a member; when a team is given the association is set on both sides.
        """
        self.username = username
        self.age = age
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """소속 팀을 변경합니다 — 연관관계 편의 메서드.

        Move this member to ``team``. This is the only mutator for the
        association: assigning ``self.team`` fires the ``back_populates``
        event, which appends this member to ``team.members`` and removes it
        from the previous team's collection, without loading either collection.

        Args:
            team: 새 소속 팀 (New team)
        """
        self.team = team

    def __repr__(self) -> str:
        # team은 지연 로딩 대상이라 출력하지 않음 — Never touch the lazy relationship here
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
