"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.
The team is the inverse (non-owning) side of the Member ↔ Team association;
the foreign key lives on the member table.

Tables:
    - team: 팀 (Team that groups members)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델 — 회원을 묶는 단위.

    Team model — Groups members together.
    ``members`` is maintained from the member side via ``Member.change_team``;
    the team never writes the foreign key itself.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members belonging to this team, inverse side)
    """

    __tablename__ = "team"

    # 팀 고유 식별자 — Team primary key (auto-increment)
    id: Mapped[int] = mapped_column("team_id", Integer, primary_key=True, autoincrement=True)
    # 팀 이름 — Team display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 관계 — 연관관계의 주인이 아님 (Inverse side, mapped by Member.team)
    members = relationship("Member", back_populates="team")

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"
