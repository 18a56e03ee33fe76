"""SQLAlchemy модели базы данных."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from member_search.core.database import Base


class Team(Base):
    """Модель команды."""

    __tablename__ = "teams"
    __table_args__ = ({"comment": "Команды"},)

    id = Column("team_id", Integer, primary_key=True, autoincrement=True, comment="ID команды")
    name = Column(String(255), nullable=False, comment="Название команды")

    members = relationship("Member", back_populates="team")

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"


class Member(Base):
    """Модель участника."""

    __tablename__ = "members"
    __table_args__ = (
        Index("idx_members_username", "username"),
        Index("idx_members_team", "team_id"),
        {"comment": "Участники"},
    )

    id = Column("member_id", Integer, primary_key=True, autoincrement=True, comment="ID участника")
    username = Column(String(255), nullable=False, comment="Имя пользователя")
    age = Column(Integer, nullable=False, default=0, comment="Возраст")
    team_id = Column(
        Integer,
        ForeignKey("teams.team_id", ondelete="SET NULL"),
        nullable=True,
        comment="ID команды",
    )

    team = relationship("Team", back_populates="members")

    def change_team(self, team: "Team | None"):
        """Перевести участника в другую команду.

        Коллекция Team.members обновляется через back_populates.
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, username={self.username!r}, age={self.age!r})"
