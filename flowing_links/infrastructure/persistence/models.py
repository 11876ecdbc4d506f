"""
SQLAlchemy table mappings.

Table and column names are PascalCase so databases created by earlier
deployments of the service stay readable. Every foreign key cascades on
delete at the database level; SQLite enforces this only with
PRAGMA foreign_keys=ON (see database.py).
"""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "User"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(200), nullable=False, default="")
    username: Mapped[str] = mapped_column("Username", String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column("Password", String(200), nullable=False)


class ProjectRow(Base):
    __tablename__ = "Project"
    __table_args__ = (UniqueConstraint("Name", "UserId", name="IX_Project_Name_UserId"),)

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(200), nullable=False)
    user_id: Mapped[int] = mapped_column(
        "UserId", ForeignKey("User.Id", ondelete="CASCADE"), nullable=False, index=True
    )


class LabelRow(Base):
    __tablename__ = "Label"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(100), nullable=False, unique=True)


class LinkLabelRow(Base):
    __tablename__ = "LinkLabel"
    __table_args__ = (UniqueConstraint("LinkId", "LabelId", name="IX_LinkLabel_LinkId_LabelId"),)

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    link_id: Mapped[int] = mapped_column(
        "LinkId", ForeignKey("Link.Id", ondelete="CASCADE"), nullable=False
    )
    label_id: Mapped[int] = mapped_column(
        "LabelId", ForeignKey("Label.Id", ondelete="CASCADE"), nullable=False, index=True
    )

    label: Mapped[LabelRow] = relationship(lazy="joined")


class LinkRow(Base):
    __tablename__ = "Link"
    __table_args__ = (UniqueConstraint("Url", "UserId", name="IX_Link_Url_UserId"),)

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column("Description", String(500), nullable=False, default="")
    url: Mapped[str] = mapped_column("Url", String(2048), nullable=False)
    comments: Mapped[Optional[str]] = mapped_column("Comments", Text, nullable=True)
    read: Mapped[bool] = mapped_column("Read", Boolean, nullable=False, default=False)
    favorite: Mapped[bool] = mapped_column("Favorite", Boolean, nullable=False, default=False)
    user_id: Mapped[int] = mapped_column(
        "UserId", ForeignKey("User.Id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Read side only; writes go through explicit LinkLabel statements.
    link_labels: Mapped[list[LinkLabelRow]] = relationship(
        viewonly=True, order_by=LinkLabelRow.id
    )
