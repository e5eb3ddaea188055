from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

class Student(Base):
    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    grade: Mapped[int] = mapped_column(Integer, nullable=False)
    student_number: Mapped[str] = mapped_column(String, nullable=False)
    homeroom: Mapped[str] = mapped_column(String, nullable=True)

    tests: Mapped[list["Test"]] = relationship("Test", back_populates="student", passive_deletes=True)
