from sqlalchemy import Float, Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

class Test(Base):
    __tablename__ = "tests"
    __table_args__ = {"sqlite_autoincrement": True}
    __test__ = False

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(Integer, ForeignKey("students.id", ondelete="RESTRICT"), nullable=False)
    course_id: Mapped[int] = mapped_column(Integer, ForeignKey("courses.id", ondelete="RESTRICT"), nullable=False)
    test_name: Mapped[str] = mapped_column(String, nullable=False)
    date: Mapped[str] = mapped_column(String, nullable=False)
    mark: Mapped[float] = mapped_column(Float, nullable=False)
    out_of: Mapped[float] = mapped_column(Float, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=True)

    student: Mapped["Student"] = relationship("Student", back_populates="tests", passive_deletes=True)
    course: Mapped["Course"] = relationship("Course", back_populates="tests", passive_deletes=True)
