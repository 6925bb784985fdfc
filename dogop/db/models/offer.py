from sqlalchemy import CheckConstraint, Column, Integer, String

from dogop.db.base import Base


class Offer(Base):
    __tablename__ = "offers"
    __table_args__ = (CheckConstraint("age >= 0", name="ck_offers_age_non_negative"),)

    id = Column(String(36), primary_key=True)
    customer = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    breed = Column(String, nullable=False)
    name = Column(String, nullable=False)
