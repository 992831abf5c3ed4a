# services/school_details/models/schools.py

from sqlalchemy import Column, Integer, String
from shared.db import Base


class School(Base):
    __tablename__ = "schools"

    school_id = Column(Integer, primary_key=True, autoincrement=True)
    school_name = Column(String(255), nullable=False, unique=True, index=True)
    school_address = Column(String(255), nullable=False)
    school_type = Column(String(100), nullable=True)  # e.g. "Pre-Primary", "Primary", "Secondary"
