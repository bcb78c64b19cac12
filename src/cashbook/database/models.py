"""SQLAlchemy models for cashbook database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Entry(Base):
    """Ledger entry model."""

    __tablename__ = "entries"

    id = Column(String, primary_key=True)
    # Insertion order; listings and stable sorts depend on it.
    seq = Column(Integer, nullable=False, index=True)
    due_date = Column(Date, nullable=True)
    description = Column(String, nullable=False)
    note = Column(String, nullable=False, default="")
    category = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String, nullable=False)
    barcode = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(DateTime, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
