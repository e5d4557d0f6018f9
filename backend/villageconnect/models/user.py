"""User model - identities issued by the external identity provider."""

from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from villageconnect.database import Base


class User(Base):
    """User entity - keyed by the provider's subject id, never deleted here."""
    
    __tablename__ = "users"
    
    id = Column(String, primary_key=True)
    
    # Profile
    email = Column(String, unique=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    # Relationships
    businesses = relationship("Business", back_populates="owner")
    
    def __repr__(self):
        return f"<User {self.id}>"
