"""
Client model.
A client document embeds its addresses and contact persons.
"""

from typing import Any, Optional, List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import EntityModel


class Client(EntityModel):
    """
    Client model representing a recruitment customer.

    Attributes:
        name: Client company name (unique business key)
        division: Division of the client we work with
        vertical: Industry vertical
        logo: Logo URL
        contact_numbers: Phone numbers of the client
        emails: Email addresses of the client
        addresses: Embedded address documents, most recent first
        contact_persons: Embedded contact person documents, most recent first
    """

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    division: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    vertical: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    logo: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # Multi-valued fields
    contact_numbers: Mapped[List[int]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    emails: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )

    # Embedded sub-entities. Always reassigned, never mutated in place,
    # so the ORM sees every change.
    addresses: Mapped[List[dict[str, Any]]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    contact_persons: Mapped[List[dict[str, Any]]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}')>"
