"""
Payment model - a single contribution made through the payment gateway.
"""
import enum
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Numeric, String, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chai_api.core.database import Base

if TYPE_CHECKING:
    from chai_api.models.campaign import Campaign


class PaymentStatus(str, enum.Enum):
    """Gateway-reported payment states."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    REFUNDED = "refunded"


class Payment(Base):
    """Contribution from a supporter to a creator's campaign."""

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_to_user_done", "to_user", "done"),
        Index("ix_payments_campaign_done", "campaign_id", "done"),
    )

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )

    # Supporter
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255))
    user_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Recipient, matched by username
    to_user: Mapped[str] = mapped_column(String(100), nullable=False)
    campaign_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("campaigns.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Gateway
    oid: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    payment_id: Mapped[Optional[str]] = mapped_column(String(255))
    amount: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="INR")

    message: Mapped[Optional[str]] = mapped_column(String(500))
    anonymous: Mapped[bool] = mapped_column(Boolean, default=False)

    # Completion is tracked in two fields; either one marks the payment eligible
    done: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(String(20), default=PaymentStatus.PENDING.value)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    campaign: Mapped[Optional["Campaign"]] = relationship("Campaign", back_populates="payments")

    @property
    def campaign_title(self) -> Optional[str]:
        return self.campaign.title if self.campaign is not None else None

    def __repr__(self) -> str:
        return f"<Payment {self.oid} {self.amount}>"
