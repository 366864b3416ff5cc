from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.database.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)

    sales = relationship(
        "CategorySale",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class CategorySale(Base):
    __tablename__ = "category_sales"

    id = Column(Integer, primary_key=True)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    )

    # "YYYY-MM"
    month = Column(String(7), nullable=False)
    amount = Column(Float, nullable=False)

    category = relationship("Category", back_populates="sales")

    __table_args__ = (
        Index("idx_category_sales_month_category", "month", "category_id"),
    )


__all__ = ["Category", "CategorySale"]
