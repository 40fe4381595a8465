"""SQLAlchemy models for the product catalog.

Defines the products table for persistent storage.
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.domain.product import PRICE_PRECISION, PRICE_SCALE, Product
from catalog_api.infrastructure.database import Base


class ProductRecord(Base):
    """Product row in the catalog.

    Attributes:
        id: Auto-incremented identifier, never reused.
        name: Product name.
        description: Product description.
        price: Unit price, NUMERIC(18, 2).
        image: Optional image URL.
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False
    )
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductRecord(id={self.id}, name={self.name})>"

    @classmethod
    def from_domain(cls, product: Product) -> "ProductRecord":
        """Build a new row from a product; the id is left to the database."""
        return cls(
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
        )

    def apply(self, product: Product) -> None:
        """Overwrite every mutable column from a product."""
        self.name = product.name
        self.description = product.description
        self.price = product.price
        self.image = product.image

    def to_domain(self) -> Product:
        """Convert to a Product entity."""
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            price=Decimal(self.price),
            image=self.image,
        )
