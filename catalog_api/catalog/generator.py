"""Sample product generator with deterministic seeding.

Generates a development catalog of plausible products. Uses seeded
random for reproducibility: the same seed always yields the same
products.
"""

import hashlib
import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from catalog_api.domain.product import Product


# ============================================================================
# Constants
# ============================================================================

# Synthetic brand names (fictional companies)
BRANDS = [
    "Acme",
    "Contoso",
    "Northwind",
    "Fabrikam",
    "Tailwind",
    "Globex",
    "Initech",
]

# Item kinds with price ranges (in cents)
ITEMS: dict[str, tuple[int, int]] = {
    "T-Shirt": (999, 3999),
    "Shirt": (1999, 6999),
    "Jeans": (2999, 9999),
    "Sneakers": (4999, 19999),
    "Backpack": (2999, 12999),
    "Headphones": (2999, 39999),
    "Desk Lamp": (1999, 8999),
    "Coffee Mug": (599, 2499),
}

ADJECTIVES = [
    "Classic", "Essential", "Premium", "Urban", "Everyday",
    "Vintage", "Blue", "Black", "Lightweight", "Pro",
]


@dataclass
class GeneratorConfig:
    """Configuration for sample generation.

    Attributes:
        seed: Random seed for reproducibility.
        count: Number of products to generate.
    """

    seed: int = 42
    count: int = 24


class SampleProductGenerator:
    """Generates sample products with deterministic seeding.

    Example usage:
        generator = SampleProductGenerator(GeneratorConfig(count=10))
        for product in generator.generate():
            print(product.name)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    def _image_url(self, name: str, index: int) -> str:
        """Placeholder image URL, stable for a given product."""
        digest = hashlib.md5(f"{self.config.seed}:{index}:{name}".encode()).hexdigest()
        return f"https://picsum.photos/seed/{digest[:12]}/400/400"

    def _generate_product(self, index: int) -> Product:
        rng = random.Random(f"{self.config.seed}:{index}")

        brand = rng.choice(BRANDS)
        adj = rng.choice(ADJECTIVES)
        item = rng.choice(list(ITEMS))
        name = f"{brand} {adj} {item}"

        min_price, max_price = ITEMS[item]
        cents = rng.randint(min_price, max_price)
        # Round to .99
        cents = (cents // 100) * 100 + 99

        return Product(
            name=name,
            description=f"{adj} {item.lower()} from {brand}.",
            price=Decimal(cents) / 100,
            image=self._image_url(name, index),
        )

    def generate(self) -> Iterator[Product]:
        """Generate all products.

        Yields:
            Products without ids.
        """
        for i in range(self.config.count):
            yield self._generate_product(i)

    def generate_list(self) -> list[Product]:
        """Generate all products as a list."""
        return list(self.generate())
