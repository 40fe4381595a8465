"""Catalog command line interface.

Browse and edit the product catalog through the HTTP API.

Usage:
    catalog-cli browse --search shirt --sort price_asc --page 2
    catalog-cli create --name "Blue Shirt" --description "Cotton" --price 19.99
    catalog-cli delete 7
    catalog-cli seed --count 24
"""

import argparse
import asyncio
import sys
from decimal import Decimal, InvalidOperation

from catalog_api.catalog.generator import GeneratorConfig, SampleProductGenerator
from catalog_api.catalog.query import DEFAULT_PAGE_SIZE, ProductPage, SortKey, ViewParams
from catalog_api.client import CatalogClient, CatalogClientError
from catalog_api.domain.exceptions import DomainError
from catalog_api.domain.product import Product
from catalog_api.infrastructure.config import settings


def positive_int(value: str) -> int:
    """argparse type for positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def decimal_value(value: str) -> Decimal:
    """argparse type for decimal prices."""
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalog-cli",
        description="Browse and edit the product catalog",
    )
    parser.add_argument(
        "--base-url",
        default=settings.api_base_url,
        help=f"Catalog API base URL (default: {settings.api_base_url})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    browse = commands.add_parser("browse", help="Search, sort and page through products")
    browse.add_argument("--search", default="", help="Substring of the product name")
    browse.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        default=SortKey.NONE.value,
        help="Sort order",
    )
    browse.add_argument("--page", type=positive_int, default=1)
    browse.add_argument("--page-size", type=positive_int, default=DEFAULT_PAGE_SIZE)

    show = commands.add_parser("show", help="Show one product")
    show.add_argument("product_id", type=int)

    create = commands.add_parser("create", help="Create a product")
    update = commands.add_parser("update", help="Replace every field of a product")
    update.add_argument("product_id", type=int)
    for sub in (create, update):
        sub.add_argument("--name", required=True)
        sub.add_argument("--description", required=True)
        sub.add_argument("--price", type=decimal_value, required=True)
        sub.add_argument("--image", default=None)

    delete = commands.add_parser("delete", help="Delete a product")
    delete.add_argument("product_id", type=int)

    seed = commands.add_parser("seed", help="Create generated sample products")
    seed.add_argument("--count", type=positive_int, default=GeneratorConfig.count)
    seed.add_argument("--seed", type=int, default=GeneratorConfig.seed)

    return parser


# ============================================================================
# Rendering
# ============================================================================


def format_product(product: Product) -> str:
    """One-line summary of a product."""
    return f"{product.id:>6}  {product.name:<40}  {product.price:>12} $"


def format_page(page: ProductPage) -> str:
    """Render a page of products with its pagination footer."""
    if not page.items:
        return "No products found."

    lines = [format_product(p) for p in page.items]
    if page.shows_controls:
        lines.append(
            f"Page {page.current_page} of {page.total_pages} "
            f"({page.total_items} products)"
        )
    return "\n".join(lines)


def format_details(product: Product) -> str:
    """Multi-line product details."""
    lines = [
        f"id:          {product.id}",
        f"name:        {product.name}",
        f"description: {product.description}",
        f"price:       {product.price} $",
    ]
    if product.image:
        lines.append(f"image:       {product.image}")
    return "\n".join(lines)


# ============================================================================
# Commands
# ============================================================================


async def run(args: argparse.Namespace) -> str:
    """Execute a parsed command.

    Returns:
        Text to print.
    """
    async with CatalogClient(args.base_url, timeout=settings.client_timeout) as client:
        if args.command == "browse":
            params = ViewParams(
                search=args.search,
                sort=SortKey.parse(args.sort),
                page=args.page,
                page_size=args.page_size,
            )
            return format_page(await client.browse(params))

        if args.command == "show":
            return format_details(await client.get_product(args.product_id))

        if args.command in ("create", "update"):
            candidate = Product(
                name=args.name,
                description=args.description,
                price=args.price,
                image=args.image,
            )
            if args.command == "create":
                product = await client.create_product(candidate)
            else:
                product = await client.update_product(
                    args.product_id, candidate.with_id(args.product_id)
                )
            return format_details(product)

        if args.command == "delete":
            return await client.delete_product(args.product_id)

        if args.command == "seed":
            generator = SampleProductGenerator(
                GeneratorConfig(seed=args.seed, count=args.count)
            )
            created = [await client.create_product(p) for p in generator.generate()]
            return f"Created {len(created)} products"

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        output = asyncio.run(run(args))
    except (DomainError, CatalogClientError) as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
