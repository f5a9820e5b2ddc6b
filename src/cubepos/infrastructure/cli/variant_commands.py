"""CLI commands for product variants.

Every command here ends with the owning product's aggregate refreshed.
"""

from __future__ import annotations

import click

from cubepos.application.add_variant import AddVariantHandler
from cubepos.application.remove_variant import RemoveVariantHandler
from cubepos.application.update_variant import UpdateVariantHandler
from cubepos.domain.exceptions import DomainException
from cubepos.infrastructure.bootstrap import product_repository, variant_repository


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--sku", required=True, help="Variant SKU.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--size", default=None, help="Size label.")
@click.option("--color", default=None, help="Colour label.")
@click.option("--barcode", default=None, help="Barcode value.")
def variant_add(
    product_id: str,
    sku: str,
    price: str,
    stock: int,
    size: str | None,
    color: str | None,
    barcode: str | None,
) -> None:
    """Add a variant to a product."""
    handler = AddVariantHandler(
        variant_repo=variant_repository(),
        product_repo=product_repository(),
    )

    try:
        variant = handler.handle(
            product_id=product_id,
            sku=sku,
            price=price,
            stock=stock,
            size=size,
            color=color,
            barcode=barcode,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Variant #{variant.id} '{variant.sku}' added to product #{product_id} "
        f"at {variant.price} x {variant.stock}"
    )


@click.command("update")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
def variant_update(variant_id: str, price: str | None, stock: int | None) -> None:
    """Change a variant's price and/or stock."""
    handler = UpdateVariantHandler(
        variant_repo=variant_repository(),
        product_repo=product_repository(),
    )

    try:
        variant = handler.handle(variant_id=variant_id, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant #{variant.id} now {variant.price} x {variant.stock}")


@click.command("remove")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
def variant_remove(variant_id: str) -> None:
    """Delete a variant (the last one may be removed too)."""
    handler = RemoveVariantHandler(
        variant_repo=variant_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant #{variant_id} removed")
