"""Shared --item / --double-side options for commands that price a selection."""

from __future__ import annotations

import click

from printshop.application.dto import ItemSelection


def selection_options(func):
    func = click.option(
        "--double-side", "double_side_ids", multiple=True, metavar="ID",
        help="Item ID to print on both sides (repeatable).",
    )(func)
    func = click.option(
        "--item", "item_specs", multiple=True, metavar="ID:QTY",
        help="Item and quantity as 'ID:QTY', e.g. '1:2000' (repeatable).",
    )(func)
    return func


def parse_selections(
    item_specs: tuple[str, ...],
    double_side_ids: tuple[str, ...],
) -> list[ItemSelection]:
    """Parse ('1:2000', '4:1000') plus ('4',) into ItemSelection list."""
    double_side = {item_id.strip() for item_id in double_side_ids}
    selections: list[ItemSelection] = []
    seen: set[str] = set()

    for raw in item_specs:
        pair = raw.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ID:QTY'.",
                param_hint="--item",
            )
        item_id, qty = pair.split(":", 1)
        item_id = item_id.strip()
        seen.add(item_id)
        selections.append(
            ItemSelection(
                item_id=item_id,
                quantity=qty.strip(),
                double_side=item_id in double_side,
            )
        )

    # Flag without a quantity: stored, but prices stay at zero.
    for item_id in sorted(double_side - seen):
        selections.append(ItemSelection(item_id=item_id, quantity=0, double_side=True))

    return selections
