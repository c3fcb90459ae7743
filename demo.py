from __future__ import annotations
import logging

from lendhive import ItemOutOfStock, ItemType, Library, MoveableClock, User, seed_demo_items


def demo_flow() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    clock = MoveableClock()
    lib = Library(clock, seed_demo_items())
    alice = User.named("alice")
    bob = User.named("bob")

    # Report inventory
    print("\n[demo] inventory:")
    for key, total, available in lib.inventory_report():
        print(f"  - {key.title} ({key.type.value}): total={total}, available={available}")

    # Borrow both copies of Pi, then run out
    first = lib.borrow("Pi", ItemType.DVD, alice)
    second = lib.borrow("Pi", ItemType.DVD, bob)
    print(f"\n[demo] receipts: {first.item.unique_id} on {first.return_date}, {second.item.unique_id} on {second.return_date}")
    try:
        lib.borrow("Pi", ItemType.DVD, bob)
    except ItemOutOfStock as e:
        print(f"[demo] third borrow refused: {e}")

    # Let Alice's copy go overdue
    clock.advance(days=8)
    print("\n[demo] overdue:", [(i.title, i.unique_id) for i in lib.overdue_items()])
    print("[demo] alice holds:", [(i.title, i.unique_id) for i in lib.borrowed_items(alice)])

    # Return it and show what is on the shelf
    lib.return_item(first.item)
    print("\n[demo] on the shelf:", [(i.title, i.unique_id) for i in lib.current_inventory()])


if __name__ == "__main__":
    demo_flow()
