"""Log an order without leaking card numbers, emails, or keys."""

import logging

from payloads import ApiKey, Card, Order, User

from maskcopy import MaskError, mask

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
log = logging.getLogger("orders")


def main() -> None:
    buyer = User(name="Ada", email="ada@example.com")
    buyer._password_hash = "$argon2id$..."

    first = Order(
        1, buyer, Card("4242424242424242", "ADA L"), ApiKey("sk_live_51Habcdef"), ["book"]
    )
    second = Order(2, buyer, Card("5555555555554444", "ADA L"), items=["pen"])
    # Cycles and shared references survive the copy.
    first.related.append(second)
    second.related.append(first)

    safe = mask(first)
    log.info("order placed: %r", safe)
    log.info("same buyer object in copy: %s", safe.buyer is safe.related[0].buyer)
    log.info("original email intact: %s", first.buyer.email)

    try:
        mask({"order": first, "callback": main})
    except MaskError as e:
        log.warning("payload not logged: %s (at %s)", e.root_cause, e.path)


if __name__ == "__main__":
    main()
