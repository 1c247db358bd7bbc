"""Seed the reference card catalog into the configured MongoDB database."""

from card_advisor.core import ensure_indexes, get_database, get_mongo_client, load_environment
from card_advisor.services.catalog import CardCatalog


def main():
    load_environment()

    client = get_mongo_client()
    db = get_database(client)
    ensure_indexes(db)

    inserted = CardCatalog(db).seed_reference_cards()
    if inserted:
        print(f"Seeded {inserted} reference cards into db.credit_cards.")
    else:
        print("Catalog already has cards; nothing seeded.")


if __name__ == "__main__":
    main()
