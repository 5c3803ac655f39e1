"""Seed the catalog with vendors and products.

Registers vendor accounts and lists products for each of them through the
domain's own commands, so every record passes the same validation as API
traffic. Useful for demos and for giving load tests a populated catalog.

Prerequisites (for a persistent database):
    PROTEAN_ENV=production python src/manage.py setup-db

Usage:
    python scripts/seed_catalog.py --vendors 5 --products 20
    python scripts/seed_catalog.py --admin-email admin@example.com
    PROTEAN_ENV=production python scripts/seed_catalog.py --vendors 50 --products 100
"""

import argparse
import json
import random
import sys
import time
import uuid

# Add src/ to path so we can import domain modules
sys.path.insert(0, "src")

CATEGORIES = ["electronics", "clothing", "books", "home", "beauty", "sports", "food", "other"]


def main():
    parser = argparse.ArgumentParser(description="Seed the marketplace catalog")
    parser.add_argument("--vendors", type=int, default=5, help="Number of vendors to register (default: 5)")
    parser.add_argument("--products", type=int, default=20, help="Products per vendor (default: 20)")
    parser.add_argument("--admin-email", help="Also create an administrator account with this email")
    args = parser.parse_args()

    from protean.exceptions import ValidationError

    from marketplace.account.registration import RegisterUser
    from marketplace.account.user import User
    from marketplace.domain import marketplace
    from marketplace.product.management import CreateProduct

    marketplace.init()

    print(f"\n{'='*60}")
    print("  Marketplace Catalog Seed")
    print(f"{'='*60}")
    print(f"  Vendors:              {args.vendors:,}")
    print(f"  Products per vendor:  {args.products:,}")
    print(f"{'='*60}\n")

    created = 0
    errors = 0
    start = time.monotonic()

    with marketplace.domain_context():
        if args.admin_email:
            # Bootstrap path: the public registration command never creates the first admin
            admin = User.register(name="Seed Admin", email=args.admin_email, role="admin")
            marketplace.repository_for(User).add(admin)
            print(f"  Admin:                {admin.email} ({admin.id})\n")

        for v in range(args.vendors):
            vendor_id = marketplace.process(
                RegisterUser(
                    name=f"Seed Vendor {v + 1}",
                    email=f"vendor-{uuid.uuid4().hex[:8]}@seed.example.com",
                    role="vendor",
                ),
                asynchronous=False,
            )

            for p in range(args.products):
                try:
                    marketplace.process(
                        CreateProduct(
                            actor_id=vendor_id,
                            actor_role="vendor",
                            name=f"Seed Product {v + 1}-{p + 1}",
                            description=f"Seeded product {p + 1} from vendor {v + 1}.",
                            price=round(random.uniform(1.0, 500.0), 2),
                            stock=random.randint(0, 200),
                            category=random.choice(CATEGORIES),
                            images=json.dumps([f"https://cdn.example.com/seed/{uuid.uuid4().hex[:8]}.jpg"]),
                        ),
                        asynchronous=False,
                    )
                    created += 1
                except ValidationError as e:
                    errors += 1
                    print(f"  [ERROR] Vendor {v + 1} product {p + 1}: {e.messages}")

            print(f"  [{time.strftime('%H:%M:%S')}] Vendor {v + 1}/{args.vendors} done ({created:,} products)")

    elapsed = time.monotonic() - start

    print(f"\n{'='*60}")
    print("  Seed Complete")
    print(f"{'='*60}")
    print(f"  Total time:   {elapsed:.1f}s")
    print(f"  Products:     {created:,}")
    print(f"  Errors:       {errors:,}")
    print(f"{'='*60}\n")


if __name__ == "__main__":
    main()
