#!/usr/bin/env python3
"""
Fetch a storefront collection and print it as JSON.

Examples:
  python scripts/fetch_catalog.py products --category parfum --bestseller
  python scripts/fetch_catalog.py shops --location international
  python scripts/fetch_catalog.py shop --slug kinshasa-centre
  python scripts/fetch_catalog.py login --token <jwt>     # store a token for admin calls
  python scripts/fetch_catalog.py logout

Uses STOREFRONT_API_BASE_URL and config/client_config.yml.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from storefront_client import StorefrontAPI, StorefrontAPIError, create_credential_store, create_gateway, load_client_settings

COLLECTIONS = ("products", "carousel", "team", "milestones", "values", "contact", "faq", "about", "shops", "publicite")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def fetch(api: StorefrontAPI, args: argparse.Namespace):
    if args.collection == "products":
        if args.id is not None:
            return await api.get_product(args.id)
        return await api.get_products(category=args.category, bestseller=args.bestseller, new=args.new)
    if args.collection == "shop":
        if args.slug:
            return await api.get_shop_by_slug(args.slug)
        return await api.get_shop(args.id)
    if args.collection == "shops":
        return await api.get_shops(location=args.location)
    if args.collection == "contact":
        return await api.get_contact_info(info_type=args.type)
    if args.collection == "publicite":
        return await api.get_publicite_videos(video_type=args.type)
    if args.collection == "faq":
        return await api.get_faq_items(category=args.category)
    if args.collection == "about":
        return await api.get_about_content(section=args.section)
    simple = {
        "carousel": api.get_carousel_images,
        "team": api.get_team_members,
        "milestones": api.get_milestones,
        "values": api.get_company_values,
    }
    return await simple[args.collection]()


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch storefront API collections")
    parser.add_argument("collection", choices=COLLECTIONS + ("shop", "login", "logout"))
    parser.add_argument("--id", type=int, default=None)
    parser.add_argument("--slug", default=None)
    parser.add_argument("--category", default=None)
    parser.add_argument("--section", default=None)
    parser.add_argument("--type", default=None)
    parser.add_argument("--location", default=None)
    parser.add_argument("--bestseller", action="store_true")
    parser.add_argument("--new", action="store_true")
    parser.add_argument("--token", default=None, help="Bearer token to store (login)")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(args.verbose)
    settings = load_client_settings(args.config)
    store = create_credential_store(settings)

    if args.collection == "login":
        if not args.token:
            print("--token is required for login", file=sys.stderr)
            return 1
        store.set(settings.credential_key, args.token)
        print("Token stored")
        return 0
    if args.collection == "logout":
        store.delete(settings.credential_key)
        print("Token cleared")
        return 0
    if args.collection == "shop" and args.id is None and not args.slug:
        print("shop needs --id or --slug", file=sys.stderr)
        return 1

    api = StorefrontAPI(create_gateway(settings, credential_store=store))
    try:
        result = asyncio.run(fetch(api, args))
    except StorefrontAPIError as e:
        print(f"{e.message} (status={e.status_code})", file=sys.stderr)
        if e.unauthorized:
            print("Stored token was rejected and has been cleared; log in again.", file=sys.stderr)
        return 1

    if result is None:
        print("Not found", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
