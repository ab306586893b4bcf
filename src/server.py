"""Protean Engine runner for the storefront domain.

In production (``event_processing = "async"``) the Engine delivers committed
events to their handlers, e.g. order confirmation emails.

Usage:
    python src/server.py
"""

import argparse
import asyncio

from protean.server.engine import Engine


async def run():
    from storefront.domain import storefront

    storefront.init()
    await Engine(storefront).run()


def main():
    argparse.ArgumentParser(description="Storefront Engine runner").parse_args()
    asyncio.run(run())


if __name__ == "__main__":
    main()
