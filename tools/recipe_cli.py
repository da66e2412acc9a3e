#!/usr/bin/env python3
"""
CLI tool for fetching a random recipe from the command line.
Usage: python tools/recipe_cli.py --diet vegan --meal-type breakfast
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.errors import RecipeProxyError
from app.core.spoonacular import fetch_random_recipe
from config.settings import get_settings


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fetch a random recipe from Spoonacular",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python tools/recipe_cli.py
  python tools/recipe_cli.py --diet vegetarian
  python tools/recipe_cli.py -d vegan -t breakfast --json
        """
    )

    parser.add_argument(
        "-d", "--diet",
        type=str,
        help="Diet filter (e.g. vegan, ketogenic)"
    )

    parser.add_argument(
        "-t", "--meal-type",
        type=str,
        help="Meal type filter (e.g. breakfast, dessert)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the raw recipe as JSON"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show upstream request logging"
    )

    return parser.parse_args(argv)


def format_recipe(recipe):
    """Format a recipe for display."""
    output = []
    output.append(f"\n{'='*60}")
    output.append(f"  {recipe.get('title', 'Untitled recipe')}")
    output.append(
        f"  Ready in: {recipe.get('readyInMinutes', '?')} min | Servings: {recipe.get('servings', '?')}"
    )
    output.append(f"{'='*60}")

    diets = recipe.get("diets") or []
    if diets:
        output.append(f"\n  Diets: {', '.join(diets)}")

    dish_types = recipe.get("dishTypes") or []
    if dish_types:
        output.append(f"  Dish types: {', '.join(dish_types)}")

    if recipe.get("sourceUrl"):
        output.append(f"\n  Source: {recipe['sourceUrl']}")

    return "\n".join(output)


def main(argv=None):
    """Main CLI entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        recipe = asyncio.run(
            fetch_random_recipe(get_settings(), diet=args.diet, meal_type=args.meal_type)
        )
    except RecipeProxyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(recipe, indent=2))
    else:
        print(format_recipe(recipe))


if __name__ == "__main__":
    main()
