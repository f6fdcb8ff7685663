#!/usr/bin/env python3
"""
Recipe Importer - Normalize recipes from websites

Fetches a recipe page, extracts it from structured data and page markup,
and writes the normalized recipe as JSON plus an HTML preview.
"""
import argparse
import html
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from custom_components.meal_planner.const import (
    AVAILABLE_LANGUAGES,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
)
from custom_components.meal_planner.exceptions import MealPlannerError
from custom_components.meal_planner.models.recipe import RecipeDraft
from custom_components.meal_planner.services.recipe_service import import_recipe

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


def generate_html_preview(recipe: RecipeDraft) -> str:
    """Generate an HTML preview of a normalized recipe.

    All recipe text comes from an untrusted page and is escaped.

    Args:
        recipe: The normalized recipe draft

    Returns:
        HTML content as a string
    """
    esc = html.escape
    ingredients = "\n".join(
        f"""                <div class="ingredient">
                    <span class="amount">{esc(ing.amount)}</span>
                    <span class="name">{esc(ing.name)}</span>
                </div>"""
        for ing in recipe.ingredients
    )
    steps = "\n".join(
        f'                <li class="instruction">{esc(step)}</li>'
        for step in recipe.instructions
    )

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{esc(recipe.name)} - Imported Recipe</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }}
        .panel {{
            background: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}
        .meta {{
            display: flex;
            gap: 20px;
            font-size: 14px;
            color: #666;
        }}
        .description {{
            font-style: italic;
            color: #666;
        }}
        .ingredient {{
            display: flex;
            gap: 10px;
            margin-bottom: 8px;
            padding: 8px;
            background: #f9f9f9;
            border-radius: 4px;
        }}
        .amount {{
            font-weight: bold;
            color: #2196F3;
            min-width: 80px;
        }}
        .instruction {{
            margin-bottom: 12px;
        }}
    </style>
</head>
<body>
    <div class="panel">
        <h1>{esc(recipe.name)}</h1>
        <div class="meta">
            <span>{esc(recipe.category)}</span>
            <span>{recipe.cook_time} min</span>
            <span>{recipe.servings} servings</span>
        </div>
        <p class="description">{esc(recipe.description)}</p>

        <h2>Ingredients</h2>
        <div class="ingredients">
{ingredients}
        </div>

        <h2>Instructions</h2>
        <ol class="instructions">
{steps}
        </ol>
    </div>
</body>
</html>
"""


def import_recipe_from_url(url: str, output_dir: Path, language: str, timeout: float) -> bool:
    """Import a recipe from a URL and save the results.

    Args:
        url: URL of the recipe website
        output_dir: Directory to save the output files
        language: Language of the default placeholders
        timeout: Request timeout in seconds

    Returns:
        True if successful, False otherwise
    """
    try:
        recipe = import_recipe(url, language=language, timeout=timeout)
    except (MealPlannerError, ValueError) as e:
        logger.error("Error importing recipe: %s", e)
        return False

    output_dir.mkdir(parents=True, exist_ok=True)

    # Generate output filename based on recipe name
    safe_title = "".join(c for c in recipe.name if c.isalnum() or c in (' ', '-', '_')).rstrip()
    safe_title = safe_title.replace(' ', '_').lower()
    if not safe_title:
        safe_title = "recipe"

    json_file = output_dir / f"{safe_title}.json"
    logger.info("Saving normalized recipe to: %s", json_file)
    with open(json_file, 'w', encoding='utf-8') as f:
        json.dump(recipe.model_dump(), f, indent=2, ensure_ascii=False)

    html_file = output_dir / f"{safe_title}.html"
    logger.info("Creating HTML preview: %s", html_file)
    with open(html_file, 'w', encoding='utf-8') as f:
        f.write(generate_html_preview(recipe))

    print(f"\nRecipe imported: {recipe.name}")
    print(f"  Category: {recipe.category}")
    print(f"  Cook time: {recipe.cook_time} min")
    print(f"  Ingredients: {len(recipe.ingredients)}")
    print(f"  Steps: {len(recipe.instructions)}")
    print(f"\nOutput files:")
    print(f"  - JSON: {json_file}")
    print(f"  - HTML: {html_file}")

    return True


def main():
    """Main entry point for the recipe importer."""
    parser = argparse.ArgumentParser(
        description="Import recipes from websites into normalized JSON"
    )
    parser.add_argument(
        "url",
        type=str,
        help="URL of the recipe website"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Directory to save output files (default: ./output)"
    )
    parser.add_argument(
        "--language",
        choices=AVAILABLE_LANGUAGES,
        default=os.getenv("MEAL_PLANNER_LANGUAGE", DEFAULT_LANGUAGE),
        help="Language of default placeholders (can also be set via MEAL_PLANNER_LANGUAGE env var)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})"
    )

    args = parser.parse_args()

    success = import_recipe_from_url(
        url=args.url,
        output_dir=args.output_dir,
        language=args.language,
        timeout=args.timeout
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
