"""
Basic usage example for the Category Cloud package.
"""

import os
import random
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class PrintingCache:
    """Stand-in for a host output cache."""

    def update_cache_expiry(self, seconds):
        print(f"Host asked to expire the page after {seconds} seconds.")


def main():
    """Demonstrate basic usage of Category Cloud."""
    from category_cloud import DataFrameCategorySource, TagCloudRenderer, WikiTitleResolver
    from category_cloud.utils.file_io import save_html
    from category_cloud.visualization import render_page

    # Create output directory if it doesn't exist
    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("Step 1: Loading category counts...")
    source = DataFrameCategorySource.from_counts({
        "Physics": 40,
        "Organic_Chemistry": 12,
        "Biology": 3,
        "Stubs": 250,
        "Astronomy": 18,
    })
    print(f"Loaded {len(source)} categories.")

    print("\nStep 2: Rendering the cloud...")
    resolver = WikiTitleResolver(base_url=os.getenv("CATEGORY_CLOUD_BASE_URL", "/wiki/"))
    renderer = TagCloudRenderer(source, resolver, cache=PrintingCache(), rng=random.Random(42))
    fragment = renderer.render({"min": "5", "exclude": "Stubs", "maxsize": "250"})
    print(fragment)

    print("\nStep 3: Saving a standalone page...")
    output_file = save_html(render_page(fragment), output_dir / "category_cloud.html")
    print(f"Saved to {output_file}")


if __name__ == "__main__":
    main()
