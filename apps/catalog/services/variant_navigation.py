"""
Service for resolving which variant a set of attribute selections points to.
Works on the already loaded variants of a product, so a request resolves its
selection without extra queries.
"""

from typing import Dict, List, Optional

from apps.catalog.models import Variant


class VariantNavigationService:
    """
    Service to map attribute selections to variants.
    Selections are {attribute_slug: attribute_option_id}.
    """

    @staticmethod
    def find_best_matching_variant(
        variants: List[Variant],
        attribute_selections: Dict[str, int]
    ) -> Optional[Variant]:
        """
        Find the single variant that best matches the given selections.

        Args:
            variants: Enabled variants of one product, in display order
            attribute_selections: Dict of {attribute_slug: attribute_option_id}

        Returns:
            The first exact match, else the variant matching the most
            selections, else the first variant. None only if variants is empty.
        """
        if not variants:
            return None

        if not attribute_selections:
            return variants[0]

        best_variant = None
        best_score = 0

        for variant in variants:
            option_ids = variant.get_option_ids()

            score = sum(
                1 for attr_slug, option_id in attribute_selections.items()
                if option_ids.get(attr_slug) == option_id
            )

            # Exact match - all selections agree
            if score == len(attribute_selections):
                return variant

            if score > best_score:
                best_score = score
                best_variant = variant

        return best_variant or variants[0]

    @staticmethod
    def find_exact_variant(
        variants: List[Variant],
        attribute_selections: Dict[str, int]
    ) -> Optional[Variant]:
        """Variant carrying every selected option, or None."""
        for variant in variants:
            option_ids = variant.get_option_ids()
            if all(
                option_ids.get(attr_slug) == option_id
                for attr_slug, option_id in attribute_selections.items()
            ):
                return variant
        return None
