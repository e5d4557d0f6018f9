"""Resolve the public business listing from optional category and search filters."""

from typing import List, Optional

from villageconnect.models.business import Business, BusinessCategory
from villageconnect.services.business_service import BusinessService

ALL_CATEGORIES = "all"


def parse_category(category: Optional[str]) -> Optional[BusinessCategory]:
    """
    Map a category filter value to an enum member.

    Returns None for "no filter" (missing, empty or "all"). Raises ValueError
    for a value outside the enum.
    """
    if not category or category == ALL_CATEGORIES:
        return None
    return BusinessCategory(category)


async def resolve_businesses(
    store: BusinessService,
    category: Optional[str] = None,
    search: Optional[str] = None,
    search_within_category: bool = False,
) -> List[Business]:
    """
    Produce the listing, newest first.

    A non-empty search matches name, description or category as a
    case-insensitive substring and takes precedence: the category filter is
    ignored unless ``search_within_category`` is set, in which case both
    apply. Without a search, a category other than "all" is an exact match.
    An unknown category matches nothing.
    """
    # Whitespace-only counts as no search; otherwise the text is matched as sent
    has_search = bool(search and search.strip())
    
    try:
        wanted = parse_category(category)
    except ValueError:
        if has_search and not search_within_category:
            return await store.search(search)
        return []
    
    if has_search:
        return await store.search(search, wanted if search_within_category else None)
    if wanted is not None:
        return await store.get_by_category(wanted)
    return await store.get_all()
