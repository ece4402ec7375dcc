# ecwid_catalog/domain/repositories/category_repo.py

from __future__ import annotations

from ecwid_catalog.domain.models.category import CategoriesSearchResponse, Category, NewCategory
from ecwid_catalog.domain.repositories.catalog_repo import CatalogRepo
from ecwid_catalog.domain.services.constants import CATEGORIES_PATH


class CategoryRepo(CatalogRepo[NewCategory, Category]):
    """
    Categories of one store.
    Search filter keys: parent, hidden_categories, offset, limit, productIds, baseUrl, cleanUrls.
    """

    path = CATEGORIES_PATH
    record_model = Category
    page_model = CategoriesSearchResponse
