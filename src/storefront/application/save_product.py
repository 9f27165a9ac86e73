"""Application service: Save Product use case (admin).

Handles both creating a product and replacing an existing one from the
admin form. The form is validated locally first; nothing reaches the
backend unless every field is valid.
"""

from __future__ import annotations

import logging

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import EntityNotFoundError, FormValidationError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.product_validation import (
    ProductFormData,
    parse_product_form_data,
    validate_product_form,
)

logger = logging.getLogger(__name__)


class SaveProductHandler:

    def __init__(self, product_repo: ProductRepository, cache: QueryCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self, form: ProductFormData, product_id: int | None = None) -> int:
        """Create (``product_id is None``) or update a product.

        Returns the product ID. Raises FormValidationError with the
        per-field messages when the form is invalid.
        """
        errors = validate_product_form(form)
        if errors:
            raise FormValidationError(errors)

        draft = parse_product_form_data(form)

        if product_id is None:
            product_id = await self._product_repo.add(draft)
            self._cache.invalidate(query_cache.PRODUCT_ADDED)
            logger.info(f"Product #{product_id} '{draft.title}' added")
        else:
            await self._product_repo.update(product_id, draft)
            self._cache.invalidate(query_cache.PRODUCT_CHANGED)
            logger.info(f"Product #{product_id} updated")

        return product_id

    async def load_form(self, product_id: int) -> ProductFormData:
        """Pre-fill the admin form from an existing product."""
        try:
            product = await self._cache.fetch(
                query_cache.product_key(product_id),
                lambda: self._product_repo.get_by_id(product_id),
            )
        except EntityNotFoundError:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found") from None
        return ProductFormData.from_product(product)
