"""
Image URL resolution for emails and API responses.

A product image can come from three places: the path snapshotted on the
order at checkout, the media attachment uploaded for the product, or the
legacy ``image`` column. Every consumer resolves through this module so
they all agree on which one wins and how it is turned into an absolute URL.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .config import StorefrontConfig

ABSOLUTE_URL_RE = re.compile(r'^https?://', re.IGNORECASE)


@dataclass(frozen=True)
class ProductImageRecord:
    """Image sources of a product, resolved once when the product is loaded."""

    image: Optional[str] = None
    attached_image_url: Optional[str] = None

    @classmethod
    def from_model(cls, product) -> Optional['ProductImageRecord']:
        if product is None:
            return None
        return cls(image=product.image, attached_image_url=product.attached_image_url)


class ImageUrlNormalizer:
    """Turns raw image references into absolute URLs usable in HTML emails."""

    def __init__(self, config: Optional[StorefrontConfig] = None):
        self.config = config or StorefrontConfig.from_settings()

    @property
    def base_url(self) -> str:
        return (self.config.base_url or '').rstrip('/')

    def normalize(self, image: Optional[str]) -> Optional[str]:
        """
        Rules:
        - empty -> None
        - already absolute (http(s)://, any case) -> returned trimmed
        - leading slash -> prefixed with the base URL
        - anything else is a public storage path -> base URL + /storage/ + path
        """
        if not image:
            return None

        image = image.strip()
        if not image:
            return None

        if ABSOLUTE_URL_RE.match(image):
            return image

        if image.startswith('/'):
            return self.base_url + image

        return f"{self.base_url}/storage/{image.lstrip('/')}"

    def from_product(self, product) -> Optional[str]:
        """Media attachment first, then the legacy column."""
        if product is None:
            return None

        if not isinstance(product, ProductImageRecord):
            product = ProductImageRecord.from_model(product)

        if product.attached_image_url:
            url = self.normalize(product.attached_image_url)
            if url:
                return url

        if product.image:
            return self.normalize(product.image)

        return None

    def for_order(self, order) -> Optional[str]:
        """Order snapshot first, then whatever the linked product still has."""
        if order is None:
            return None

        url = self.normalize(order.product_image)
        if url:
            return url

        return self.from_product(order.product)
