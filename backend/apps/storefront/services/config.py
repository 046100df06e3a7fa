from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class StorefrontConfig:
    """Settings the storefront services need, passed in rather than looked up."""

    base_url: str
    admin_email: str = ''
    from_email: str = ''

    @classmethod
    def from_settings(cls):
        return cls(
            base_url=settings.APP_URL,
            admin_email=getattr(settings, 'ADMIN_ORDER_EMAIL', ''),
            from_email=settings.DEFAULT_FROM_EMAIL,
        )
