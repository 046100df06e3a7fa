"""
Campaign pricing
"""

from typing import Optional

from ..models import Campaign


def active_campaign_for(product, on=None) -> Optional[Campaign]:
    """First active campaign running for ``product`` on the given date (today by default)"""
    if product is None or product.pk is None:
        return None
    # Loaded by ProductQuerySet.with_active_campaigns() for today
    prefetched = getattr(product, 'active_campaigns', None)
    if prefetched is not None and on is None:
        return prefetched[0] if prefetched else None
    return Campaign.objects.active(on).for_product(product).order_by('-created_at').first()


def effective_price(product, on=None):
    """Campaign price when one is running, regular price otherwise"""
    campaign = active_campaign_for(product, on)
    if campaign is not None:
        return campaign.price
    return product.price


def campaign_fields(product, on=None) -> dict:
    """Fields the product API adds for a running campaign"""
    campaign = active_campaign_for(product, on)
    if campaign is None:
        return {}
    return {
        'campaign_price': campaign.price,
        'campaign_id': campaign.id,
        'campaign_name': campaign.name,
        'campaign_end_date': campaign.end_date,
    }
