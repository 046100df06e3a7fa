from .products import ProductViewSet, CategoryViewSet, CampaignViewSet
from .orders import OrderViewSet

__all__ = ['ProductViewSet', 'CategoryViewSet', 'CampaignViewSet', 'OrderViewSet']
