"""Infrastructure ORM Models"""

from .user_model import UserModel
from .profile_models import SupplierProfileModel, BuyerProfileModel
from .catalog_models import CategoryModel, ProductModel
from .inquiry_model import InquiryModel
from .notification_models import NotificationModel, AdminNotificationModel
from .engagement_models import SavedProductModel, FollowedSupplierModel

__all__ = [
    'UserModel',
    'SupplierProfileModel',
    'BuyerProfileModel',
    'CategoryModel',
    'ProductModel',
    'InquiryModel',
    'NotificationModel',
    'AdminNotificationModel',
    'SavedProductModel',
    'FollowedSupplierModel',
]
